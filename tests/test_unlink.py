# tests/test_unlink.py

import os

import pytest
from typer.testing import CliRunner

from miniutils.cli import unlink_cli
from miniutils.tools.unlink import unlink_files

runner = CliRunner()


@pytest.fixture
def files(tmp_path):
    paths = []
    for i in range(3):
        path = tmp_path / f"file{i}"
        path.write_text("x")
        paths.append(str(path))
    return paths


def test_unlink_all(files):
    report = unlink_files(files)
    assert report.ok
    assert report.removed == files
    assert not any(os.path.exists(p) for p in files)


def test_unlink_continues_past_failure(files, tmp_path):
    missing = str(tmp_path / "missing")
    report = unlink_files([files[0], missing, files[1], files[2]])
    assert not report.ok
    assert report.removed == files
    assert [f.path for f in report.failures] == [missing]
    assert report.failures[0].error == "No such file or directory"


def test_unlink_directory_fails(tmp_path):
    directory = tmp_path / "dir"
    directory.mkdir()
    report = unlink_files([str(directory)])
    assert not report.ok
    assert directory.exists()


# ==== CLI Tests ====

def test_cli_removes_files(files):
    result = runner.invoke(unlink_cli.app, files)
    assert result.exit_code == 0
    assert result.output == ""
    assert not any(os.path.exists(p) for p in files)


def test_cli_reports_failure_and_exits_1(files, tmp_path):
    missing = str(tmp_path / "missing")
    result = runner.invoke(unlink_cli.app, [files[0], missing, files[1]])
    assert result.exit_code == 1
    assert f"{missing}: No such file or directory" in result.output
    assert not os.path.exists(files[0])
    assert not os.path.exists(files[1])


def test_cli_no_filenames_exits_2():
    result = runner.invoke(unlink_cli.app, [])
    assert result.exit_code == 2
    assert "no filenames provided" in result.output


def test_cli_dash_prefixed_filename(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "-f").write_text("x")
    result = runner.invoke(unlink_cli.app, ["-f"])
    assert result.exit_code == 0
    assert not (tmp_path / "-f").exists()


def test_cli_double_dash_is_a_filename(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "--").write_text("x")
    result = runner.invoke(unlink_cli.app, ["--"])
    assert result.exit_code == 0
    assert not (tmp_path / "--").exists()


def test_cli_missing_double_dash_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(unlink_cli.app, ["--"])
    assert result.exit_code == 1
    assert "--: No such file or directory" in result.output
