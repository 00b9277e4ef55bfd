"""
File modification time formatting for ``getmtime``.

``FORMAT`` is a strftime(3) format string. The extra token ``%N`` stands for
the file currently being formatted and is substituted before strftime runs.
"""

import logging
import os
import re
from datetime import datetime
from typing import Iterable, Iterator, Tuple

from miniutils.core.settings import NAME_TOKEN

logger = logging.getLogger(__name__)

# ``%%`` must be matched first so that ``%%N`` stays a literal "%N".
_TOKEN_PATTERN = re.compile("%%|" + re.escape(NAME_TOKEN))


def expand_name_token(fmt: str, path: str) -> str:
    """
    Replace every ``%N`` in ``fmt`` with ``path``.

    Percent signs inside ``path`` are doubled so strftime prints them as-is.
    """
    escaped = path.replace("%", "%%")
    return _TOKEN_PATTERN.sub(lambda m: m.group(0) if m.group(0) == "%%" else escaped, fmt)


def format_mtime(fmt: str, path: str) -> str:
    """
    Return the local-time mtime of ``path`` formatted with ``fmt``.

    Raises ``OSError`` if the file cannot be stat'ed and ``ValueError`` if the
    format cannot be applied.
    """
    st = os.stat(path)
    modified = datetime.fromtimestamp(st.st_mtime)
    logger.debug("mtime of %s is %s", path, modified.isoformat())
    return modified.strftime(expand_name_token(fmt, path))


def iter_mtimes(fmt: str, paths: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(path, formatted)`` pairs in order.

    Lazily evaluated: an error on one path surfaces only after the earlier
    pairs have been yielded.
    """
    for path in paths:
        yield path, format_mtime(fmt, path)
