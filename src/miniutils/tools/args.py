"""
Argument echoer.
"""

from typing import Sequence


def format_args(argv: Sequence[str]) -> str:
    """
    Render ``argv`` as ``N args: <a> <b>``.

    The suffix is singular only for exactly one argument; with no arguments
    the line is just ``0 args:``.
    """
    count = len(argv)
    header = f"{count} arg{'' if count == 1 else 's'}:"
    if not argv:
        return header
    return header + " " + " ".join(f"<{arg}>" for arg in argv)
