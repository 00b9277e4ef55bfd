"""
Fibonacci numbers over Python's arbitrary-precision integers.
"""

import logging
import re

from miniutils.core.errors import InputValidationError, UsageError

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"[0-9]+")


def parse_index(text: str) -> int:
    """
    Parse a Fibonacci index given as a decimal string of any size.

    Only ASCII digits are accepted: no sign, no underscores, no whitespace.
    """
    if text is None:
        raise UsageError("no index provided")
    if not _INDEX_PATTERN.fullmatch(text):
        raise InputValidationError(f"invalid index {text!r}: expected a non-negative integer")
    return int(text)


def fibonacci(index: int) -> int:
    """
    Return the Fibonacci number at ``index`` for the sequence 1, 1, 2, 3, 5, ...

    The sequence is 1-indexed; index 0 yields 1, the same as index 1.
    """
    if index < 0:
        raise InputValidationError(f"invalid index {index}: expected a non-negative integer")

    last, cur = 1, 1
    for _ in range(2, index + 1):
        last, cur = cur, last + cur
    logger.debug("Computed fibonacci(%d) with %d bits", index, last.bit_length())
    return last
