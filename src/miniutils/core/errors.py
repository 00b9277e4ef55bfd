"""
Exceptions raised by the utilities.

Operations in ``miniutils.tools`` raise these; the CLI layer turns them into
a message on stderr and the matching exit code.
"""

from typing import Optional

from miniutils.core.settings import EXIT_FAILURE


class MiniutilsError(Exception):
    """Base class for every error a utility reports to the user."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(MiniutilsError):
    """A required argument is missing."""


class InputValidationError(MiniutilsError):
    """An argument is present but malformed, e.g. a non-numeric index."""
