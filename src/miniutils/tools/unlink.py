"""
Multi-file unlink that keeps going past individual failures.
"""

import logging
import os
from typing import Iterable

from miniutils.schemas.results import UnlinkFailure, UnlinkReport

logger = logging.getLogger(__name__)


def unlink_files(paths: Iterable[str]) -> UnlinkReport:
    """
    Unlink each path in order and report what happened.

    A failure on one path never stops the remaining ones.
    """
    report = UnlinkReport()
    for path in paths:
        try:
            os.unlink(path)
        except OSError as e:
            logger.debug("Failed to unlink %s: %r", path, e)
            report.failures.append(UnlinkFailure(path=path, error=e.strerror or str(e)))
            continue
        logger.debug("Unlinked %s", path)
        report.removed.append(path)
    return report
