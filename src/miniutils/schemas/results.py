"""
Pydantic schemas for structured utility results.
"""

from typing import List
from pydantic import BaseModel


class UnlinkFailure(BaseModel):
    """A path that could not be removed, with the OS error text."""
    path: str
    error: str


class UnlinkReport(BaseModel):
    """Outcome of removing a batch of files, in argument order."""
    removed: List[str] = []
    failures: List[UnlinkFailure] = []

    @property
    def ok(self) -> bool:
        return not self.failures


class ToolInfo(BaseModel):
    """Describes one utility for the ``miniutils tools`` listing."""
    name: str
    usage: str
    summary: str
