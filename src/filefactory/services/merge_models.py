"""
Merge Engine data models.

Contains dataclasses for merge jobs and results, and the fatal error taxonomy.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MergeJob:
    """
    Transient state of one run() call.

    Attributes:
        leaves: Expanded leaf files in merge order.
        total_lines: Sum of line counts from the pre-pass.
        step: Distance between report thresholds, at least 1.
        processed_lines: Running total of lines written so far.
        report_interval: Next threshold that triggers file_processed.
    """

    leaves: list[str]
    total_lines: int
    step: int
    processed_lines: int = 0
    report_interval: int = 0

    @classmethod
    def create(cls, leaves: list[str], total_lines: int, report_steps: int) -> "MergeJob":
        step = max(total_lines // report_steps, 1)
        return cls(leaves=leaves, total_lines=total_lines, step=step, report_interval=step)


@dataclass
class MergeResult:
    """Terminal result of a merge run."""

    success: bool
    output_path: str
    total_lines: int = 0
    processed_lines: int = 0
    files_merged: int = 0
    degraded_files: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    message: Optional[str] = None
    error: Optional["MergeError"] = None


class MergeError(Exception):
    """Base class for failures that abort a whole merge run."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class OutputOpenError(MergeError):
    """The output file could not be created, truncated, or opened for append."""

    pass


class SourceReadError(MergeError):
    """A source file's bytes could not be read after its header was written."""

    pass


class OutputWriteError(MergeError):
    """Writing to the already opened output file failed."""

    pass
