"""
Progress notification contract driven by the merge engine.

All notifications are delivered synchronously on the thread that called
MergeEngine.run(), in file-processing order, never concurrently. A
consumer rendering on another thread must hand the values off itself.
"""

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ProgressReporter(Protocol):
    """Receives merge progress notifications."""

    def started(self, total_lines: int) -> None:
        """Called exactly once, before the first byte is written."""
        ...

    def progress_changed(self, processed_lines: int) -> None:
        """Called exactly once per leaf file, after it is written."""
        ...

    def file_processed(
        self,
        file_name: str,
        file_lines: int,
        processed_lines: int,
        total_lines: int,
    ) -> None:
        """Called once per report threshold crossed by the running total."""
        ...


class NullProgressReporter:
    """Reporter that ignores every notification."""

    def started(self, total_lines: int) -> None:
        pass

    def progress_changed(self, processed_lines: int) -> None:
        pass

    def file_processed(
        self,
        file_name: str,
        file_lines: int,
        processed_lines: int,
        total_lines: int,
    ) -> None:
        pass


class LoggingProgressReporter:
    """Reporter that writes threshold notifications to the log."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def started(self, total_lines: int) -> None:
        self._log.info(f"Merge started: {total_lines} lines")

    def progress_changed(self, processed_lines: int) -> None:
        self._log.debug(f"Processed lines: {processed_lines}")

    def file_processed(
        self,
        file_name: str,
        file_lines: int,
        processed_lines: int,
        total_lines: int,
    ) -> None:
        self._log.info(
            f"Processing {file_name} ({file_lines} lines), "
            f"total progress {percent(processed_lines, total_lines):.2f}%"
        )


def percent(processed_lines: int, total_lines: int) -> float:
    """Overall progress as a percentage; 100 when there is nothing to process."""
    if total_lines <= 0:
        return 100.0
    return processed_lines / total_lines * 100
