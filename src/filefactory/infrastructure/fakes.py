"""
Fake implementations for testing.

Provides in-memory implementations of the scanner and reporter interfaces
for use in unit and integration tests without touching real failure modes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from filefactory.core.line_hash_scanner import (
    FileMetadata,
    LineHashScanner,
    LineHashScannerInterface,
    ScanError,
)


@dataclass
class RecordingProgressReporter:
    """
    Reporter that records every notification in call order.

    `events` holds tuples of (name, *args) across all three notifications.
    """

    events: list[tuple] = field(default_factory=list)

    def started(self, total_lines: int) -> None:
        self.events.append(("started", total_lines))

    def progress_changed(self, processed_lines: int) -> None:
        self.events.append(("progress_changed", processed_lines))

    def file_processed(
        self,
        file_name: str,
        file_lines: int,
        processed_lines: int,
        total_lines: int,
    ) -> None:
        self.events.append(("file_processed", file_name, file_lines, processed_lines, total_lines))

    def of(self, name: str) -> list[tuple]:
        """Return the argument tuples of every event with the given name."""
        return [event[1:] for event in self.events if event[0] == name]


class FaultyScanner(LineHashScannerInterface):
    """
    Scanner that fails for chosen files and delegates the rest.

    Files whose name is in `failing_names` raise ScanError with `reason`,
    both during counting and hashing.
    """

    def __init__(
        self,
        failing_names: set[str],
        reason: str = "simulated failure",
        delegate: LineHashScannerInterface | None = None,
    ):
        self.failing_names = failing_names
        self.reason = reason
        self._delegate = delegate or LineHashScanner()

    def _check(self, path: str | Path) -> None:
        if Path(path).name in self.failing_names:
            raise ScanError(path, self.reason)

    def count_lines(self, path: str | Path) -> int:
        self._check(path)
        return self._delegate.count_lines(path)

    def compute_hash(self, path: str | Path) -> str:
        self._check(path)
        return self._delegate.compute_hash(path)

    def scan(self, path: str | Path) -> FileMetadata:
        self._check(path)
        return self._delegate.scan(path)
