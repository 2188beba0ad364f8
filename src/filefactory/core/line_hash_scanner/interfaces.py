"""
Abstract interfaces for line counting and content hashing.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from .models import FileMetadata


class LineHashScannerInterface(ABC):
    """
    Abstract interface for per-file metadata scanning.

    Implementations must stream file content rather than load whole files,
    and must raise ScanError for any file that cannot be read.
    """

    @abstractmethod
    def count_lines(self, path: str | Path) -> int:
        """
        Count the lines of a file as a line-oriented reader would.

        Args:
            path: File to count

        Returns:
            Number of lines, 0 for an empty file

        Raises:
            ScanError: If the file cannot be opened or read
        """
        pass

    @abstractmethod
    def compute_hash(self, path: str | Path) -> str:
        """
        Compute the MD5 digest of a file's raw bytes.

        Args:
            path: File to hash

        Returns:
            32 lowercase hexadecimal characters

        Raises:
            ScanError: If the file cannot be opened or read
        """
        pass

    @abstractmethod
    def scan(self, path: str | Path) -> FileMetadata:
        """
        Compute line count and digest together.

        Raises:
            ScanError: If the file cannot be opened or read
        """
        pass
