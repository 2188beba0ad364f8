"""
Data models and errors for the line and hash scanner.
"""

from dataclasses import dataclass
from pathlib import Path

# Bytes read per streaming step when the caller does not choose one
DEFAULT_CHUNK_SIZE = 65536


@dataclass(frozen=True)
class FileMetadata:
    """
    Line count and content digest of a single file.

    Attributes:
        path: The file as it was given to the scanner
        line_count: Number of lines as a line-oriented reader sees them
        md5: Lowercase hexadecimal MD5 digest of the raw bytes
    """

    path: str
    line_count: int
    md5: str


class ScanError(Exception):
    """Raised when a file cannot be read for line counting or hashing."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


def describe_os_error(error: OSError) -> str:
    """Render an OSError as a short human-readable reason."""
    if error.strerror:
        return error.strerror
    return str(error) or error.__class__.__name__
