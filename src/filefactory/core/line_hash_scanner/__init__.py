"""
LineHashScanner module for FileFactory.

Provides streaming line counting and MD5 content hashing for single files.
"""

from .interfaces import LineHashScannerInterface
from .models import DEFAULT_CHUNK_SIZE, FileMetadata, ScanError
from .scanner import LineCounter, LineHashScanner

__all__ = [
    # Main classes
    "LineHashScanner",
    "LineHashScannerInterface",
    "LineCounter",
    "FileMetadata",
    # Errors
    "ScanError",
    # Constants
    "DEFAULT_CHUNK_SIZE",
]
