"""
LineHashScanner implementation for streaming line counts and MD5 digests.
"""

import hashlib
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from .interfaces import LineHashScannerInterface
from .models import DEFAULT_CHUNK_SIZE, FileMetadata, ScanError, describe_os_error

logger = logging.getLogger(__name__)


class LineCounter:
    """
    Incremental line counter over raw byte chunks.

    `\\n`, `\\r\\n` and a lone `\\r` each terminate a line. Bytes after the
    last terminator form one more (partial) line. No decoding is done, so
    binary content is counted by the same rule.
    """

    def __init__(self) -> None:
        self._count = 0
        self._pending_cr = False
        self._partial = False

    def feed(self, chunk: bytes) -> None:
        if not chunk:
            return

        lf = chunk.count(b"\n")
        cr = chunk.count(b"\r")
        crlf = chunk.count(b"\r\n")
        self._count += lf + cr - crlf

        # A CRLF split across chunks was counted twice
        if self._pending_cr and chunk[:1] == b"\n":
            self._count -= 1

        last = chunk[-1:]
        self._pending_cr = last == b"\r"
        self._partial = last not in (b"\r", b"\n")

    @property
    def total(self) -> int:
        return self._count + (1 if self._partial else 0)


class LineHashScanner(LineHashScannerInterface):
    """
    Concrete implementation of LineHashScannerInterface.

    Reads files in fixed-size chunks so memory use does not depend on
    file size. Any OSError raised while opening or reading is converted
    into a ScanError carrying a human-readable reason.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Initialize the scanner.

        Args:
            chunk_size: Bytes read per step. Must be positive.
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    def _iter_chunks(self, path: str | Path) -> Iterator[bytes]:
        with open(path, "rb") as fh:
            yield from iter(lambda: fh.read(self._chunk_size), b"")

    def _consume(self, path: str | Path, *sinks: Callable[[bytes], None]) -> None:
        try:
            for chunk in self._iter_chunks(path):
                for sink in sinks:
                    sink(chunk)
        except OSError as e:
            logger.debug(f"Scan failed for {path}: {e}")
            raise ScanError(path, describe_os_error(e)) from e

    def count_lines(self, path: str | Path) -> int:
        counter = LineCounter()
        self._consume(path, counter.feed)
        return counter.total

    def compute_hash(self, path: str | Path) -> str:
        digest = hashlib.md5()
        self._consume(path, digest.update)
        return digest.hexdigest()

    def scan(self, path: str | Path) -> FileMetadata:
        counter = LineCounter()
        digest = hashlib.md5()
        self._consume(path, counter.feed, digest.update)
        return FileMetadata(path=str(path), line_count=counter.total, md5=digest.hexdigest())
