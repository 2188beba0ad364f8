"""
Unit tests for LineHashScanner and LineCounter.
"""

import hashlib
from pathlib import Path

import pytest

from filefactory.core.line_hash_scanner import LineHashScanner, ScanError
from filefactory.core.line_hash_scanner.scanner import LineCounter


def _write(tmp_path: Path, data: bytes, name: str = "sample.bin") -> Path:
    path = tmp_path / name
    path.write_bytes(data)
    return path


class TestLineCounting:
    """Line terminators and partial lines."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"", 0),
            (b"a", 1),
            (b"a\n", 1),
            (b"a\nb", 2),
            (b"a\nb\n", 2),
            (b"a\r\nb\r\n", 2),
            (b"a\rb\r", 2),
            (b"a\n\nb\n", 3),
            (b"\n\n\n", 3),
            (b"a\r\n\r\nb", 3),
            (b"a\n\rb", 3),
        ],
    )
    def test_count_lines(self, tmp_path: Path, data: bytes, expected: int):
        path = _write(tmp_path, data)

        assert LineHashScanner().count_lines(path) == expected

    def test_binary_content_is_counted(self, tmp_path: Path):
        path = _write(tmp_path, b"\x00\xff\n\x89PNG\r\n\x1a")

        assert LineHashScanner().count_lines(path) == 3

    def test_crlf_split_across_chunks(self, tmp_path: Path):
        path = _write(tmp_path, b"a\r\nb\r\nc\r\n")

        for chunk_size in (1, 2, 3, 4):
            assert LineHashScanner(chunk_size=chunk_size).count_lines(path) == 3

    def test_counter_matches_whole_buffer_when_fed_bytewise(self):
        data = b"x\r\r\ny\n\rz"
        whole = LineCounter()
        whole.feed(data)
        bytewise = LineCounter()
        for i in range(len(data)):
            bytewise.feed(data[i : i + 1])

        assert whole.total == bytewise.total == 5

    def test_count_is_idempotent(self, tmp_path: Path):
        path = _write(tmp_path, b"one\ntwo\nthree")
        scanner = LineHashScanner()

        assert scanner.count_lines(path) == scanner.count_lines(path) == 3


class TestHashing:
    """MD5 digests."""

    def test_empty_file_digest(self, tmp_path: Path):
        path = _write(tmp_path, b"")

        assert LineHashScanner().compute_hash(path) == "d41d8cd98f00b204e9800998ecf8427e"

    def test_digest_matches_hashlib_for_small_chunks(self, tmp_path: Path):
        data = bytes(range(256)) * 40
        path = _write(tmp_path, data)

        digest = LineHashScanner(chunk_size=7).compute_hash(path)

        assert digest == hashlib.md5(data).hexdigest()
        assert digest == digest.lower()
        assert len(digest) == 32

    def test_scan_returns_both_in_one_pass(self, tmp_path: Path):
        data = b"alpha\nbeta\n"
        path = _write(tmp_path, data)

        metadata = LineHashScanner().scan(path)

        assert metadata.path == str(path)
        assert metadata.line_count == 2
        assert metadata.md5 == hashlib.md5(data).hexdigest()


class TestErrors:
    """Failure handling."""

    def test_missing_file_raises_scan_error(self, tmp_path: Path):
        missing = tmp_path / "nope.txt"
        scanner = LineHashScanner()

        with pytest.raises(ScanError) as exc_info:
            scanner.count_lines(missing)
        assert str(exc_info.value.path) == str(missing)
        assert exc_info.value.reason

        with pytest.raises(ScanError):
            scanner.compute_hash(missing)

    def test_directory_raises_scan_error(self, tmp_path: Path):
        with pytest.raises(ScanError):
            LineHashScanner().scan(tmp_path)

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            LineHashScanner(chunk_size=0)
