"""
Property-based tests for line counting and merged output layout.
"""

import hashlib
import tempfile
from datetime import datetime
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from filefactory.core.header import HeaderRecord
from filefactory.core.line_hash_scanner import LineHashScanner
from filefactory.infrastructure import RecordingProgressReporter
from filefactory.services import MergeEngine

STAMP = datetime(2020, 2, 2, 2, 2, 2)

# Bias towards line terminators so CR/LF combinations show up often
content = st.lists(
    st.sampled_from([b"\n", b"\r", b"\r\n", b"x", b"yz", b"\x00", "é".encode()]),
    max_size=40,
).map(b"".join)


def reference_line_count(data: bytes) -> int:
    """Count lines by splitting on terminators, as a line reader would."""
    normalized = data.replace(b"\r\n", b"\n").replace(b"\r", b"\n")
    if not normalized:
        return 0
    lines = normalized.count(b"\n")
    return lines if normalized.endswith(b"\n") else lines + 1


@given(data=content, chunk_size=st.integers(min_value=1, max_value=8))
@settings(max_examples=200)
def test_line_count_independent_of_chunking(data: bytes, chunk_size: int):
    """
    For any content and chunk size, the streamed count equals the
    reference count and the digest equals hashlib's.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "f.bin"
        path.write_bytes(data)

        metadata = LineHashScanner(chunk_size=chunk_size).scan(path)

        assert metadata.line_count == reference_line_count(data)
        assert metadata.md5 == hashlib.md5(data).hexdigest()


@given(
    files=st.lists(content, min_size=0, max_size=6),
    report_steps=st.integers(min_value=1, max_value=10),
)
@settings(max_examples=100, deadline=None)
def test_merge_output_and_progress(files: list[bytes], report_steps: int):
    """
    For any set of files, the output is each header followed by the raw
    bytes, the processed total equals the sum of counts, and one
    file_processed notification is sent per threshold reached.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        paths = []
        for i, data in enumerate(files):
            path = root / f"f{i}.bin"
            path.write_bytes(data)
            paths.append(str(path))
        out = root / "out.bin"
        reporter = RecordingProgressReporter()
        engine = MergeEngine(report_steps=report_steps, clock=lambda: STAMP)

        result = engine.run(paths, str(out), reporter=reporter)

        counts = [reference_line_count(data) for data in files]
        expected = b"".join(
            HeaderRecord(
                timestamp=STAMP,
                path=path,
                md5=hashlib.md5(data).hexdigest(),
                line_count=count,
            ).render()
            + data
            for path, data, count in zip(paths, files, counts)
        )
        total = sum(counts)
        step = max(total // report_steps, 1)

        assert result.success
        assert out.read_bytes() == expected
        assert result.total_lines == result.processed_lines == total
        assert len(reporter.of("progress_changed")) == len(files)
        assert len(reporter.of("file_processed")) == total // step
        processed = [event[2] for event in reporter.of("file_processed")]
        assert processed == sorted(processed)
