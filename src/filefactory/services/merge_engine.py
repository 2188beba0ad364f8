"""
Merge Engine for FileFactory.

Concatenates a selection of files and directories into one output file,
writing a metadata header ahead of each source's raw bytes and reporting
progress at fixed fractions of the total line count.
"""

import logging
import os
import time
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import BinaryIO, Optional

from filefactory.core.config import MergeConfig
from filefactory.core.header import DEFAULT_TIMESTAMP_FORMAT, HeaderRecord
from filefactory.core.line_hash_scanner import (
    DEFAULT_CHUNK_SIZE,
    LineHashScanner,
    LineHashScannerInterface,
    ScanError,
)
from filefactory.core.line_hash_scanner.models import describe_os_error
from filefactory.core.path_utils import expand_leaves
from filefactory.services.merge_models import (
    MergeError,
    MergeJob,
    MergeResult,
    OutputOpenError,
    OutputWriteError,
    SourceReadError,
)
from filefactory.services.progress import NullProgressReporter, ProgressReporter

logger = logging.getLogger(__name__)

DEFAULT_REPORT_STEPS = 6


class MergeEngine:
    """
    Streams headers and file bytes into a single output.

    One run() is a single blocking operation on the calling thread.
    Metadata failures on a file degrade its header and let the run
    continue; failures reading source bytes or writing the output abort
    the run. Either way run() returns a MergeResult instead of raising.
    """

    def __init__(
        self,
        scanner: Optional[LineHashScannerInterface] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        report_steps: int = DEFAULT_REPORT_STEPS,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        header_newline: str = "\n",
        follow_symlinks: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the merge engine.

        Args:
            scanner: Line/hash scanner. Defaults to a LineHashScanner
                     using the same chunk size.
            chunk_size: Bytes copied per read from each source.
            report_steps: Number of report thresholds; the step between
                          thresholds is max(total_lines // report_steps, 1).
            timestamp_format: strftime format for header timestamps.
            header_newline: Line terminator used inside header blocks.
            follow_symlinks: Descend into symlinked directories.
            clock: Wall-clock source for header timestamps.
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if report_steps < 1:
            raise ValueError(f"report_steps must be positive, got {report_steps}")

        self._scanner = scanner or LineHashScanner(chunk_size=chunk_size)
        self._chunk_size = chunk_size
        self._report_steps = report_steps
        self._timestamp_format = timestamp_format
        self._header_newline = header_newline
        self._follow_symlinks = follow_symlinks
        self._clock = clock or datetime.now

    @classmethod
    def from_config(
        cls,
        config: MergeConfig,
        scanner: Optional[LineHashScannerInterface] = None,
    ) -> "MergeEngine":
        """Create an engine from the merge section of the configuration."""
        return cls(
            scanner=scanner,
            chunk_size=config.chunk_size,
            report_steps=config.report_steps,
            timestamp_format=config.timestamp_format,
            header_newline=config.header_newline,
            follow_symlinks=config.follow_symlinks,
        )

    def expand(self, paths: Sequence[str], output_path: Optional[str] = None) -> list[str]:
        """Expand the selection into leaf files in merge order."""
        exclude = [output_path] if output_path else []
        return expand_leaves(paths, follow_symlinks=self._follow_symlinks, exclude=exclude)

    def count_total_lines(self, leaves: Sequence[str]) -> int:
        """
        Sum line counts over all leaves.

        A leaf that cannot be scanned contributes 0.
        """
        total = 0
        for leaf in leaves:
            try:
                total += self._scanner.count_lines(leaf)
            except ScanError as e:
                logger.warning(f"Could not count lines of {leaf}: {e.reason}")
        return total

    def run(
        self,
        paths: Sequence[str],
        output_path: str,
        append: bool = False,
        reporter: Optional[ProgressReporter] = None,
    ) -> MergeResult:
        """
        Merge the selected paths into output_path.

        Args:
            paths: Point-in-time snapshot of the selection, in merge order.
            output_path: File to create, truncate, or append to.
            append: Append when the output exists and is non-empty;
                    otherwise the output is created or truncated.
            reporter: Receives started/progress_changed/file_processed.

        Returns:
            MergeResult describing success, or the fatal error that
            aborted the run. A run aborted after writing began leaves
            the partial output in place.
        """
        reporter = reporter or NullProgressReporter()
        started_at = time.monotonic()

        leaves = self.expand(paths, output_path)
        total_lines = self.count_total_lines(leaves)
        job = MergeJob.create(leaves, total_lines, self._report_steps)
        result = MergeResult(success=False, output_path=output_path, total_lines=total_lines)

        logger.info(f"Merging {len(leaves)} files ({total_lines} lines) into {output_path}")

        try:
            output = self._open_output(output_path, append)
        except OutputOpenError as e:
            return self._fail(result, e, started_at)

        failure: Optional[MergeError] = None
        try:
            reporter.started(total_lines)
            for leaf in job.leaves:
                self._merge_leaf(job, leaf, output, reporter, result)
        except MergeError as e:
            failure = e
        finally:
            try:
                output.close()
            except OSError as e:
                if failure is None:
                    failure = OutputWriteError(
                        f"Failed to finish writing {output_path}: {describe_os_error(e)}",
                        path=output_path,
                    )

        result.processed_lines = job.processed_lines
        if failure is not None:
            return self._fail(result, failure, started_at)

        result.success = True
        result.duration_seconds = time.monotonic() - started_at
        result.message = (
            f"Merged {result.files_merged} files ({job.processed_lines} lines) into {output_path}"
        )
        logger.info(result.message)
        return result

    def _fail(self, result: MergeResult, error: MergeError, started_at: float) -> MergeResult:
        logger.error(f"Merge aborted: {error}")
        result.success = False
        result.error = error
        result.message = str(error)
        result.duration_seconds = time.monotonic() - started_at
        return result

    def _open_output(self, output_path: str, append: bool) -> BinaryIO:
        try:
            if append and os.path.isfile(output_path) and os.path.getsize(output_path) > 0:
                logger.debug(f"Appending to {output_path}")
                return open(output_path, "ab")
            return open(output_path, "wb")
        except OSError as e:
            raise OutputOpenError(
                f"Cannot open output file {output_path}: {describe_os_error(e)}",
                path=output_path,
            ) from e

    def _build_header(self, leaf: str, result: MergeResult) -> tuple[HeaderRecord, int]:
        timestamp = self._clock()
        try:
            metadata = self._scanner.scan(leaf)
        except ScanError as e:
            logger.warning(f"Metadata unavailable for {leaf}: {e.reason}")
            result.degraded_files.append(leaf)
            return HeaderRecord(timestamp=timestamp, path=leaf, failure_reason=e.reason), 0

        header = HeaderRecord(
            timestamp=timestamp,
            path=leaf,
            md5=metadata.md5,
            line_count=metadata.line_count,
        )
        return header, metadata.line_count

    def _merge_leaf(
        self,
        job: MergeJob,
        leaf: str,
        output: BinaryIO,
        reporter: ProgressReporter,
        result: MergeResult,
    ) -> None:
        header, file_lines = self._build_header(leaf, result)
        self._write(output, header.render(self._timestamp_format, self._header_newline), leaf)
        self._copy_source(leaf, output)
        result.files_merged += 1

        job.processed_lines += file_lines
        logger.debug(f"Wrote {leaf} ({file_lines} lines, {job.processed_lines}/{job.total_lines})")
        reporter.progress_changed(job.processed_lines)

        # One notification per threshold crossed, even when they repeat
        file_name = os.path.basename(leaf)
        while job.processed_lines >= job.report_interval:
            reporter.file_processed(file_name, file_lines, job.processed_lines, job.total_lines)
            job.report_interval += job.step

    def _copy_source(self, leaf: str, output: BinaryIO) -> None:
        try:
            source = open(leaf, "rb")
        except OSError as e:
            raise SourceReadError(
                f"Cannot read source file {leaf}: {describe_os_error(e)}", path=leaf
            ) from e

        with source:
            while True:
                try:
                    chunk = source.read(self._chunk_size)
                except OSError as e:
                    raise SourceReadError(
                        f"Failed reading source file {leaf}: {describe_os_error(e)}", path=leaf
                    ) from e
                if not chunk:
                    break
                self._write(output, chunk, leaf)

    def _write(self, output: BinaryIO, data: bytes, leaf: str) -> None:
        try:
            output.write(data)
        except OSError as e:
            raise OutputWriteError(
                f"Failed writing {leaf} to output: {describe_os_error(e)}", path=leaf
            ) from e
