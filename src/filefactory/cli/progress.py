"""
Rich progress display for merge runs.

Implements the ProgressReporter notifications on top of a rich Progress
bar, and prints a short status block at each report threshold.
"""

from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from filefactory.services.progress import percent


def create_merge_progress(console: Console) -> Progress:
    """Build the progress bar layout used for merges."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    )


class RichProgressReporter:
    """
    Drives a rich Progress task from merge notifications.

    The bar counts lines. With `show_milestones`, each threshold prints
    the file being processed, its line count, and overall progress.
    """

    def __init__(
        self,
        progress: Progress,
        console: Optional[Console] = None,
        show_milestones: bool = True,
    ):
        self._progress = progress
        self._console = console or progress.console
        self._show_milestones = show_milestones
        self._task: Optional[TaskID] = None

    def started(self, total_lines: int) -> None:
        self._task = self._progress.add_task("Merging lines", total=total_lines, completed=0)

    def progress_changed(self, processed_lines: int) -> None:
        if self._task is not None:
            self._progress.update(self._task, completed=processed_lines)

    def file_processed(
        self,
        file_name: str,
        file_lines: int,
        processed_lines: int,
        total_lines: int,
    ) -> None:
        if not self._show_milestones:
            return
        self._console.print(f"[cyan]Processing:[/cyan] {file_name}")
        self._console.print(f"  Lines: {file_lines}")
        self._console.print(
            f"  Total progress: [bold]{percent(processed_lines, total_lines):.2f}%[/bold]\n"
        )
