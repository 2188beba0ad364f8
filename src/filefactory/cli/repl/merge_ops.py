"""
Merge operations for the FileFactory shell.

Runs the merge engine over the current selection with a live progress
bar and renders the result.
"""

from typing import TYPE_CHECKING

from rich.console import Console

from filefactory.cli.progress import RichProgressReporter, create_merge_progress
from filefactory.cli.ui import render_merge_summary

if TYPE_CHECKING:
    from filefactory.services.container import ServicesContainer
    from filefactory.services.merge_models import MergeResult


class MergeOperations:
    """Handles the shell's merge command."""

    def __init__(self, services: "ServicesContainer", console: Console):
        """
        Initialize merge operations.

        Args:
            services: Services container with the selection and engine.
            console: Rich console for output.
        """
        self.services = services
        self.console = console

    def run_merge(self, output: str, append: bool = False, milestones: bool = True) -> "MergeResult":
        """
        Merge a snapshot of the current selection into `output`.

        The snapshot is taken before the run starts; the shell does not
        accept further commands until the run returns.
        """
        paths = self.services.file_list.snapshot()
        mode = "Appending to" if append else "Writing"
        self.console.print(f"[bold blue]{mode}[/bold blue] {output} from {len(paths)} selected path(s)...")

        with create_merge_progress(self.console) as progress:
            reporter = RichProgressReporter(progress, show_milestones=milestones)
            result = self.services.merge_engine.run(
                paths,
                output,
                append=append,
                reporter=reporter,
            )

        render_merge_summary(result, self.console)
        return result
