"""
UI components module for FileFactory.

Provides styled terminal output using Rich library for the welcome
banner, help, the current selection, merge summaries, and errors.
"""

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from filefactory import __version__

if TYPE_CHECKING:
    from filefactory.cli.router import CommandInfo
    from filefactory.services.merge_models import MergeResult


BANNER = r"""
  _____ _ _        _____          _
 |  ___(_) | ___  |  ___|_ _  ___| |_ ___  _ __ _   _
 | |_  | | |/ _ \ | |_ / _` |/ __| __/ _ \| '__| | | |
 |  _| | | |  __/ |  _| (_| | (__| || (_) | |  | |_| |
 |_|   |_|_|\___| |_|  \__,_|\___|\__\___/|_|   \__, |
                                                |___/
"""


def render_welcome_banner(console: Console) -> None:
    """
    Render the welcome banner with ASCII art and quick start hints.

    Args:
        console: Rich Console instance for output.
    """
    content = Text()
    content.append_text(Text(BANNER, style="bold cyan"))
    content.append("\n")
    content.append("File Factory", style="bold white")
    content.append(f" v{__version__}\n\n", style="dim")
    content.append("Select files with ", style="white")
    content.append("add", style="bold green")
    content.append(", write them with ", style="white")
    content.append("merge", style="bold green")
    content.append(". Type ", style="white")
    content.append("help", style="bold green")
    content.append(" for all commands, ", style="white")
    content.append("exit", style="bold yellow")
    content.append(" to quit.\n", style="white")
    content.append("Avoid starting other programs while a merge is running.", style="bold red")

    console.print(Panel(content, border_style="cyan", padding=(0, 2)))


def render_help(commands: list["CommandInfo"], console: Console) -> None:
    """
    Render help information as a styled table.

    Args:
        commands: List of CommandInfo objects to display.
        console: Rich Console instance for output.
    """
    table = Table(
        title="Available Commands",
        title_style="bold cyan",
        border_style="blue",
        show_header=True,
        header_style="bold white",
    )

    table.add_column("Command", style="green", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Usage", style="dim cyan")

    for cmd in sorted(commands, key=lambda c: c.name):
        name = cmd.name
        if cmd.aliases:
            name += f" ({', '.join(cmd.aliases)})"
        table.add_row(name, cmd.description, cmd.usage)

    console.print(table)
    console.print()


def render_file_list(paths: Sequence[str], console: Console) -> None:
    """
    Render the current selection in merge order.

    Each row shows whether the entry is a file or a directory, its name,
    and the path as it was selected.
    """
    if not paths:
        console.print("[yellow]No files selected.[/yellow]")
        return

    table = Table(title="Selected Paths", border_style="blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Path", style="white")

    for index, path in enumerate(paths, start=1):
        if os.path.isdir(path):
            kind = "Folder"
        elif os.path.isfile(path):
            kind = "File"
        else:
            kind = "[red]Missing[/red]"
        name = os.path.basename(os.path.normpath(path))
        table.add_row(str(index), kind, name, path)

    console.print(table)


def render_merge_summary(result: "MergeResult", console: Console) -> None:
    """Render the outcome of a merge run."""
    summary = Table.grid(padding=1)
    summary.add_column(style="bold")
    summary.add_column()
    summary.add_row("Output:", result.output_path)
    summary.add_row("Files Merged:", str(result.files_merged))
    summary.add_row("Lines:", f"{result.processed_lines}/{result.total_lines}")
    summary.add_row("Duration:", f"{result.duration_seconds:.2f}s")

    if result.degraded_files:
        summary.add_row("Metadata Failures:", f"[yellow]{len(result.degraded_files)}[/yellow]")

    if result.success:
        title = "[bold green]Merge Complete[/bold green]"
        border = "green"
    else:
        summary.add_row("Error:", f"[red]{result.message}[/red]")
        title = "[bold red]Merge Failed[/bold red]"
        border = "red"

    console.print(Panel(summary, title=title, border_style=border, expand=False))

    if result.degraded_files:
        console.print("\n[bold yellow]Headers without metadata:[/bold yellow]")
        for path in result.degraded_files[:5]:
            console.print(f"  - {path}")
        if len(result.degraded_files) > 5:
            console.print(f"  ... and {len(result.degraded_files) - 5} more")


def render_error(message: str, console: Console) -> None:
    """
    Render an error message in a visually distinct red panel.

    Args:
        message: Error message to display.
        console: Rich Console instance for output.
    """
    error_text = Text()
    error_text.append("Error: ", style="bold red")
    error_text.append(message, style="red")

    console.print(
        Panel(
            error_text,
            border_style="red",
            title="[bold red]Error[/bold red]",
            expand=False,
        )
    )


def render_warning(message: str, console: Console) -> None:
    """Render a warning message in yellow."""
    console.print(f"[yellow]Warning:[/yellow] {message}")
