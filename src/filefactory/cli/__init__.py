"""
CLI for FileFactory.

Provides command-line interface for merging files and directories into a
single output, and an interactive shell for building the selection.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.syntax import Syntax

from filefactory.cli.progress import RichProgressReporter, create_merge_progress
from filefactory.cli.ui import render_error, render_merge_summary, render_warning
from filefactory.core.config import FileFactoryConfig, configure_logging, load_config
from filefactory.services import ServicesContainer, create_services

logger = logging.getLogger(__name__)

# Initialize Rich Console
console = Console()

app = typer.Typer(
    name="filefactory",
    help="File Factory - merge files and folders into one file with per-file headers",
    add_completion=False,
)


def _load_config(ctx: typer.Context) -> FileFactoryConfig:
    """Return the configuration loaded by the app callback."""
    config = ctx.obj.get("config") if ctx.obj else None
    return config or load_config()


def get_services(ctx: typer.Context) -> ServicesContainer:
    """Initialize services from the configuration loaded for this invocation."""
    return create_services(config=_load_config(ctx))


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (.yaml, .yml or .json)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override the configured log level"
    ),
):
    """Load configuration and set up logging for every command."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if log_level:
        config.logging.level = log_level
    configure_logging(config.logging)
    ctx.obj = {"config": config}


@app.command()
def merge(
    ctx: typer.Context,
    paths: list[str] = typer.Argument(..., help="Files or directories to merge, in order"),
    output: str = typer.Option(..., "--output", "-o", help="File to write"),
    append: bool = typer.Option(
        False, "--append", "-a", help="Append when the output already has content"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide per-milestone progress lines"),
):
    """Merge files and directories into one output file."""
    try:
        services = get_services(ctx)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    accepted = services.file_list.add_many(paths)
    unclaimed = set(accepted)
    for path in paths:
        if path in unclaimed:
            unclaimed.discard(path)
        else:
            render_warning(f"Skipping {path}: missing or given twice", console)

    if not accepted:
        render_error("Nothing to merge: none of the given paths exist.", console)
        raise typer.Exit(1)

    console.print(f"[bold blue]Merging[/bold blue] {len(accepted)} path(s) into {output}...")

    with create_merge_progress(console) as progress:
        reporter = RichProgressReporter(progress, show_milestones=not quiet)
        result = services.merge_engine.run(
            services.file_list.snapshot(),
            output,
            append=append,
            reporter=reporter,
        )

    render_merge_summary(result, console)
    if not result.success:
        raise typer.Exit(1)


@app.command("config")
def show_config(ctx: typer.Context):
    """Show the effective configuration as YAML."""
    console.print(Syntax(_load_config(ctx).to_yaml(), "yaml", theme="ansi_dark"))


@app.command()
def shell(ctx: typer.Context):
    """Start the interactive shell for selecting and merging files."""
    try:
        from filefactory.cli.repl import REPLController

        services = get_services(ctx)
        repl = REPLController(services=services, console=console)
        repl.run()

    except KeyboardInterrupt:
        console.print("\n[cyan]Goodbye![/cyan]")
    except Exception as e:
        logger.debug("Shell terminated", exc_info=True)
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def main() -> None:
    """Console script entry point."""
    load_dotenv()
    app()


if __name__ == "__main__":
    main()
