"""
Command handlers for the FileFactory shell.

Provides handler functions for each shell command, bridging the
interactive interface with the selection model and the merge engine.
"""

from typing import TYPE_CHECKING

from filefactory.cli.parser import ParsedCommand
from filefactory.cli.router import ArgumentInfo, CommandHandler, CommandResult, CommandRouter

if TYPE_CHECKING:
    from filefactory.core.file_list import FileListModel
    from filefactory.services.container import ServicesContainer


def create_help_handler(router: CommandRouter) -> CommandHandler:
    """
    Create a help command handler.

    Args:
        router: The command router to get command info from.

    Returns:
        Handler function for the help command.
    """

    def handle_help(command: ParsedCommand) -> CommandResult:
        """Display help information."""
        return CommandResult(
            success=True,
            message="help",
            data=router.get_available_commands(),
        )

    return handle_help


def handle_exit(command: ParsedCommand) -> CommandResult:
    """Handle exit/quit commands."""
    return CommandResult(
        success=True,
        message="Goodbye!",
        should_exit=True,
    )


def create_add_handler(file_list: "FileListModel") -> CommandHandler:
    """
    Create an add command handler.

    All paths given in one command are added as a single undoable step.
    Paths that are missing or already selected are skipped.
    """

    def handle_add(command: ParsedCommand) -> CommandResult:
        if not command.args:
            return CommandResult(
                success=False,
                message="Usage: add <path> [path ...]\n\nSelect files or directories to merge.",
            )

        added = file_list.add_many(command.args)
        skipped = [p for p in command.args if p not in added]

        parts = [f"Added {len(added)} path(s)."]
        if skipped:
            parts.append(f"Skipped (missing or already selected): {', '.join(skipped)}")
        return CommandResult(
            success=True,
            message=" ".join(parts),
            data={"added": added, "skipped": skipped},
        )

    return handle_add


def _resolve_removals(file_list: "FileListModel", args: list[str]) -> list[str]:
    """Map arguments to selected paths; a number not itself selected is a 1-based row."""
    current = file_list.snapshot()
    resolved: list[str] = []
    for arg in args:
        if arg in file_list:
            resolved.append(arg)
        elif arg.isdigit() and 1 <= int(arg) <= len(current):
            resolved.append(current[int(arg) - 1])
        else:
            resolved.append(arg)
    return resolved


def create_remove_handler(file_list: "FileListModel") -> CommandHandler:
    """Create a remove command handler."""

    def handle_remove(command: ParsedCommand) -> CommandResult:
        if not command.args:
            return CommandResult(
                success=False,
                message="Usage: remove <path|#> [path|# ...]\n\nDrop entries from the selection.",
            )

        removed = file_list.remove_selected(_resolve_removals(file_list, command.args))
        return CommandResult(success=True, message=f"Removed {removed} path(s).")

    return handle_remove


def create_undo_handler(file_list: "FileListModel") -> CommandHandler:
    """Create an undo command handler."""

    def handle_undo(command: ParsedCommand) -> CommandResult:
        if not file_list.undo():
            return CommandResult(success=True, message="Nothing to undo.")
        return CommandResult(success=True, message=f"Undone. {len(file_list)} path(s) selected.")

    return handle_undo


def create_redo_handler(file_list: "FileListModel") -> CommandHandler:
    """Create a redo command handler."""

    def handle_redo(command: ParsedCommand) -> CommandResult:
        if not file_list.redo():
            return CommandResult(success=True, message="Nothing to redo.")
        return CommandResult(success=True, message=f"Redone. {len(file_list)} path(s) selected.")

    return handle_redo


def create_list_handler(file_list: "FileListModel") -> CommandHandler:
    """Create a list command handler."""

    def handle_list(command: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, message="list", data=file_list.snapshot())

    return handle_list


def create_clear_handler(file_list: "FileListModel") -> CommandHandler:
    """Create a clear command handler."""

    def handle_clear(command: ParsedCommand) -> CommandResult:
        file_list.clear()
        return CommandResult(success=True, message="Selection cleared.")

    return handle_clear


def create_merge_handler(file_list: "FileListModel") -> CommandHandler:
    """
    Create a merge command handler.

    The handler only validates the request; the controller runs the
    merge so it can attach a progress display.
    """

    def handle_merge(command: ParsedCommand) -> CommandResult:
        if not command.args:
            return CommandResult(
                success=False,
                message="Usage: merge <output> [--append] [--quiet]\n\n"
                "Write every selected file into <output>.",
            )
        if len(file_list) == 0:
            return CommandResult(
                success=False,
                message="Nothing to merge. Use 'add <path>' to select files first.",
            )

        return CommandResult(
            success=True,
            message=f"merge:{command.args[0]}",
            data={
                "output": command.args[0],
                "append": command.flag("append", "a"),
                "milestones": not command.flag("quiet", "q"),
            },
        )

    return handle_merge


def create_config_handler(services: "ServicesContainer") -> CommandHandler:
    """Create a config command handler."""

    def handle_config(command: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, message="config", data=services.config.to_yaml())

    return handle_config


def register_all_commands(router: CommandRouter, services: "ServicesContainer") -> None:
    """
    Register all shell commands with the router.

    Args:
        router: Command router to register with.
        services: Services container holding the selection and engine.
    """
    file_list = services.file_list

    router.register(
        name="help",
        handler=create_help_handler(router),
        description="Display available commands and their usage",
        usage="help",
        aliases=["?"],
    )

    router.register(
        name="exit",
        handler=handle_exit,
        description="Exit the interactive shell",
        usage="exit",
        aliases=["quit", "q"],
    )

    router.register(
        name="add",
        handler=create_add_handler(file_list),
        description="Select files or directories (one undoable step per command)",
        usage="add <path> [path ...]",
        arguments=[
            ArgumentInfo(name="path", description="Existing file or directory"),
        ],
        takes_paths=True,
    )

    router.register(
        name="remove",
        handler=create_remove_handler(file_list),
        description="Remove entries from the selection by path or row number",
        usage="remove <path|#> [path|# ...]",
        arguments=[
            ArgumentInfo(name="path", description="Selected path or its row number in 'list'"),
        ],
        aliases=["rm"],
        takes_paths=True,
    )

    router.register(
        name="undo",
        handler=create_undo_handler(file_list),
        description="Undo the last change to the selection",
        usage="undo",
    )

    router.register(
        name="redo",
        handler=create_redo_handler(file_list),
        description="Redo the last undone change",
        usage="redo",
    )

    router.register(
        name="list",
        handler=create_list_handler(file_list),
        description="Show the selection in merge order",
        usage="list",
        aliases=["ls"],
    )

    router.register(
        name="clear",
        handler=create_clear_handler(file_list),
        description="Remove every entry from the selection",
        usage="clear",
    )

    router.register(
        name="merge",
        handler=create_merge_handler(file_list),
        description="Merge the selection into one file with per-file headers",
        usage="merge <output> [--append] [--quiet]",
        arguments=[
            ArgumentInfo(name="output", description="File to write"),
            ArgumentInfo(
                name="append",
                description="Append when the output already has content",
                required=False,
                default=False,
            ),
            ArgumentInfo(
                name="quiet",
                description="Hide per-milestone progress lines",
                required=False,
                default=False,
            ),
        ],
        takes_paths=True,
    )

    router.register(
        name="config",
        handler=create_config_handler(services),
        description="Show the effective configuration",
        usage="config",
    )
