"""
Command dispatch for the FileFactory shell.

Every shell command is registered once under its primary name. Aliases
resolve to that name, so help, completion and highlighting all read the
same CommandInfo.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from filefactory.cli.parser import ParsedCommand

logger = logging.getLogger(__name__)


@dataclass
class ArgumentInfo:
    """One argument shown in the help table."""

    name: str
    description: str
    required: bool = True
    default: Optional[Any] = None


@dataclass
class CommandInfo:
    """
    Metadata for a shell command.

    `takes_paths` marks commands whose positional arguments are filesystem
    paths; the completer and lexer treat those arguments as paths.
    """

    name: str
    description: str
    usage: str
    arguments: list[ArgumentInfo] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)
    takes_paths: bool = False


@dataclass
class CommandResult:
    """Outcome of one command; `data` is rendered by the controller."""

    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    should_exit: bool = False


CommandHandler = Callable[[ParsedCommand], CommandResult]


class CommandRouter:
    """Maps command names and aliases to handlers."""

    def __init__(self) -> None:
        self._commands: dict[str, tuple[CommandInfo, CommandHandler]] = {}
        # Every routable name, primary or alias, to its primary name
        self._names: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        description: str,
        usage: str,
        arguments: Optional[list[ArgumentInfo]] = None,
        aliases: Optional[list[str]] = None,
        takes_paths: bool = False,
    ) -> None:
        info = CommandInfo(
            name=name,
            description=description,
            usage=usage,
            arguments=list(arguments or []),
            aliases=list(aliases or []),
            takes_paths=takes_paths,
        )
        self._commands[name] = (info, handler)
        for routable in (name, *info.aliases):
            self._names[routable] = name

    def route(self, command: ParsedCommand) -> CommandResult:
        """
        Run the handler for a parsed command.

        Blank input is a successful no-op. Unknown names and handler
        exceptions come back as failed results so the shell keeps running.
        """
        if not command.name:
            return CommandResult(success=True)

        primary = self._names.get(command.name)
        if primary is None:
            return CommandResult(
                success=False,
                message=f"Unknown command: '{command.name}'. Type 'help' for available commands.",
            )

        _, handler = self._commands[primary]
        try:
            return handler(command)
        except Exception as e:
            logger.debug(f"Command '{command.name}' failed", exc_info=True)
            return CommandResult(success=False, message=f"Error executing '{command.name}': {e}")

    def get_available_commands(self) -> list[CommandInfo]:
        """Registered commands in registration order, aliases folded in."""
        return [info for info, _ in self._commands.values()]

    def get_command_info(self, name: str) -> Optional[CommandInfo]:
        primary = self._names.get(name)
        return self._commands[primary][0] if primary is not None else None

    def all_names(self) -> list[str]:
        """Every routable name, aliases included."""
        return list(self._names)
