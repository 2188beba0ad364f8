"""
REPL controller module for the FileFactory shell.

Provides the main Read-Eval-Print Loop controller that integrates
prompt_toolkit for input handling, command parsing, routing, and UI rendering.
"""

import logging
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.syntax import Syntax

from filefactory.cli.handlers import register_all_commands
from filefactory.cli.parser import CommandParseError, parse_command
from filefactory.cli.repl.completer import CommandCompleter
from filefactory.cli.repl.lexer import CommandLexer
from filefactory.cli.repl.merge_ops import MergeOperations
from filefactory.cli.repl.prompt import PromptBuilder
from filefactory.cli.router import CommandResult, CommandRouter
from filefactory.cli.ui import render_error, render_file_list, render_help, render_welcome_banner
from filefactory.core.path_utils import ensure_directory_exists
from filefactory.services.container import ServicesContainer

logger = logging.getLogger(__name__)

PROMPT_STYLE = Style.from_dict({
    "prompt": "#00aa00 bold",
    "prompt.arrow": "#ffffff",
    "prompt.selection": "#00aaaa",
    "prompt.history": "#aaaa00",
    "prompt.separator": "#888888",
    "command": "#00aa00 bold",
    "argument": "#00aaaa",
    "path": "#00aaaa underline",
    "path.missing": "#aa0000",
    "option.name": "#aa00aa",
    "option.value": "#ffffff",
    "unknown": "#aaaa00",
})


class REPLController:
    """
    Interactive shell session controller.

    Manages the main loop, integrating prompt_toolkit for input,
    command parsing, routing, and Rich for output rendering. Commands
    run one at a time, so the selection is never changed while a merge
    reads it.

    Attributes:
        services: Container with the selection, config, and engine.
        console: Rich console for styled output.
        router: Command router for dispatching commands.
        session: prompt_toolkit session for input handling.
    """

    def __init__(
        self,
        services: ServicesContainer,
        console: Optional[Console] = None,
        history_file: Optional[str] = None,
        session: Optional[PromptSession] = None,
    ):
        """
        Initialize the REPL controller.

        Args:
            services: Services container with initialized services.
            console: Rich Console for output. Creates new one if None.
            history_file: Path to history file. Defaults to the
                          configured shell.history_file.
            session: Prebuilt prompt session, mainly for tests.
        """
        self.services = services
        self.console = console or Console()
        self.router = CommandRouter()
        self._running = False

        register_all_commands(self.router, services)

        self._prompt_builder = PromptBuilder(services.file_list)
        self._merge_ops = MergeOperations(services, self.console)

        path_commands: list[str] = []
        for info in self.router.get_available_commands():
            if info.takes_paths:
                path_commands.extend([info.name, *info.aliases])
        self._lexer = CommandLexer(self.router.all_names(), path_commands)

        if session is None:
            history_path = history_file or services.config.shell.history_file
            session = PromptSession(
                history=self._create_history(history_path),
                completer=CommandCompleter(self.router, services.file_list),
                lexer=self._lexer,
                style=PROMPT_STYLE,
                complete_while_typing=False,
            )
        self.session: PromptSession = session

    def _create_history(self, history_path: str) -> History:
        """
        Create history storage, ensuring parent directory exists.

        Falls back to in-memory history if the file cannot be used.
        """
        path = Path(history_path)

        if not ensure_directory_exists(path.parent):
            self.console.print(
                "[yellow]Warning: Could not create history directory, "
                "using in-memory history[/yellow]"
            )
            return InMemoryHistory()

        try:
            return FileHistory(history_path)
        except OSError as e:
            self.console.print(
                f"[yellow]Warning: Could not create history file ({e}), "
                "using in-memory history[/yellow]"
            )
            return InMemoryHistory()

    def run(self) -> None:
        """
        Start the REPL main loop.

        Displays welcome banner, then enters the read-eval-print loop
        until an exit command is received or Ctrl+D is pressed.
        """
        render_welcome_banner(self.console)
        self.console.print()

        self._running = True
        while self._running:
            try:
                user_input = self.session.prompt(self._prompt_builder.get_prompt())
                if not self.handle_input(user_input):
                    break
            except KeyboardInterrupt:
                self.console.print("\n[yellow]Use 'exit' or 'quit' to leave.[/yellow]")
                continue
            except EOFError:
                self.console.print("\n[cyan]Goodbye![/cyan]")
                break
        self._running = False

    def handle_input(self, user_input: str) -> bool:
        """
        Process user input and execute the command.

        Args:
            user_input: Raw input string from the user.

        Returns:
            True to continue the REPL, False to exit.
        """
        stripped = user_input.strip()
        if not stripped:
            return True

        try:
            command = parse_command(stripped)
        except CommandParseError as e:
            render_error(str(e), self.console)
            return True

        result = self.router.route(command)

        if result.should_exit:
            self.console.print("[cyan]Goodbye![/cyan]")
            return False

        if not result.success:
            render_error(result.message or "Command failed", self.console)
            return True

        self._render_result(command.name, result)
        return True

    def _render_result(self, command_name: str, result: CommandResult) -> None:
        """Render a successful command result based on command type."""
        info = self.router.get_command_info(command_name)
        name = info.name if info is not None else command_name

        if name == "help":
            if result.data:
                render_help(result.data, self.console)
        elif name == "list":
            render_file_list(result.data or (), self.console)
        elif name == "config":
            self.console.print(Syntax(result.data or "", "yaml", theme="ansi_dark"))
        elif name == "merge":
            data = result.data or {}
            self._merge_ops.run_merge(
                data["output"],
                append=data.get("append", False),
                milestones=data.get("milestones", True),
            )
        elif result.message:
            self.console.print(f"[green]{result.message}[/green]")
