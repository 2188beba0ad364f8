"""
Command completer module for the FileFactory shell.

Provides tab completion for command names, filesystem paths, and for
`remove`, the paths currently selected.
"""

import os
import sys
from collections.abc import Iterable
from pathlib import Path

from prompt_toolkit.completion import Completer, Completion

from filefactory.cli.router import CommandRouter
from filefactory.core.file_list import FileListModel


class CommandCompleter(Completer):
    """
    Custom completer for shell commands.

    Completes command names for the first word and paths for commands
    registered with takes_paths.
    """

    def __init__(self, router: CommandRouter, file_list: FileListModel | None = None):
        """
        Initialize the completer.

        Args:
            router: Command router to get available commands from.
            file_list: Selection offered as completions for 'remove'.
        """
        self.router = router
        self.file_list = file_list
        self._command_names = sorted(router.all_names())

    def get_completions(self, document, complete_event):
        """Generate completions for the current input."""
        text = document.text_before_cursor
        words = text.split()

        if not words or (len(words) == 1 and not text.endswith(" ")):
            word = words[0] if words else ""
            for cmd in self._command_names:
                if cmd.startswith(word.lower()):
                    yield Completion(cmd, start_position=-len(word))
            return

        info = self.router.get_command_info(words[0].lower())
        if info is None or not info.takes_paths:
            return

        current = "" if text.endswith(" ") else words[-1]
        if current.startswith("-"):
            return

        if info.name == "remove" and self.file_list is not None:
            yield from self._complete_selected(current)
        else:
            yield from self._complete_path(current)

    def _complete_selected(self, prefix: str) -> Iterable[Completion]:
        for path in self.file_list.snapshot():
            if path.startswith(prefix):
                yield Completion(path, start_position=-len(prefix))

    def _complete_path(self, path_text: str) -> Iterable[Completion]:
        """
        Generate path completions for the given partial path.

        Supports relative paths, absolute paths, and ~ expansion.
        """
        if path_text.startswith("~"):
            path_text = os.path.expanduser(path_text)

        if not path_text:
            base_dir, prefix = Path("."), ""
        elif path_text.endswith(os.sep) or path_text.endswith("/"):
            base_dir, prefix = Path(path_text), ""
        else:
            path = Path(path_text)
            base_dir, prefix = path.parent, path.name

        # Completions replace only the last path component
        replace_len = len(prefix)

        try:
            if not base_dir.is_dir():
                return

            for entry in sorted(base_dir.iterdir()):
                name = entry.name
                if self._is_hidden_path(entry) and not prefix.startswith("."):
                    continue
                if prefix and not name.lower().startswith(prefix.lower()):
                    continue

                is_dir = entry.is_dir()
                display = name + os.sep if is_dir else name
                yield Completion(display, start_position=-replace_len, display=display)
        except OSError:
            return

    def _is_hidden_path(self, path: Path) -> bool:
        """
        Check if a path is hidden.

        Detects names starting with '.' or '$' and, on Windows, the hidden
        file attribute.
        """
        name = path.name
        if name.startswith(".") or name.startswith("$"):
            return True

        if sys.platform == "win32":
            try:
                import stat
                attrs = path.stat().st_file_attributes  # type: ignore[attr-defined]
                if attrs & stat.FILE_ATTRIBUTE_HIDDEN:
                    return True
            except (OSError, AttributeError):
                pass

        return False
