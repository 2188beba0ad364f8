"""
Command lexer module for FileFactory shell syntax highlighting.

Provides a prompt_toolkit Lexer that colours command names, flags, and
path arguments, marking paths that do not exist while the user types.
"""

import os
from collections.abc import Callable, Collection

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer


class CommandLexer(Lexer):
    """
    Lexer for shell command syntax highlighting.

    Tokenizes input into:
    - command: Valid command names
    - unknown: Unrecognized commands
    - option.name / option.value: Flags like --append or --key=value
    - path: Arguments of path-taking commands that exist on disk
    - path.missing: Arguments of path-taking commands that do not exist
    - argument: Any other argument
    """

    def __init__(self, commands: Collection[str], path_commands: Collection[str] = ()) -> None:
        """
        Initialize the lexer.

        Args:
            commands: Valid command names, aliases included.
            path_commands: Commands whose positional arguments are paths.
        """
        self._commands = {cmd.lower() for cmd in commands}
        self._path_commands = {cmd.lower() for cmd in path_commands}

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        lines = document.lines

        def get_line_tokens(line_number: int) -> StyleAndTextTuples:
            if line_number >= len(lines):
                return []
            return self._tokenize_line(lines[line_number])

        return get_line_tokens

    def _tokenize_line(self, line: str) -> StyleAndTextTuples:
        if not line or not line.strip():
            return [("", line)]

        tokens: StyleAndTextTuples = []
        command: str | None = None

        for part in self._split_preserving_whitespace(line):
            if part.isspace():
                tokens.append(("", part))
            elif command is None:
                command = part.lower()
                style = "class:command" if command in self._commands else "class:unknown"
                tokens.append((style, part))
            elif part.startswith("-") and len(part) > 1 and not part[1].isdigit():
                tokens.extend(self._tokenize_option(part))
            elif command in self._path_commands:
                tokens.append((self._path_style(part), part))
            else:
                tokens.append(("class:argument", part))

        return tokens

    def _path_style(self, word: str) -> str:
        path = os.path.expanduser(word.strip("\"'"))
        return "class:path" if os.path.exists(path) else "class:path.missing"

    def _split_preserving_whitespace(self, text: str) -> list[str]:
        """Split text into words and whitespace runs, keeping both."""
        result: list[str] = []
        current = ""
        in_whitespace = False

        for char in text:
            is_space = char.isspace()
            if is_space != in_whitespace:
                if current:
                    result.append(current)
                current = char
                in_whitespace = is_space
            else:
                current += char

        if current:
            result.append(current)

        return result

    def _tokenize_option(self, option: str) -> StyleAndTextTuples:
        if "=" in option:
            name, value = option.split("=", 1)
            return [
                ("class:option.name", name + "="),
                ("class:option.value", value),
            ]
        return [("class:option.name", option)]
