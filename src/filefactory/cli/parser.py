"""
Command parser module for the FileFactory shell.

Converts user input strings into structured command objects with proper
handling of quoted paths, keyword arguments, and boolean flags.
"""

import shlex
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ParsedCommand:
    """
    Represents a parsed command from user input.

    Attributes:
        name: The command name (first token, lowercased).
        args: Positional arguments following the command.
        kwargs: Keyword arguments (key=value) and flags (--flag -> True).
    """

    name: str
    args: list[str] = field(default_factory=list)
    kwargs: dict[str, Any] = field(default_factory=dict)

    def flag(self, *names: str) -> bool:
        """True if any of the given flag names was passed."""
        return any(_truthy(self.kwargs.get(name)) for name in names)


class CommandParseError(Exception):
    """Raised when command parsing fails."""

    pass


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on")
    return bool(value)


def parse_command(input_str: str) -> ParsedCommand:
    """
    Parse user input into a structured command.

    Uses shlex for tokenization, handling:
    - Quoted strings (single and double quotes), for paths with spaces
    - Keyword arguments (--key=value, -k=value)
    - Boolean flags (--append, -a)

    Args:
        input_str: Raw user input string.

    Returns:
        ParsedCommand with extracted name, args, and kwargs.

    Raises:
        CommandParseError: If the input cannot be parsed (e.g., unclosed quotes).

    Examples:
        >>> parse_command('add "/path/with spaces" notes.txt')
        ParsedCommand(name='add', args=['/path/with spaces', 'notes.txt'], kwargs={})

        >>> parse_command("merge out.txt --append")
        ParsedCommand(name='merge', args=['out.txt'], kwargs={'append': True})
    """
    stripped = input_str.strip()

    if not stripped:
        return ParsedCommand(name="", args=[], kwargs={})

    try:
        # posix=False preserves backslashes (important for Windows paths)
        tokens = shlex.split(stripped, posix=False)
        # Remove surrounding quotes that shlex preserves in non-POSIX mode
        tokens = [t.strip('"').strip("'") for t in tokens]
    except ValueError as e:
        raise CommandParseError(f"Failed to parse command: {e}") from e

    if not tokens:
        return ParsedCommand(name="", args=[], kwargs={})

    name = tokens[0].lower()
    args: list[str] = []
    kwargs: dict[str, Any] = {}

    for token in tokens[1:]:
        if token.startswith("--") and len(token) > 2:
            key, sep, value = token[2:].partition("=")
            if key:
                kwargs[key] = value if sep else True
        elif token.startswith("-") and len(token) > 1 and not token[1].isdigit():
            key, sep, value = token[1:].partition("=")
            if key:
                kwargs[key] = value if sep else True
        else:
            # Paths may legitimately contain '=', so no bare key=value form
            args.append(token)

    return ParsedCommand(name=name, args=args, kwargs=kwargs)
