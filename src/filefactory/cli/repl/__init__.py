"""
REPL module for the FileFactory interactive shell.

This package provides the interactive selection shell: command
completion, syntax highlighting, dynamic prompts, merge operations,
and the main controller.
"""

from filefactory.cli.repl.completer import CommandCompleter
from filefactory.cli.repl.controller import REPLController
from filefactory.cli.repl.lexer import CommandLexer
from filefactory.cli.repl.merge_ops import MergeOperations
from filefactory.cli.repl.prompt import PromptBuilder

__all__ = [
    "CommandCompleter",
    "CommandLexer",
    "MergeOperations",
    "PromptBuilder",
    "REPLController",
]
