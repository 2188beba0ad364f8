"""
Shell prompt builder module.

Provides dynamic prompt generation that shows the selection size and
whether undo/redo are available.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filefactory.core.file_list import FileListModel


class PromptBuilder:
    """
    Builds dynamic prompts from the current selection.

    Shows "ff> " for an empty selection and "[3] ff> " once paths are
    selected, with a marker when undo history is available.
    """

    def __init__(self, file_list: "FileListModel") -> None:
        self._file_list = file_list

    def get_prompt(self) -> list[tuple[str, str]]:
        """Return prompt tokens for prompt_toolkit."""
        tokens: list[tuple[str, str]] = []

        count = len(self._file_list)
        if count:
            tokens.append(("class:prompt.selection", f"[{count}]"))
            if self._file_list.can_undo:
                tokens.append(("class:prompt.history", "*"))
            tokens.append(("class:prompt.separator", " "))

        tokens.append(("class:prompt", "ff"))
        tokens.append(("class:prompt.arrow", "> "))
        return tokens
