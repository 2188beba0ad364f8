"""
File list model for FileFactory.

Holds the ordered, duplicate-free selection of files and directories that
a merge will read, with full-snapshot undo/redo history.
"""

import logging
import os
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

Snapshot = tuple[str, ...]


def _is_selectable(path: str) -> bool:
    """A path can be selected when it names an existing file or directory."""
    return os.path.isfile(path) or os.path.isdir(path)


class FileListModel:
    """
    Ordered selection of paths with undo/redo.

    Paths are stored exactly as given and compared case-sensitively.
    Every mutation except undo/redo pushes the previous state onto the
    undo stack and clears the redo stack. Callers must not mutate the
    model while a merge is reading a snapshot of it.

    Attributes:
        _paths: Current selection in insertion order.
        _undo_stack: Snapshots to return to, most recent last.
        _redo_stack: Snapshots undone, most recent last.
    """

    def __init__(self, paths: Iterable[str] | None = None):
        """
        Initialize the model.

        Args:
            paths: Optional initial selection. Goes through the same
                   existence and duplicate checks as add() but is not
                   recorded in history.
        """
        self._paths: list[str] = []
        self._undo_stack: list[Snapshot] = []
        self._redo_stack: list[Snapshot] = []

        for path in paths or []:
            if path not in self._paths and _is_selectable(path):
                self._paths.append(path)

    def _checkpoint(self) -> None:
        self._undo_stack.append(tuple(self._paths))
        self._redo_stack.clear()

    def add(self, path: str) -> bool:
        """
        Append a path to the end of the selection.

        Silently ignored when the path is already selected or is neither
        an existing file nor an existing directory.

        Returns:
            True if the path was added.
        """
        if path in self._paths or not _is_selectable(path):
            logger.debug(f"Ignoring selection of {path!r}")
            return False

        self._checkpoint()
        self._paths.append(path)
        return True

    def add_many(self, paths: Iterable[str]) -> list[str]:
        """
        Add a batch of paths as a single undoable step.

        Returns:
            The paths actually added, in order.
        """
        accepted: list[str] = []
        for path in paths:
            if path in self._paths or path in accepted or not _is_selectable(path):
                logger.debug(f"Ignoring selection of {path!r}")
                continue
            accepted.append(path)

        if accepted:
            self._checkpoint()
            self._paths.extend(accepted)
        return accepted

    def remove_selected(self, paths: Iterable[str]) -> int:
        """
        Remove the given paths; paths not in the selection are ignored.

        Always recorded in history, even when nothing matched.

        Returns:
            Number of paths removed.
        """
        doomed = set(paths)
        self._checkpoint()
        before = len(self._paths)
        self._paths = [p for p in self._paths if p not in doomed]
        return before - len(self._paths)

    def clear(self) -> None:
        """Remove every path as one undoable step."""
        if not self._paths:
            return
        self._checkpoint()
        self._paths = []

    def undo(self) -> bool:
        """Restore the state before the last mutation. Returns False if none."""
        if not self._undo_stack:
            return False
        self._redo_stack.append(tuple(self._paths))
        self._paths = list(self._undo_stack.pop())
        return True

    def redo(self) -> bool:
        """Reapply the last undone mutation. Returns False if none."""
        if not self._redo_stack:
            return False
        self._undo_stack.append(tuple(self._paths))
        self._paths = list(self._redo_stack.pop())
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def snapshot(self) -> Snapshot:
        """Return the current selection as an immutable ordered tuple."""
        return tuple(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __contains__(self, path: object) -> bool:
        return path in self._paths
