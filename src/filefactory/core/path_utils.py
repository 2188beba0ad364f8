"""
Path utilities for FileFactory.

Expands a selection of files and directories into the ordered sequence of
leaf files a merge reads, and provides small filesystem helpers used by
the CLI and shell layers.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror or error}")


def _real(path: str) -> str:
    return os.path.normcase(os.path.realpath(path))


def _sort_key(root: str, path: str) -> list[str]:
    return os.path.relpath(path, root).split(os.sep)


def walk_directory(root: str, follow_symlinks: bool = False) -> list[str]:
    """
    List every file beneath a directory, at all depths.

    The result is ordered by relative path, component by component, so
    the same tree always expands to the same sequence regardless of the
    order the filesystem enumerates entries. Returned paths are joined
    onto ``root`` as given, without normalization.

    Args:
        root: Directory to expand.
        follow_symlinks: Descend into symlinked directories. Each real
                         directory is visited at most once.

    Returns:
        Leaf file paths in traversal order.
    """
    found: list[str] = []
    visited: set[str] = set()

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_log_walk_error, followlinks=follow_symlinks
    ):
        if follow_symlinks:
            real_dir = _real(dirpath)
            if real_dir in visited:
                dirnames[:] = []
                continue
            visited.add(real_dir)

        for name in filenames:
            full = os.path.join(dirpath, name)
            if os.path.isfile(full):
                found.append(full)

    found.sort(key=lambda p: _sort_key(root, p))
    return found


def expand_leaves(
    entries: Iterable[str],
    follow_symlinks: bool = False,
    exclude: Iterable[str] = (),
) -> list[str]:
    """
    Expand selected entries into leaf files, preserving selection order.

    Files are kept as one leaf each; directories are replaced by their
    walk_directory() expansion. Entries that no longer exist are skipped.
    Paths resolving to anything in ``exclude`` are dropped.

    Args:
        entries: Selected paths in merge order.
        follow_symlinks: Passed to walk_directory().
        exclude: Paths that must never be read (such as the merge output).

    Returns:
        Ordered leaf file paths.
    """
    excluded = {_real(p) for p in exclude}
    leaves: list[str] = []

    for entry in entries:
        if os.path.isfile(entry):
            candidates = [entry]
        elif os.path.isdir(entry):
            candidates = walk_directory(entry, follow_symlinks=follow_symlinks)
        else:
            logger.info(f"Selected path no longer exists, skipping: {entry}")
            continue

        for leaf in candidates:
            if excluded and _real(leaf) in excluded:
                logger.warning(f"Skipping {leaf}: it is the merge output")
                continue
            leaves.append(leaf)

    return leaves


def ensure_directory_exists(path: Path) -> bool:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Path to the directory to ensure exists.

    Returns:
        True if the directory exists or was created successfully,
        False if creation failed (e.g., permission error).
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        return True
    except OSError:
        return False
