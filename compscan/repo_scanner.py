"""Directory traversal producing candidate component source files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List

from .constants import IGNORED_DIRS, VALID_SUFFIXES
from .logging import get_logger

_LOGGER = get_logger("scanner")


def validate_root(root: str | os.PathLike[str]) -> Path:
    """Return the scan root as a path, rejecting missing or non-directory roots."""
    root_path = Path(root).expanduser()
    if not root_path.exists():
        raise FileNotFoundError(f"Invalid directory: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root}")
    return root_path


def _is_candidate(name: str) -> bool:
    return os.path.splitext(name)[1] in VALID_SUFFIXES


def _list_entries(directory: str) -> List[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as iterator:
            return list(iterator)
    except OSError as exc:
        _LOGGER.debug("Skipping unreadable directory %s: %s", directory, exc)
        return []


def _walk(directory: str) -> Iterator[Path]:
    for entry in _list_entries(directory):
        try:
            if entry.is_dir(follow_symlinks=False):
                if entry.name in IGNORED_DIRS:
                    continue
                yield from _walk(entry.path)
            elif entry.is_file(follow_symlinks=False) and _is_candidate(entry.name):
                yield Path(entry.path)
        except OSError as exc:
            _LOGGER.debug("Skipping entry %s: %s", entry.path, exc)


def iter_candidate_files(root: str | os.PathLike[str]) -> Iterator[Path]:
    """Lazily yield source files under ``root``, pruning ignored directories.

    Unreadable directories contribute nothing. Every call starts a fresh walk;
    ordering is not guaranteed.
    """
    return _walk(os.fspath(root))


__all__ = ["iter_candidate_files", "validate_root"]
