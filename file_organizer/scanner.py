"""
Directory traversal.

Functions for recursively walking a directory tree. Unreadable entries are
yielded as ``ScanError`` values instead of raising, so a single bad entry
never aborts the walk.
"""

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Generator, Iterator

from .categories import get_extension


@dataclass(frozen=True)
class Entry:
    """A filesystem entry discovered during traversal."""
    path: Path
    is_dir: bool
    is_file: bool = False


@dataclass(frozen=True)
class ScanError:
    """An entry that could not be read. The walk continues past it."""
    path: Path | None
    error: OSError

    def __str__(self) -> str:
        reason = self.error.strerror or str(self.error)
        return f"Failed to access entry {self.path}: {reason}"


def _check_root(root: Path) -> Path:
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    return root


def _stat_entry(path: Path) -> Entry | ScanError:
    try:
        st = os.stat(path)
    except OSError as e:
        # Broken symlinks land here as well
        return ScanError(path, e)
    return Entry(path, is_dir=False, is_file=stat.S_ISREG(st.st_mode))


def _walk(root: Path) -> Generator[Entry | ScanError, None, None]:
    pending: list[OSError] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=pending.append):
        while pending:
            e = pending.pop(0)
            yield ScanError(Path(e.filename) if e.filename else None, e)

        # Stable order so that collision suffixes are reproducible
        dirnames.sort()
        filenames.sort()
        parent = Path(dirpath)

        for name in dirnames:
            yield Entry(parent / name, is_dir=True)

        for name in filenames:
            yield _stat_entry(parent / name)

    while pending:
        e = pending.pop(0)
        yield ScanError(Path(e.filename) if e.filename else None, e)


def walk_entries(root: Path) -> Iterator[Entry | ScanError]:
    """
    Recursively walk a directory, depth-first.

    Each directory's subdirectories are yielded before its files; the
    subdirectories are then descended into in name order. The root itself
    is not yielded. The listing of a directory is taken when the walk
    reaches it, so folders created under an already-listed directory are
    not visited.

    Args:
        root: The directory to walk.

    Returns:
        A lazy, single-use iterator of Entry and ScanError items.

    Raises:
        FileNotFoundError: If root does not exist.
        NotADirectoryError: If root is not a directory.
    """
    return _walk(_check_root(Path(root)))


def list_directory(root: Path) -> list[Entry]:
    """
    List the direct children of a directory, sorted by name.

    Children that cannot be inspected are listed as non-directories.
    """
    root = _check_root(Path(root))
    entries = []
    for child in sorted(root.iterdir(), key=lambda p: p.name):
        try:
            is_dir = child.is_dir()
            is_file = child.is_file()
        except OSError:
            is_dir = is_file = False
        entries.append(Entry(child, is_dir=is_dir, is_file=is_file))
    return entries


def count_files(root: Path) -> int:
    """
    Count the regular files under root that have an extension.

    This is the number of files a run would move, barring errors.
    """
    count = 0
    for item in walk_entries(root):
        if isinstance(item, Entry) and item.is_file and get_extension(item.path):
            count += 1
    return count
