"""
Move execution for the File Organizer.

Moves classified files into their category folders under the target root.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .categories import CATEGORIES, classify
from .errors import DirectoryCreateError, MoveError
from .scanner import ScanError, walk_entries


@dataclass(frozen=True)
class MoveEvent:
    """A file that was moved, as reported to the presentation layer."""
    source: Path
    destination: Path
    category: str
    created_dir: bool = False


@dataclass
class RunReport:
    """Aggregate result of one organize run."""
    root: Path
    files_moved: int = 0
    dirs_created: int = 0
    moves: list[MoveEvent] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)


def ensure_category_dir(root: Path, category: str) -> tuple[Path, bool]:
    """
    Make sure root/category exists.

    Args:
        root: Root directory being organized.
        category: Category folder name.

    Returns:
        The folder path, and True if this call created it.

    Raises:
        DirectoryCreateError: If the folder is missing and cannot be created.
    """
    folder = root / category
    if folder.exists():
        return folder, False

    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(folder, e) from e
    return folder, True


def unique_destination(candidate: Path) -> Path:
    """
    Return candidate, or the first free ``stem_N.ext`` variant of it.

    The counter starts at 1. This is a check-then-use lookup: another
    process can still create the returned path before it is used.
    """
    if not os.path.lexists(candidate):
        return candidate

    stem = candidate.stem
    suffix = candidate.suffix
    counter = 1
    while True:
        # path/file.ext -> path/file_1.ext
        alt = candidate.with_name(f"{stem}_{counter}{suffix}")
        if not os.path.lexists(alt):
            return alt
        counter += 1


def move_file(root: Path, category: str, source: Path) -> MoveEvent:
    """
    Move a single file into root/category.

    Args:
        root: Root directory being organized.
        category: Category folder to move into.
        source: File to move.

    Returns:
        The MoveEvent describing the move.

    Raises:
        DirectoryCreateError: If the category folder cannot be created.
        MoveError: If the rename fails.
    """
    folder, created = ensure_category_dir(root, category)
    dst = unique_destination(folder / source.name)

    try:
        os.rename(source, dst)
    except OSError as e:
        raise MoveError(source, dst, e) from e

    return MoveEvent(source=source, destination=dst, category=category, created_dir=created)


def organize_directory(
    root: Path,
    on_move: Callable[[MoveEvent], None] | None = None,
    on_error: Callable[[ScanError], None] | None = None,
    table: tuple[tuple[str, frozenset[str]], ...] = CATEGORIES
) -> RunReport:
    """
    Walk root and move every file with an extension into its category folder.

    Traversal errors are collected in the report and passed to on_error;
    the walk continues. Directory creation and move errors propagate and
    end the run. Files moved before the failure stay where they were moved.

    Args:
        root: Directory to organize.
        on_move: Called with each MoveEvent after the move succeeds.
        on_error: Called with each ScanError as it is encountered.
        table: Category table used for classification.

    Returns:
        RunReport with counters, moves and traversal errors.
    """
    root = Path(root)
    report = RunReport(root=root)

    # Destinations written by this run; the walk may reach them again
    placed: set[Path] = set()

    for item in walk_entries(root):
        if isinstance(item, ScanError):
            report.errors.append(item)
            if on_error:
                on_error(item)
            continue

        if item.is_dir or not item.is_file:
            continue
        if item.path in placed:
            continue

        category = classify(item.path, table)
        if category is None:
            continue

        event = move_file(root, category, item.path)
        placed.add(event.destination)

        report.files_moved += 1
        if event.created_dir:
            report.dirs_created += 1
        report.moves.append(event)

        if on_move:
            on_move(event)

    return report
