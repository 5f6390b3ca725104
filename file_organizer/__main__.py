#!/usr/bin/env python3
"""
File Organizer - CLI Entry Point
================================

Usage:
    python -m file_organizer /path/to/dir
    file-organizer /path/to/dir
"""

import argparse
import sys
from pathlib import Path

from rich.markup import escape
from tqdm import tqdm

from . import __version__
from .errors import ConfirmationError, OrganizerError
from .executor import MoveEvent, organize_directory
from .scanner import ScanError, count_files, list_directory
from .utils import (
    console,
    print_header,
    print_error,
    print_warning,
    print_success,
    print_listing_table,
    print_summary_table,
)


def greet_user():
    """Print the welcome banner."""
    print_header(
        "Welcome to the File Organizer CLI!",
        "This tool will help you organize your files by moving them into "
        "folders based on their file types.\nLet's get started!"
    )


def confirm(prompt: str = "Proceed with organizing these files? (y/n): ") -> bool:
    """
    Ask the user to confirm the run.

    Only "y" (any case, surrounding whitespace ignored) counts as yes.

    Raises:
        ConfirmationError: If standard input cannot be read.
    """
    try:
        answer = console.input(f"\n[bold yellow]{prompt}[/bold yellow]")
    except (EOFError, OSError) as e:
        raise ConfirmationError(None, e) from e
    return answer.strip().lower() == "y"


# =============================================================================
# Commands
# =============================================================================

def cmd_organize(args) -> int:
    """Organize command - list, confirm, then move files into category folders."""
    root = args.path

    greet_user()
    console.print(f"Organizing files in directory: [bold]{escape(str(root))}[/bold]")

    try:
        entries = list_directory(root)
        total = count_files(root)

        print_listing_table(entries)
        print(f"[INFO] Found {total} file(s) to organize")

        if not confirm():
            console.print("[bold red]Operation cancelled. No files were moved.[/bold red]")
            return 0

        with tqdm(total=total, unit="file") as pbar:
            def on_move(event: MoveEvent):
                tqdm.write(f"Moved file: {event.source} -> {event.destination}")
                pbar.update(1)

            def on_error(err: ScanError):
                tqdm.write(f"[WARN] {err}")

            report = organize_directory(root, on_move=on_move, on_error=on_error)

    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except (OrganizerError, OSError) as e:
        print_error(escape(str(e)))
        return 1

    print_summary_table(report.files_moved, report.dirs_created)

    if report.errors:
        print_warning(f"{len(report.errors)} entries could not be accessed and were skipped")

    print_success("All files have been organized successfully!")
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-organizer",
        description="A simple CLI tool to organize files by type",
    )
    parser.add_argument("path", type=Path, help="The path to the directory to organize")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(func=cmd_organize)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
