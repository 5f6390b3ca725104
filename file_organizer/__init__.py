"""
File Organizer
==============

A command-line tool that sorts the files of a directory into category
folders (images, documents, audio, ...) based on their extensions.
"""

__version__ = "1.0.0"

from .categories import CATEGORIES, OTHERS, classify, get_extension
from .errors import OrganizerError, DirectoryCreateError, MoveError, ConfirmationError
from .executor import MoveEvent, RunReport, move_file, organize_directory, unique_destination
from .scanner import Entry, ScanError, walk_entries

__all__ = [
    "CATEGORIES",
    "OTHERS",
    "classify",
    "get_extension",
    "OrganizerError",
    "DirectoryCreateError",
    "MoveError",
    "ConfirmationError",
    "MoveEvent",
    "RunReport",
    "move_file",
    "organize_directory",
    "unique_destination",
    "Entry",
    "ScanError",
    "walk_entries",
]
