"""
Exceptions raised by the organizer.

Traversal problems are not exceptions; they are yielded as ``ScanError``
values by the scanner and the run continues. Everything here is fatal.
"""

from pathlib import Path


class OrganizerError(Exception):
    """Base class for fatal organizer errors."""

    action = "Failed"

    def __init__(self, path: Path | None, cause: BaseException | None = None):
        self.path = path
        self.cause = cause
        super().__init__(str(self))

    def _cause_text(self) -> str:
        if self.cause is None:
            return ""
        return f" ({str(self.cause) or type(self.cause).__name__})"

    def __str__(self) -> str:
        if self.path is None:
            return f"{self.action}{self._cause_text()}"
        return f"{self.action}: {self.path}{self._cause_text()}"


class DirectoryCreateError(OrganizerError):
    """A category folder could not be created."""

    action = "Could not create directory"


class MoveError(OrganizerError):
    """A file could not be renamed into its category folder."""

    action = "Could not move file"

    def __init__(self, path: Path, destination: Path, cause: BaseException | None = None):
        self.destination = destination
        super().__init__(path, cause)

    def __str__(self) -> str:
        return f"{self.action}: {self.path} -> {self.destination}{self._cause_text()}"


class ConfirmationError(OrganizerError):
    """The confirmation answer could not be read."""

    action = "Could not read confirmation"
