"""Document storage interface."""

from datetime import date
from pathlib import Path
from typing import Protocol

from daybook.core.entries import Note


class DocumentStore(Protocol):
    """
    Interface for reading and writing journal documents.

    A ref is a date key (YYYY-MM-DD), a note slug or a file path, tried in
    that order.
    """

    journal_dir: Path
    notes_dir: Path

    def resolve(self, ref: str) -> Path:
        """Resolve a ref to the file it names."""
        ...

    def read(self, ref: str) -> str | None:
        """Read full document content. Returns None if not found.

        Raises UnreadableDocument if the file exists but can't be read.
        """
        ...

    def write(self, ref: str, content: str) -> None:
        """Replace the full document content. Raises OSError on failure."""
        ...

    def exists(self, ref: str) -> bool:
        """Check if the document exists."""
        ...

    def entry_path(self, target_date: date) -> Path:
        """Path of the daily entry for a date."""
        ...

    def note_path(self, slug: str) -> Path:
        """Path of the note with a slug."""
        ...

    def list_entries(self) -> list[tuple[date, Path]]:
        """All daily entries, newest first."""
        ...

    def list_notes(self) -> list[Note]:
        """All notes, sorted by slug."""
        ...
