"""File-based document storage adapter."""

import logging
import os
import re
import tempfile
from datetime import date
from pathlib import Path

from daybook.core.entries import Note, parse_date_key
from daybook.core.errors import UnreadableDocument

logger = logging.getLogger(__name__)

SLUG_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\-]*$")


class FileDocumentStore:
    """
    File-based journal storage.

    Implements DocumentStore protocol. Each day gets a markdown file in the
    journal directory; notes live in the notes directory as <slug>.md.
    """

    def __init__(self, journal_dir: Path | str, notes_dir: Path | str | None = None):
        self.journal_dir = Path(journal_dir).expanduser()
        self.notes_dir = Path(notes_dir).expanduser() if notes_dir else self.journal_dir / "notes"
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def entry_path(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        return self.journal_dir / f"{target_date.isoformat()}.md"

    def note_path(self, slug: str) -> Path:
        return self.notes_dir / f"{slug}.md"

    def resolve(self, ref: str) -> Path:
        """Resolve a date key, slug or path, in that order."""
        ref = ref.strip()
        entry_date = parse_date_key(ref)
        if entry_date:
            return self.entry_path(entry_date)
        if SLUG_RE.match(ref):
            return self.note_path(ref)
        return Path(ref).expanduser().resolve()

    def read(self, ref: str) -> str | None:
        """
        Read document content. Returns None if not found.

        Line endings are returned as stored. Raises UnreadableDocument when the
        file exists but can't be read or isn't valid UTF-8.
        """
        path = self.resolve(ref)
        if not path.is_file():
            return None
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            raise UnreadableDocument(path, str(e)) from e

    def write(self, ref: str, content: str) -> None:
        """
        Write/overwrite document content.

        The content goes to a temporary file first and is moved into place,
        so readers see either the old or the new document.
        """
        path = self.resolve(ref)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote {len(content)} chars to {path}")

    def exists(self, ref: str) -> bool:
        return self.resolve(ref).is_file()

    def list_entries(self) -> list[tuple[date, Path]]:
        """List dated entries, newest first."""
        entries = []
        for path in self.journal_dir.glob("*.md"):
            entry_date = parse_date_key(path.stem)
            if entry_date is None:
                continue
            entries.append((entry_date, path))
        return sorted(entries, reverse=True)

    def list_notes(self) -> list[Note]:
        """List notes sorted by slug."""
        if not self.notes_dir.is_dir():
            return []
        return sorted(
            (Note(slug=path.stem, path=path) for path in self.notes_dir.glob("*.md")),
            key=lambda n: n.slug,
        )
