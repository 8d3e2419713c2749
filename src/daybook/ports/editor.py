"""Editor interface."""

from pathlib import Path
from typing import Protocol


class Editor(Protocol):
    """Interface for opening a document for editing."""

    def open(self, path: Path, line: int | None = None) -> None:
        """Open `path`, optionally at a line. Blocks until the editor exits."""
        ...
