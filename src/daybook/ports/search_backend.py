"""Full-text search interface."""

from pathlib import Path
from typing import Protocol

from daybook.core.entries import SearchMatch


class SearchBackend(Protocol):
    """Interface for searching document contents."""

    def search(self, pattern: str, paths: list[Path]) -> list[SearchMatch]:
        """Return every line matching `pattern` under `paths`."""
        ...
