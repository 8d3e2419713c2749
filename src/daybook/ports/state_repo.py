"""State repository interface."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class State:
    """Bookkeeping shared between invocations."""

    most_recent: str | None = None
    opened_at: str | None = None


class StateRepository(Protocol):
    """Interface for reading and updating persisted CLI state."""

    def read(self) -> State:
        """Load current state. Missing or unreadable state is empty."""
        ...

    def record_opened(self, path: str) -> None:
        """Remember a document as the most recently opened one."""
        ...
