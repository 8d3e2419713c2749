"""JSON file state adapter."""

import json
import logging
from datetime import datetime
from pathlib import Path

from daybook.ports.state_repo import State

logger = logging.getLogger(__name__)


class JsonStateRepository:
    """
    State kept in a small JSON file.

    Implements StateRepository protocol.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read(self) -> State:
        """Load state from file."""
        if not self.path.exists():
            return State()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return State(
                most_recent=data.get("most_recent"),
                opened_at=data.get("opened_at"),
            )
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return State()

    def save(self, state: State) -> None:
        """Save state to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(
                {
                    "most_recent": state.most_recent,
                    "opened_at": state.opened_at,
                },
                indent=2,
            )
        )

    def record_opened(self, path: str) -> None:
        self.save(State(most_recent=str(path), opened_at=datetime.now().isoformat(timespec="seconds")))
