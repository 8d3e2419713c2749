"""Configuration management for daybook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DAYBOOK_HOME = Path(os.environ.get("DAYBOOK_HOME", Path.home() / ".daybook"))
CONFIG_FILE = DAYBOOK_HOME / "daybook.conf"
STATE_FILE = DAYBOOK_HOME / "state.json"

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """daybook configuration."""

    journal_dir: str = "~/journal"
    notes_dir: str = ""  # defaults to <journal_dir>/notes
    editor: str = ""  # defaults to $EDITOR, then nvim
    picker: str = "fzf"
    previewer: str = "bat"
    search_tool: str = "rg"
    # Whitespace tidying after extraction
    blank_run_threshold: int = 2
    merge_separators: bool = True
    trim_trailing_blank: bool = True
    preview_chars: int = 200

    @property
    def journal_path(self) -> Path:
        return Path(self.journal_dir).expanduser()

    @property
    def notes_path(self) -> Path:
        if self.notes_dir:
            return Path(self.notes_dir).expanduser()
        return self.journal_path / "notes"

    @property
    def editor_command(self) -> str:
        return self.editor or os.environ.get("EDITOR") or "nvim"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid number for {key.upper()}: {value!r}, using {default}")
        return default


def load_config() -> Config:
    """Load configuration from daybook.conf, then apply env overrides."""
    config = Config()

    if CONFIG_FILE.exists():
        for line in CONFIG_FILE.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "journal_dir":
                    config.journal_dir = value
                case "notes_dir":
                    config.notes_dir = value
                case "editor":
                    config.editor = value
                case "picker":
                    config.picker = value
                case "previewer":
                    config.previewer = value
                case "search_tool":
                    config.search_tool = value
                case "blank_run_threshold":
                    threshold = _parse_int(key, value, config.blank_run_threshold)
                    config.blank_run_threshold = max(threshold, 1)
                case "merge_separators":
                    config.merge_separators = value.lower() in TRUE_VALUES
                case "trim_trailing_blank":
                    config.trim_trailing_blank = value.lower() in TRUE_VALUES
                case "preview_chars":
                    config.preview_chars = _parse_int(key, value, config.preview_chars)
                case _:
                    logger.debug(f"Ignoring unknown config key: {key}")

    if os.environ.get("J_JOURNAL_DIR"):
        config.journal_dir = os.environ["J_JOURNAL_DIR"]

    return config
