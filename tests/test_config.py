"""Tests for config parsing."""

from pathlib import Path
from unittest.mock import patch

import pytest

from daybook.config import Config, load_config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("J_JOURNAL_DIR", raising=False)
    path = tmp_path / "daybook.conf"
    with patch("daybook.config.CONFIG_FILE", path):
        yield path


class TestLoadConfig:
    def test_defaults_without_file(self, config_file):
        config = load_config()

        assert config == Config()
        assert config.notes_path == Path.home() / "journal" / "notes"

    def test_parses_values(self, config_file):
        config_file.write_text(
            "# journal settings\n"
            'JOURNAL_DIR="~/Documents/journal"  # synced\n'
            "NOTES_DIR=/tmp/notes\n"
            "EDITOR='code --wait'\n"
            "BLANK_RUN_THRESHOLD=3\n"
            "MERGE_SEPARATORS=no\n"
            "PREVIEW_CHARS=80 # shorter\n"
        )

        config = load_config()

        assert config.journal_path == Path.home() / "Documents" / "journal"
        assert config.notes_path == Path("/tmp/notes")
        assert config.editor_command == "code --wait"
        assert config.blank_run_threshold == 3
        assert config.merge_separators is False
        assert config.preview_chars == 80

    def test_invalid_number_keeps_default(self, config_file):
        config_file.write_text("BLANK_RUN_THRESHOLD=lots\n")

        assert load_config().blank_run_threshold == 2

    def test_ignores_unknown_and_malformed_lines(self, config_file):
        config_file.write_text("COLOR=blue\njust text\n")

        assert load_config() == Config()

    def test_env_overrides_journal_dir(self, config_file, monkeypatch, tmp_path):
        config_file.write_text("JOURNAL_DIR=/from/file\n")
        monkeypatch.setenv("J_JOURNAL_DIR", str(tmp_path))

        assert load_config().journal_path == tmp_path

    def test_editor_falls_back_to_env(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "vim")
        assert Config().editor_command == "vim"

        monkeypatch.delenv("EDITOR")
        assert Config().editor_command == "nvim"
