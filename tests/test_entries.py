"""Tests for entry dates, tags and previews."""

from datetime import date
from pathlib import Path

import pytest

from daybook.core.entries import (
    date_days_ago,
    entry_from_text,
    entry_preview,
    entry_template,
    has_tag,
    is_date_key,
    parse_date_key,
    parse_tags,
)


@pytest.fixture
def today():
    return date(2025, 1, 15)


class TestDates:
    def test_days_ago(self, today):
        assert date_days_ago(1, today) == "2025-01-14"
        assert date_days_ago(15, today) == "2024-12-31"

    def test_zero_days_ago_is_today(self, today):
        assert date_days_ago(0, today) == "2025-01-15"

    def test_parse_date_key(self):
        assert parse_date_key("2025-01-15") == date(2025, 1, 15)

    @pytest.mark.parametrize("value", ["2025-13-01", "2025-1-5", "notes", "2025-01-15.md", ""])
    def test_invalid_date_keys(self, value):
        assert parse_date_key(value) is None
        assert not is_date_key(value)

    def test_entry_template(self, today):
        assert entry_template(today) == "# 2025-01-15\n\n"
        assert entry_template("2025-01-15") == "# 2025-01-15\n\n"


class TestTags:
    def test_hash_tags(self):
        assert parse_tags("# 2025-01-15\n#work #health\n\nBody") == ["work", "health"]

    def test_prefixed_comma_list(self):
        assert parse_tags("# Title\ntags: work, health,  reading\n") == ["work", "health", "reading"]

    def test_duplicates_removed(self):
        assert parse_tags("Title\n#work work #work") == ["work"]

    def test_no_second_line(self):
        assert parse_tags("# Only a title") == []

    def test_blank_second_line(self):
        assert parse_tags("# Title\n\n#not-a-tag-line") == []

    def test_has_tag_ignores_hash(self):
        text = "# Title\n#work\n"
        assert has_tag(text, "work")
        assert has_tag(text, "#work")
        assert not has_tag(text, "play")


class TestEntryFromText:
    def test_builds_entry(self, today):
        text = "# Wednesday\n#work\n\nShipped   the release.\nCelebrated."
        entry = entry_from_text(today, Path("/j/2025-01-15.md"), text)

        assert entry.title == "Wednesday"
        assert entry.tags == ["work"]
        assert entry.preview == "Shipped the release. Celebrated."

    def test_empty_entry(self, today):
        entry = entry_from_text(today, Path("/j/2025-01-15.md"), "")

        assert entry.title == ""
        assert entry.tags == []
        assert entry.preview == ""

    def test_preview_truncated(self):
        text = "Title\ntags\n" + "word " * 100
        preview = entry_preview(text, max_chars=20)

        assert len(preview) <= 20
        assert preview.endswith("…")

    def test_timeline_dict(self, today):
        entry = entry_from_text(today, Path("/j/2025-01-15.md"), "# Day\n#a #b\nbody")

        assert entry.to_dict() == {"date": "2025-01-15", "path": "/j/2025-01-15.md"}
        assert entry.to_dict(timeline=True)["tags"] == ["a", "b"]
