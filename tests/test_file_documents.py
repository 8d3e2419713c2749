"""Tests for the file-based document store."""

from datetime import date
from unittest.mock import patch

import pytest

from daybook.adapters.file_documents import FileDocumentStore
from daybook.core.errors import UnreadableDocument


@pytest.fixture
def store(tmp_path):
    return FileDocumentStore(tmp_path / "journal")


class TestResolve:
    def test_date_key(self, store):
        assert store.resolve("2025-01-15") == store.journal_dir / "2025-01-15.md"

    def test_slug(self, store):
        assert store.resolve("reading-list") == store.notes_dir / "reading-list.md"

    def test_absolute_path(self, store, tmp_path):
        path = tmp_path / "elsewhere" / "doc.md"
        assert store.resolve(str(path)) == path

    def test_relative_path_resolved_against_cwd(self, store, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert store.resolve("sub/doc.md") == tmp_path / "sub" / "doc.md"

    def test_default_notes_dir(self, store):
        assert store.notes_dir == store.journal_dir / "notes"

    def test_custom_notes_dir(self, tmp_path):
        store = FileDocumentStore(tmp_path / "j", tmp_path / "n")
        assert store.resolve("idea") == tmp_path / "n" / "idea.md"


class TestReadWrite:
    def test_creates_journal_dir(self, store):
        assert store.journal_dir.is_dir()

    def test_read_missing_returns_none(self, store):
        assert store.read("2025-01-15") is None
        assert not store.exists("2025-01-15")

    def test_write_then_read(self, store):
        store.write("2025-01-15", "# Day\n")

        assert store.read("2025-01-15") == "# Day\n"
        assert store.exists("2025-01-15")

    def test_write_creates_notes_dir(self, store):
        store.write("ideas", "thoughts\n")

        assert (store.notes_dir / "ideas.md").read_text() == "thoughts\n"

    def test_write_preserves_crlf(self, store):
        store.write("2025-01-15", "a\r\nb\r\n")

        assert store.entry_path(date(2025, 1, 15)).read_bytes() == b"a\r\nb\r\n"

    def test_read_keeps_crlf(self, store):
        """CRLF line endings come back exactly as stored."""
        store.entry_path(date(2025, 1, 15)).write_bytes(b"a\r\n\r\nb\r\n")

        assert store.read("2025-01-15") == "a\r\n\r\nb\r\n"

    def test_read_invalid_utf8(self, store):
        """Undecodable content raises UnreadableDocument naming the file."""
        path = store.entry_path(date(2025, 1, 15))
        path.write_bytes(b"A\n\n\xff\xfe bad\n")

        with pytest.raises(UnreadableDocument) as exc_info:
            store.read("2025-01-15")

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_read_os_error(self, store):
        """OS errors while reading raise UnreadableDocument."""
        store.write("2025-01-15", "x\n")

        with patch("daybook.adapters.file_documents.open", side_effect=PermissionError("denied"), create=True):
            with pytest.raises(UnreadableDocument, match="denied"):
                store.read("2025-01-15")

    def test_failed_write_keeps_old_content(self, store):
        store.write("2025-01-15", "original\n")

        with patch("daybook.adapters.file_documents.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                store.write("2025-01-15", "new\n")

        assert store.read("2025-01-15") == "original\n"
        assert list(store.journal_dir.glob("*.tmp")) == []


class TestListing:
    def test_list_entries_newest_first(self, store):
        for key in ("2025-01-14", "2025-01-16", "2025-01-15"):
            store.write(key, f"# {key}\n")
        (store.journal_dir / "scratch.md").write_text("not an entry")

        entries = store.list_entries()

        assert [d for d, _ in entries] == [date(2025, 1, 16), date(2025, 1, 15), date(2025, 1, 14)]
        assert entries[0][1] == store.journal_dir / "2025-01-16.md"

    def test_list_notes_sorted(self, store):
        store.write("zebra", "z")
        store.write("apple", "a")

        assert [n.slug for n in store.list_notes()] == ["apple", "zebra"]

    def test_list_notes_without_dir(self, store):
        assert store.list_notes() == []
