"""Shared workflow layer between the CLI and the journal's collaborators.

Read-only queries and section extraction take a DocumentStore; the
interactive flows take a Journal bundling every port. The CLI builds both
from config via get_journal().
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from .adapters.editor_cli import CommandEditor
from .adapters.file_documents import FileDocumentStore
from .adapters.fzf import CommandPreviewer, FzfPicker
from .adapters.json_state import JsonStateRepository
from .adapters.ripgrep import RipgrepSearch
from .config import STATE_FILE, Config
from .core.entries import (
    Entry,
    Note,
    SearchMatch,
    date_days_ago,
    entry_from_text,
    entry_template,
    format_date,
    has_tag,
    note_template,
    parse_date_key,
)
from .core.errors import (
    DestinationWriteFailed,
    DocumentWriteFailed,
    JournalError,
    SameDocument,
    SourceNotFound,
    SourceWriteFailed,
    UnreadableDocument,
)
from .core.extract import DEFAULT_POLICY, ExtractionRequest, WhitespacePolicy, extract_sections, normalize_slug
from .core.sections import split_sections
from .ports import DocumentStore, Editor, Picker, Previewer, SearchBackend, StateRepository
from .results import ExtractResult, SectionsResult

logger = logging.getLogger(__name__)


@dataclass
class Journal:
    """Every collaborator a journal command may need."""

    store: DocumentStore
    state: StateRepository
    editor: Editor
    picker: Picker
    previewer: Previewer
    search: SearchBackend
    policy: WhitespacePolicy = DEFAULT_POLICY
    preview_chars: int = 200


def get_store(config: Config) -> FileDocumentStore:
    """Resolve journal and notes directories from config."""
    return FileDocumentStore(config.journal_path, config.notes_path)


def get_policy(config: Config) -> WhitespacePolicy:
    return WhitespacePolicy(
        blank_run_threshold=config.blank_run_threshold,
        merge_separators=config.merge_separators,
        trim_trailing_blank=config.trim_trailing_blank,
    )


def get_journal(config: Config) -> Journal:
    return Journal(
        store=get_store(config),
        state=JsonStateRepository(STATE_FILE),
        editor=CommandEditor(config.editor_command),
        picker=FzfPicker(config.picker),
        previewer=CommandPreviewer(config.previewer),
        search=RipgrepSearch(config.search_tool),
        policy=get_policy(config),
        preview_chars=config.preview_chars,
    )


# ============== Sections ==============


def read_source(store: DocumentStore, ref: str) -> str:
    """Read a source document, raising SourceNotFound if it is missing or unreadable."""
    try:
        text = store.read(ref)
    except UnreadableDocument as e:
        raise SourceNotFound(ref, e.reason) from e
    if text is None:
        raise SourceNotFound(ref)
    return text


def list_sections(store: DocumentStore, ref: str) -> SectionsResult:
    """Split a document into its sections."""
    text = read_source(store, ref)
    return SectionsResult(source=ref, sections=split_sections(text))


def extract_sections_to_note(
    store: DocumentStore,
    request: ExtractionRequest,
    policy: WhitespacePolicy = DEFAULT_POLICY,
) -> ExtractResult:
    """
    Move sections of a document into a note, creating or appending to it.

    The note is written before the source is rewritten, so a failed note
    write never loses content. Each file is written exactly once.
    """
    text = read_source(store, request.source)

    result = extract_sections(text, request.sections, policy=policy)

    source_path = store.resolve(request.source)
    destination = store.note_path(request.slug)
    if destination.resolve() == source_path.resolve():
        raise SameDocument(source_path)

    try:
        existing = store.read(str(destination))
    except UnreadableDocument as e:
        raise DestinationWriteFailed(destination, e.reason) from e

    newline = result.newline
    if existing and existing.strip():
        note_content = f"{existing.rstrip()}{newline * 2}{result.new_note_text}{newline}"
    else:
        note_content = f"{result.new_note_text}{newline}"

    try:
        store.write(str(destination), note_content)
    except OSError as e:
        logger.error(f"Failed to write {destination}: {e}")
        raise DestinationWriteFailed(destination, str(e)) from e

    try:
        store.write(request.source, result.remaining_source_text)
    except OSError as e:
        logger.error(f"Failed to rewrite {source_path} after writing {destination}: {e}")
        raise SourceWriteFailed(source_path, destination, str(e)) from e

    logger.info(
        f"Extracted sections {list(request.sections)} from {source_path} to {destination}"
    )
    return ExtractResult(
        source=request.source,
        sections=list(request.sections),
        slug=request.slug,
        destination=destination,
        extracted=list(result.extracted),
    )


def parse_section_list(value: str) -> list[int]:
    """Parse "1,3 4" into [1, 3, 4]; junk and non-positive tokens are ignored."""
    indices = []
    for token in value.replace(",", " ").split():
        try:
            index = int(token)
        except ValueError:
            logger.debug(f"Ignoring section token {token!r}")
            continue
        if index > 0:
            indices.append(index)
    return indices


# ============== Entries, tags, notes, search ==============


def get_entries(store: DocumentStore, tag: str | None = None, preview_chars: int = 200) -> list[Entry]:
    """Daily entries newest first, optionally only those tagged `tag`."""
    entries = []
    for entry_date, path in store.list_entries():
        try:
            text = store.read(str(path)) or ""
        except UnreadableDocument as e:
            logger.warning(f"Skipping entry {path}: {e}")
            continue
        if tag and not has_tag(text, tag):
            continue
        entries.append(entry_from_text(entry_date, path, text, preview_chars))
    return entries


def list_tags(store: DocumentStore) -> list[str]:
    """Every tag used on line 2 of any entry, sorted case-insensitively."""
    tags = set()
    for entry in get_entries(store):
        tags.update(entry.tags)
    return sorted(tags, key=lambda t: (t.lower(), t))


def get_notes(store: DocumentStore) -> list[Note]:
    return store.list_notes()


def search_roots(store: DocumentStore) -> list[Path]:
    roots = [store.journal_dir]
    if not store.notes_dir.is_relative_to(store.journal_dir):
        roots.append(store.notes_dir)
    return roots


def get_search_matches(search: SearchBackend, store: DocumentStore, pattern: str = ".") -> list[SearchMatch]:
    """Lines matching `pattern` in entries and notes. The default matches every non-empty line."""
    return search.search(pattern or ".", search_roots(store))


def today_key(offset: int | None = None, today: date | None = None) -> str:
    if offset:
        return date_days_ago(offset, today)
    return format_date(today or date.today())


def most_recent_path(journal: Journal) -> str | None:
    """Most recently opened document, else the newest entry."""
    state = journal.state.read()
    if state.most_recent and Path(state.most_recent).exists():
        return state.most_recent
    entries = journal.store.list_entries()
    if entries:
        return str(entries[0][1])
    return None


# ============== Opening documents ==============


def open_document(journal: Journal, path: Path, template: str | None = None, line: int | None = None) -> Path:
    """Create from template if missing, record as most recent, open in the editor."""
    if template is not None and not path.exists():
        try:
            journal.store.write(str(path), template)
        except OSError as e:
            logger.error(f"Failed to create {path}: {e}")
            raise DocumentWriteFailed(path, str(e)) from e
        logger.info(f"Created {path}")
    journal.state.record_opened(str(path))
    journal.editor.open(path, line)
    return path


def open_entry(journal: Journal, date_key: str) -> Path:
    entry_date = parse_date_key(date_key)
    if entry_date is None:
        raise JournalError(f"Invalid date: {date_key}")
    return open_document(journal, journal.store.entry_path(entry_date), entry_template(date_key))


def open_note(journal: Journal, slug: str) -> Path:
    slug = normalize_slug(slug)
    return open_document(journal, journal.store.note_path(slug), note_template(slug))


def open_most_recent(journal: Journal) -> Path:
    path = most_recent_path(journal)
    if not path:
        raise JournalError("No entries found.")
    return open_document(journal, Path(path))


# ============== Interactive browsing ==============


def _pick_path(journal: Journal, items: list[str], prompt: str) -> Path | None:
    """Pick from `path\\tlabel` items, previewing the path."""
    choice = journal.picker.pick(
        items,
        prompt=prompt,
        preview=journal.previewer.command("{1}"),
        delimiter="\t",
        with_nth="2..",
    )
    if choice is None:
        return None
    return Path(choice.split("\t", 1)[0])


def browse_entries(journal: Journal, tag: str | None = None) -> Path | None:
    """Pick an entry by date and open it."""
    entries = get_entries(journal.store, tag, journal.preview_chars)
    if not entries:
        raise JournalError("No journal entries found.")

    items = [f"{e.path}\t{e.date.isoformat()}  {e.title}" for e in entries]
    path = _pick_path(journal, items, tag or "date")
    return open_document(journal, path) if path else None


def browse_timeline(journal: Journal, tag: str | None = None) -> Path | None:
    """Browse entries newest first with tags and a body preview."""
    entries = get_entries(journal.store, tag, journal.preview_chars)
    if not entries:
        raise JournalError("No journal entries found.")

    items = []
    for e in entries:
        tags = " ".join(f"#{t}" for t in e.tags)
        label = "  ".join(part for part in (e.date.isoformat(), e.title, tags, e.preview) if part)
        items.append(f"{e.path}\t{label}")
    path = _pick_path(journal, items, "timeline")
    return open_document(journal, path) if path else None


def browse_tags(journal: Journal, tag: str | None = None) -> Path | None:
    """Pick a tag (unless given), then an entry carrying it."""
    if not tag:
        tags = list_tags(journal.store)
        if not tags:
            raise JournalError("No tags found.")
        tag = journal.picker.pick(tags, prompt="tag")
        if tag is None:
            return None
    return browse_entries(journal, tag)


def browse_notes(journal: Journal, slug: str | None = None) -> Path | None:
    """Open a note by slug, or pick one from the notes directory."""
    if slug:
        return open_note(journal, slug)

    notes = get_notes(journal.store)
    if not notes:
        raise JournalError("No notes found. Create one with: j note SLUG")
    path = _pick_path(journal, [f"{n.path}\t{n.slug}" for n in notes], "note")
    return open_document(journal, path) if path else None


def browse_search(journal: Journal, pattern: str = ".") -> Path | None:
    """Pick a matching line and open the document at it."""
    matches = get_search_matches(journal.search, journal.store, pattern)
    if not matches:
        raise JournalError("No matches found.")

    items = [f"{m.path}\t{m.line}\t{m.text}" for m in matches]
    choice = journal.picker.pick(
        items,
        prompt="search",
        preview=journal.previewer.command("{1}", line="{2}"),
        delimiter="\t",
    )
    if choice is None:
        return None
    path, line, _ = choice.split("\t", 2)
    return open_document(journal, Path(path), line=int(line))
