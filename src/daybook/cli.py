"""daybook CLI - journal entries, notes and section extraction."""

import json
import logging
import sys
from datetime import date

import click

from .config import load_config
from .core.errors import JournalError
from .core.extract import ExtractionRequest, normalize_slug
from .results import (
    ContinueResult,
    EntriesResult,
    NoteResult,
    NotesResult,
    SearchResult,
    TagsResult,
    TodayResult,
)
from .workflows import (
    browse_entries,
    browse_notes,
    browse_search,
    browse_tags,
    browse_timeline,
    extract_sections_to_note,
    get_entries,
    get_journal,
    get_notes,
    get_policy,
    get_search_matches,
    get_store,
    list_sections,
    list_tags,
    most_recent_path,
    open_entry,
    open_most_recent,
    parse_section_list,
    today_key,
)

json_option = click.option("--json", "as_json", is_flag=True, help="Output JSON results (no fzf/editor)")


def _echo_json(result) -> None:
    click.echo(json.dumps(result.to_dict(), indent=2))


def _fail(error: JournalError) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(error.exit_code)


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option()
@click.pass_context
def main(ctx, debug: bool):
    """j - journal entries and notes. Opens today's entry by default."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(today)


@main.command()
@click.option("--offset", "-o", type=int, default=None, help="Open the entry N days ago")
@json_option
def today(offset: int | None = None, as_json: bool = False):
    """Open today's entry (created if missing)."""
    config = load_config()
    key = today_key(offset)

    if as_json:
        store = get_store(config)
        _echo_json(TodayResult(date=key, path=store.entry_path(date.fromisoformat(key))))
        return

    try:
        open_entry(get_journal(config), key)
    except JournalError as e:
        _fail(e)


@main.command("date")
@click.option("--tag", default=None, help="Only entries tagged TAG")
@json_option
def date_cmd(tag: str | None, as_json: bool):
    """Select an entry by date."""
    config = load_config()

    if as_json:
        entries = get_entries(get_store(config), tag, config.preview_chars)
        _echo_json(EntriesResult(entries=entries, tag=tag))
        return

    try:
        browse_entries(get_journal(config), tag)
    except JournalError as e:
        _fail(e)


@main.command()
@click.argument("pattern", required=False, default=".")
@json_option
def search(pattern: str, as_json: bool):
    """Search entries and notes by content (full scan)."""
    config = load_config()

    try:
        if as_json:
            journal = get_journal(config)
            _echo_json(SearchResult(matches=get_search_matches(journal.search, journal.store, pattern)))
            return
        browse_search(get_journal(config), pattern)
    except JournalError as e:
        _fail(e)


@main.command()
@click.option("--tag", default=None, help="Only entries tagged TAG")
@json_option
def timeline(tag: str | None, as_json: bool):
    """Browse entries chronologically with preview."""
    config = load_config()

    if as_json:
        entries = get_entries(get_store(config), tag, config.preview_chars)
        _echo_json(EntriesResult(entries=entries, tag=tag, timeline=True))
        return

    try:
        browse_timeline(get_journal(config), tag)
    except JournalError as e:
        _fail(e)


@main.command()
@click.argument("tag_name", metavar="TAG", required=False)
@json_option
def tag(tag_name: str | None, as_json: bool):
    """Browse entries that contain TAG on line 2 (pick a tag if omitted)."""
    config = load_config()

    if as_json:
        store = get_store(config)
        if tag_name:
            _echo_json(EntriesResult(entries=get_entries(store, tag_name, config.preview_chars), tag=tag_name))
        else:
            _echo_json(TagsResult(tags=list_tags(store)))
        return

    try:
        browse_tags(get_journal(config), tag_name)
    except JournalError as e:
        _fail(e)


@main.command()
@click.argument("slug", required=False)
@json_option
def note(slug: str | None, as_json: bool):
    """Open note SLUG (pick from list if omitted)."""
    config = load_config()

    try:
        if as_json:
            store = get_store(config)
            if slug:
                slug = normalize_slug(slug)
                _echo_json(NoteResult(slug=slug, path=store.note_path(slug)))
            else:
                _echo_json(NotesResult(notes=get_notes(store)))
            return
        browse_notes(get_journal(config), slug)
    except JournalError as e:
        _fail(e)


@main.command("continue")
@json_option
def continue_cmd(as_json: bool):
    """Open the most recently opened entry or note."""
    config = load_config()
    journal = get_journal(config)

    try:
        if as_json:
            path = most_recent_path(journal)
            if not path:
                raise JournalError("No entries found.")
            _echo_json(ContinueResult(path=path))
            return
        open_most_recent(journal)
    except JournalError as e:
        _fail(e)


@main.command()
@click.argument("source")
@json_option
def sections(source: str, as_json: bool):
    """List the sections of SOURCE (date, slug or path)."""
    config = load_config()

    try:
        result = list_sections(get_store(config), source)
    except JournalError as e:
        _fail(e)
        return

    if as_json:
        _echo_json(result)
        return

    for section in result.sections:
        click.echo(f"{section.index}\t{section.start_line}-{section.end_line}\t{section.title}")


@main.command()
@click.argument("source")
@click.option("--sections", "section_list", required=True, help="Sections to extract, e.g. 1,3")
@click.option("--slug", required=True, help="Target slug for extracted note")
@json_option
def extract(source: str, section_list: str, slug: str, as_json: bool):
    """Move sections of SOURCE into note SLUG."""
    config = load_config()

    try:
        request = ExtractionRequest.create(source, parse_section_list(section_list), slug)
        result = extract_sections_to_note(get_store(config), request, get_policy(config))
    except JournalError as e:
        _fail(e)
        return

    if as_json:
        _echo_json(result)
        return

    listed = ", ".join(str(i) for i in result.sections)
    click.echo(f"✓ Extracted section(s) {listed} to {result.destination}")


if __name__ == "__main__":
    main()
