"""Pure journal entry logic - dates, tags and previews."""

import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from pathlib import Path

from .sections import collapse_whitespace, section_title, split_lines

DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TAG_SPLIT_RE = re.compile(r"[,\s]+")
_TAG_PREFIX_RE = re.compile(r"^tags?\s*:\s*", re.IGNORECASE)


@dataclass
class Entry:
    """A dated journal entry."""

    date: date
    path: Path
    title: str = ""
    tags: list[str] = field(default_factory=list)
    preview: str = ""

    def to_dict(self, timeline: bool = False) -> dict:
        data = {"date": self.date.isoformat(), "path": str(self.path)}
        if timeline:
            data["title"] = self.title
            data["tags"] = self.tags
            data["preview"] = self.preview
        return data


@dataclass
class Note:
    """A freeform note identified by its slug."""

    slug: str
    path: Path

    def to_dict(self) -> dict:
        return {"slug": self.slug, "path": str(self.path)}


@dataclass
class SearchMatch:
    """A line matched by full-text search."""

    path: Path
    line: int
    text: str

    def to_dict(self) -> dict:
        return {"path": str(self.path), "line": self.line, "text": self.text}


def format_date(target: date) -> str:
    return target.isoformat()


def date_days_ago(days: int, today: date | None = None) -> str:
    """Date key for N days before today."""
    today = today or date.today()
    return format_date(today - timedelta(days=days))


def is_date_key(value: str) -> bool:
    return parse_date_key(value) is not None


def parse_date_key(value: str) -> date | None:
    """Parse YYYY-MM-DD, returning None for anything else."""
    if not DATE_KEY_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def parse_tags(text: str) -> list[str]:
    """
    Tags from line 2 of an entry.

    Line 1 is the title; line 2 holds tags separated by commas or spaces,
    each with an optional leading '#', e.g. ``#work #health`` or
    ``tags: work, health``.
    """
    lines = split_lines(text)
    if len(lines) < 2:
        return []

    line = _TAG_PREFIX_RE.sub("", lines[1].strip())
    tags: list[str] = []
    for token in _TAG_SPLIT_RE.split(line):
        tag = token.lstrip("#")
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def has_tag(text: str, tag: str) -> bool:
    return tag.lstrip("#") in parse_tags(text)


def entry_preview(text: str, max_chars: int = 200) -> str:
    """Collapsed body text after the title and tag lines."""
    body = collapse_whitespace(" ".join(split_lines(text)[2:]))
    if max_chars and len(body) > max_chars:
        return body[: max_chars - 1].rstrip() + "…"
    return body


def entry_from_text(entry_date: date, path: Path, text: str, preview_chars: int = 200) -> Entry:
    lines = split_lines(text)
    return Entry(
        date=entry_date,
        path=path,
        title=section_title(lines[0]) if lines and lines[0].strip() else "",
        tags=parse_tags(text),
        preview=entry_preview(text, preview_chars),
    )


def entry_template(entry_date: date | str) -> str:
    """Initial content of a new daily entry."""
    key = entry_date if isinstance(entry_date, str) else format_date(entry_date)
    return f"# {key}\n\n"


def note_template(slug: str) -> str:
    return f"# {slug}\n\n"
