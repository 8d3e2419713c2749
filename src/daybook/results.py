"""Typed results for each command, serialized to JSON by the CLI."""

from dataclasses import dataclass, field
from pathlib import Path

from .core.entries import Entry, Note, SearchMatch
from .core.sections import Section


@dataclass
class TodayResult:
    date: str
    path: Path

    def to_dict(self) -> dict:
        return {"date": self.date, "path": str(self.path)}


@dataclass
class EntriesResult:
    entries: list[Entry]
    tag: str | None = None
    timeline: bool = False

    def to_dict(self) -> dict:
        entries = [e.to_dict(timeline=self.timeline) for e in self.entries]
        if self.tag:
            return {"tag": self.tag, "entries": entries}
        return {"entries": entries}


@dataclass
class TagsResult:
    tags: list[str]

    def to_dict(self) -> dict:
        return {"tags": self.tags}


@dataclass
class SearchResult:
    matches: list[SearchMatch]

    def to_dict(self) -> dict:
        return {"matches": [m.to_dict() for m in self.matches]}


@dataclass
class NoteResult:
    slug: str
    path: Path

    def to_dict(self) -> dict:
        return {"slug": self.slug, "path": str(self.path)}


@dataclass
class NotesResult:
    notes: list[Note]

    def to_dict(self) -> dict:
        return {"notes": [n.to_dict() for n in self.notes]}


@dataclass
class ContinueResult:
    path: str

    def to_dict(self) -> dict:
        return {"path": self.path}


@dataclass
class SectionsResult:
    source: str
    sections: list[Section]

    def to_dict(self) -> dict:
        return {"source": self.source, "sections": [s.to_dict() for s in self.sections]}


@dataclass
class ExtractResult:
    source: str
    sections: list[int]
    slug: str
    destination: Path | None = None
    status: str = "ok"
    extracted: list[Section] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "source": self.source,
            "sections": self.sections,
            "slug": self.slug,
        }
