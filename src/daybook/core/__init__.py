"""Functional core - pure business logic with no I/O."""

from .sections import Section, split_sections, is_blank, is_separator, is_boundary
from .extract import (
    ExtractionRequest,
    ExtractionResult,
    WhitespacePolicy,
    extract_sections,
    normalize_slug,
)
from .entries import Entry, Note, SearchMatch, date_days_ago, parse_tags, entry_from_text
from .errors import JournalError

__all__ = [
    # Sections
    "Section",
    "split_sections",
    "is_blank",
    "is_separator",
    "is_boundary",
    # Extraction
    "ExtractionRequest",
    "ExtractionResult",
    "WhitespacePolicy",
    "extract_sections",
    "normalize_slug",
    # Entries
    "Entry",
    "Note",
    "SearchMatch",
    "date_days_ago",
    "parse_tags",
    "entry_from_text",
    # Errors
    "JournalError",
]
