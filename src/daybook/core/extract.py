"""Pure section extraction logic - no I/O dependencies."""

from dataclasses import dataclass

from .errors import EmptySectionList, EmptySlug, InvalidSectionIndex, InvalidSlug
from .sections import Section, is_blank, is_boundary, is_separator, line_ending, split_lines, split_sections


@dataclass(frozen=True)
class WhitespacePolicy:
    """How the source document is tidied after sections are removed."""

    blank_run_threshold: int = 2  # runs of at least this many blank lines become one
    merge_separators: bool = True
    trim_leading_blank: bool = True
    trim_trailing_blank: bool = True


DEFAULT_POLICY = WhitespacePolicy()


def normalize_slug(slug: str) -> str:
    """Validate a note slug, dropping a trailing .md the user may have typed."""
    slug = (slug or "").strip()
    if slug.endswith(".md"):
        slug = slug[:-3]
    if not slug:
        raise EmptySlug()
    if "/" in slug or "\\" in slug:
        raise InvalidSlug(slug)
    if slug.startswith("."):
        raise InvalidSlug(slug, "must not start with '.'")
    return slug


@dataclass(frozen=True)
class ExtractionRequest:
    """Move sections of `source` into the note named `slug`."""

    source: str
    sections: tuple[int, ...]
    slug: str

    @classmethod
    def create(cls, source: str, sections, slug: str) -> "ExtractionRequest":
        indices = tuple(sorted(set(sections)))
        if not indices:
            raise EmptySectionList()
        return cls(source=source, sections=indices, slug=normalize_slug(slug))


@dataclass(frozen=True)
class ExtractionResult:
    """Replacement contents for the source document and the new note."""

    remaining_source_text: str
    new_note_text: str
    extracted: tuple[Section, ...] = ()
    newline: str = "\n"


def resolve_sections(indices, sections: list[Section]) -> list[Section]:
    """
    Look up sections by index, in document order.

    Raises InvalidSectionIndex naming every index that doesn't exist.
    """
    wanted = sorted(set(indices))
    if not wanted:
        raise EmptySectionList()

    by_index = {s.index: s for s in sections}
    missing = [i for i in wanted if i not in by_index]
    if missing:
        raise InvalidSectionIndex(missing, len(sections))
    return [by_index[i] for i in wanted]


def join_sections(sections: list[Section], newline: str = "\n") -> str:
    """Concatenate sections with exactly one blank line between them."""
    texts = [s.text.removesuffix("\r") if newline == "\r\n" else s.text for s in sections]
    return (newline * 2).join(texts)


def normalize_blank_lines(lines: list[str], policy: WhitespacePolicy = DEFAULT_POLICY) -> list[str]:
    """Tidy boundary lines left behind once sections are removed."""
    if all(is_boundary(line) for line in lines):
        return []

    merged: list[str] = []
    last_marker_separator = False
    for line in lines:
        if is_blank(line):
            merged.append(line)
            continue
        if is_separator(line):
            if policy.merge_separators and last_marker_separator:
                continue
            last_marker_separator = True
        else:
            last_marker_separator = False
        merged.append(line)

    result: list[str] = []
    run: list[str] = []
    for line in merged + [None]:
        if line is not None and is_blank(line):
            run.append(line)
            continue
        if run:
            if len(run) >= policy.blank_run_threshold:
                run = run[:1]
            result.extend(run)
            run = []
        if line is not None:
            result.append(line)

    if policy.trim_leading_blank:
        while result and is_blank(result[0]):
            result.pop(0)
    if policy.trim_trailing_blank and result and is_blank(result[-1]):
        result.pop()
    return result


def extract_sections(
    text: str,
    indices,
    sections: list[Section] | None = None,
    policy: WhitespacePolicy = DEFAULT_POLICY,
) -> ExtractionResult:
    """
    Remove sections from a document and collect them into a new note.

    All indices are validated before anything is computed, so a bad index
    yields no partial result. Extracting every section leaves an empty
    source text.
    """
    if sections is None:
        sections = split_sections(text)
    chosen = resolve_sections(indices, sections)

    removed: set[int] = set()
    for section in chosen:
        removed.update(range(section.start_line, section.end_line + 1))

    kept = [line for number, line in enumerate(split_lines(text), start=1) if number not in removed]
    remaining = normalize_blank_lines(kept, policy)

    newline = line_ending(text)
    # Kept lines still carry their "\r" when the document uses CRLF.
    remaining_text = "\n".join(remaining)
    if remaining_text and text.endswith("\n"):
        remaining_text += "\n"
    else:
        remaining_text = remaining_text.removesuffix("\r")

    return ExtractionResult(
        remaining_source_text=remaining_text,
        new_note_text=join_sections(chosen, newline),
        extracted=tuple(chosen),
        newline=newline,
    )
