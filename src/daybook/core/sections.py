"""Pure section splitting logic - no I/O dependencies.

A document is split into sections on boundary lines. A boundary is a blank
line or a separator (``---``, ``***``, ``___`` or a longer run of the same
character). Each maximal run of non-boundary lines is one section.
"""

import re
from dataclasses import dataclass

EMPTY_TITLE = "(empty section)"

_SEPARATOR_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Section:
    """A contiguous run of content lines within a document."""

    index: int
    start_line: int
    end_line: int
    title: str
    preview: str
    raw_lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.raw_lines)

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "title": self.title,
            "preview": self.preview,
        }


def split_lines(text: str) -> list[str]:
    """Split text into logical lines. A final newline adds no empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def line_ending(text: str) -> str:
    """The document's line ending, taken from its first line break."""
    first = text.find("\n")
    if first > 0 and text[first - 1] == "\r":
        return "\r\n"
    return "\n"


def is_blank(line: str) -> bool:
    return not line.strip()


def is_separator(line: str) -> bool:
    return bool(_SEPARATOR_RE.match(line.strip()))


def is_boundary(line: str) -> bool:
    return is_blank(line) or is_separator(line)


def section_title(first_line: str) -> str:
    """Title from a section's first line, heading markers stripped."""
    title = first_line.strip().lstrip("#").strip()
    return title or EMPTY_TITLE


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def section_preview(lines: list[str] | tuple[str, ...]) -> str:
    return collapse_whitespace(" ".join(lines))


def split_sections(text: str) -> list[Section]:
    """Split a markdown document into ordered sections."""
    sections: list[Section] = []
    run: list[str] = []
    run_start = 0

    def close_run() -> None:
        sections.append(
            Section(
                index=len(sections) + 1,
                start_line=run_start,
                end_line=run_start + len(run) - 1,
                title=section_title(run[0]),
                preview=section_preview(run),
                raw_lines=tuple(run),
            )
        )

    for number, line in enumerate(split_lines(text), start=1):
        if is_boundary(line):
            if run:
                close_run()
                run = []
            continue
        if not run:
            run_start = number
        run.append(line)

    if run:
        close_run()

    return sections
