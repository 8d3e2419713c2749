"""Error taxonomy for journal operations."""

from pathlib import Path


class JournalError(Exception):
    """Base class for errors reported to the user."""

    exit_code = 1


class InvalidSectionIndex(JournalError):
    """One or more requested sections do not exist in the document."""

    def __init__(self, indices: list[int], available: int):
        self.indices = indices
        self.available = available
        listed = ", ".join(str(i) for i in indices)
        super().__init__(f"Invalid section index: {listed} (document has {available} sections)")


class EmptySectionList(JournalError):
    """No sections were requested."""

    def __init__(self):
        super().__init__("Missing extract sections.")


class InvalidSlug(JournalError):
    """Slug can't be used to name a note file."""

    def __init__(self, slug: str, reason: str = "must not contain path separators"):
        self.slug = slug
        super().__init__(f"Invalid slug {slug!r}: {reason}")


class EmptySlug(InvalidSlug):
    def __init__(self):
        super().__init__("", "slug is empty")


class SourceNotFound(JournalError):
    def __init__(self, ref: str, reason: str | None = None):
        self.ref = ref
        self.reason = reason
        message = f"Source not found: {ref}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnreadableDocument(JournalError):
    """A document exists but could not be read or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class DocumentWriteFailed(JournalError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


class SameDocument(JournalError):
    """Extraction source and destination are the same file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Cannot extract sections into their own document: {path}")


class DestinationWriteFailed(JournalError):
    """Writing the destination note failed. The source was not modified."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to write note {path}: {reason} (source left unchanged)")


class SourceWriteFailed(JournalError):
    """
    The destination note was written but rewriting the source failed.

    The extracted content now exists in both files.
    """

    exit_code = 2

    def __init__(self, path: Path, destination: Path, reason: str):
        self.path = path
        self.destination = destination
        super().__init__(
            f"Sections were written to {destination} but updating {path} failed: {reason}. "
            f"The extracted content is now in both files."
        )


class ToolNotFound(JournalError):
    """An external program (fzf, rg, editor) is not installed."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"'{tool}' command not found")
