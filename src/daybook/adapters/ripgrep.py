"""ripgrep adapter - subprocess wrapper for full-text search."""

import logging
import subprocess
from pathlib import Path

from daybook.core.entries import SearchMatch
from daybook.core.errors import JournalError, ToolNotFound

logger = logging.getLogger(__name__)


class RipgrepSearch:
    """
    rg subprocess adapter.

    Implements SearchBackend protocol. Searches markdown files only.
    """

    def __init__(self, binary: str = "rg", timeout: int = 30):
        self.binary = binary
        self.timeout = timeout

    def search(self, pattern: str, paths: list[Path]) -> list[SearchMatch]:
        """Return every line matching `pattern` under `paths`."""
        paths = [p for p in paths if p.exists()]
        if not paths:
            return []

        cmd = [
            self.binary,
            "--line-number",
            "--with-filename",
            "--no-heading",
            "--null",
            "--color",
            "never",
            "--smart-case",
            "--glob",
            "*.md",
            "--",
            pattern,
            *(str(p) for p in paths),
        ]
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise ToolNotFound(self.binary)
        except subprocess.TimeoutExpired:
            raise JournalError(f"{self.binary} timed out after {self.timeout}s")

        # rg exits 1 when nothing matched
        if proc.returncode == 1:
            return []
        if proc.returncode != 0:
            logger.error(f"rg failed: {proc.stderr}")
            raise JournalError(f"Search failed: {proc.stderr.strip()}")

        return self._parse_output(proc.stdout)

    def _parse_output(self, output: str) -> list[SearchMatch]:
        """Parse `path\\0line:text` lines into matches."""
        matches = []
        for raw in output.splitlines():
            path, sep, rest = raw.partition("\0")
            if not sep:
                continue
            line_no, _, text = rest.partition(":")
            try:
                matches.append(SearchMatch(path=Path(path), line=int(line_no), text=text))
            except ValueError:
                logger.debug(f"Skipping malformed rg line: {raw!r}")
                continue
        return matches
