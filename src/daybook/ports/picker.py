"""Interactive selection interfaces."""

from typing import Protocol


class Picker(Protocol):
    """Interface for choosing one line from a list."""

    def pick(
        self,
        items: list[str],
        prompt: str = "",
        preview: str | None = None,
        delimiter: str | None = None,
        with_nth: str | None = None,
    ) -> str | None:
        """
        Return the chosen item, or None if the user cancelled.

        `delimiter` splits items into fields; `with_nth` selects the fields
        shown, and `preview` may refer to fields as {1}, {2}, ...
        """
        ...


class Previewer(Protocol):
    """Interface for building the preview command a picker runs."""

    def command(self, placeholder: str = "{}", line: str | None = None) -> str:
        """Shell command that renders the file named by `placeholder`."""
        ...
