"""fzf adapter - subprocess wrapper for interactive selection."""

import logging
import shutil
import subprocess

from daybook.core.errors import ToolNotFound

logger = logging.getLogger(__name__)

# fzf exits 1 when nothing matched and 130 when the user hit Esc/Ctrl-C
CANCELLED_CODES = (1, 130)


class FzfPicker:
    """
    fzf subprocess adapter.

    Implements Picker protocol. Items are fed on stdin; fzf draws on the
    terminal and prints the chosen line.
    """

    def __init__(self, binary: str = "fzf", extra_args: list[str] | None = None):
        self.binary = binary
        self.extra_args = extra_args or []

    def pick(
        self,
        items: list[str],
        prompt: str = "",
        preview: str | None = None,
        delimiter: str | None = None,
        with_nth: str | None = None,
    ) -> str | None:
        """Return the chosen item, or None if the user cancelled."""
        if not items:
            return None

        cmd = [self.binary, "--no-multi", *self.extra_args]
        if prompt:
            cmd.extend(["--prompt", f"{prompt}> "])
        if delimiter:
            cmd.extend(["--delimiter", delimiter])
        if with_nth:
            cmd.extend(["--with-nth", with_nth])
        if preview:
            cmd.extend(["--preview", preview])

        try:
            proc = subprocess.run(
                cmd,
                input="\n".join(items),
                stdout=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError:
            raise ToolNotFound(self.binary)

        if proc.returncode in CANCELLED_CODES:
            logger.debug("fzf selection cancelled")
            return None
        if proc.returncode != 0:
            logger.warning(f"fzf exited with status {proc.returncode}")
            return None

        choice = proc.stdout.rstrip("\n")
        return choice or None


class CommandPreviewer:
    """
    Preview command for fzf.

    Implements Previewer protocol. Uses bat when installed, otherwise cat.
    """

    def __init__(self, binary: str = "bat"):
        self.binary = binary if shutil.which(binary) else None
        if self.binary is None:
            logger.debug(f"{binary} not found, previewing with cat")

    def command(self, placeholder: str = "{}", line: str | None = None) -> str:
        if self.binary is None:
            return f"cat {placeholder}"
        cmd = f"{self.binary} --style=plain --color=always"
        if line:
            cmd += f" --highlight-line {line}"
        return f"{cmd} {placeholder}"
