"""Editor adapter - launches the user's editor as a subprocess."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

from daybook.core.errors import ToolNotFound

logger = logging.getLogger(__name__)

# Editors that understand `+N` to jump to a line
LINE_ARG_EDITORS = {"vi", "vim", "nvim", "nano", "emacs", "micro", "kak"}


class CommandEditor:
    """
    Editor subprocess adapter.

    Implements Editor protocol. `command` may carry arguments, e.g.
    "code --wait".
    """

    def __init__(self, command: str = "nvim"):
        self.command = command

    def open(self, path: Path, line: int | None = None) -> None:
        cmd = shlex.split(self.command)
        if line and os.path.basename(cmd[0]) in LINE_ARG_EDITORS:
            cmd.append(f"+{line}")
        cmd.append(str(path))

        try:
            proc = subprocess.run(cmd)
        except FileNotFoundError:
            raise ToolNotFound(cmd[0])

        if proc.returncode != 0:
            logger.warning(f"Editor exited with status {proc.returncode}")
