"""Adapters - I/O implementations of ports."""

from .file_documents import FileDocumentStore
from .json_state import JsonStateRepository
from .fzf import FzfPicker, CommandPreviewer
from .ripgrep import RipgrepSearch
from .editor_cli import CommandEditor

__all__ = [
    "FileDocumentStore",
    "JsonStateRepository",
    "FzfPicker",
    "CommandPreviewer",
    "RipgrepSearch",
    "CommandEditor",
]
