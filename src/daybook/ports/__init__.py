"""Ports - interfaces/protocols for external dependencies."""

from .document_store import DocumentStore
from .state_repo import State, StateRepository
from .picker import Picker, Previewer
from .search_backend import SearchBackend
from .editor import Editor

__all__ = [
    "DocumentStore",
    "State",
    "StateRepository",
    "Picker",
    "Previewer",
    "SearchBackend",
    "Editor",
]
