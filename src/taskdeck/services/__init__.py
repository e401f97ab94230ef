"""Service layer: store facade, configuration, notes, notifications."""

from .config_service import ConfigService, get_config_service
from .note_service import NoteService
from .store import Store

__all__ = [
    "ConfigService",
    "get_config_service",
    "NoteService",
    "Store",
]
