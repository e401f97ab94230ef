"""Interactive session engine.

Keys go through the :class:`InputDispatcher` (or :func:`parse_command` for
colon commands) to become actions, which the :class:`SessionController`
applies to the single :class:`AppState`.
"""

from .commands import parse_command
from .controller import SessionController
from .dispatcher import DispatcherState, InputDispatcher, Mode
from .ordering import order_notes, reorder
from .state import AppState, Tab

__all__ = [
    "AppState",
    "DispatcherState",
    "InputDispatcher",
    "Mode",
    "SessionController",
    "Tab",
    "order_notes",
    "parse_command",
    "reorder",
]
