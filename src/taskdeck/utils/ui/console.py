"""Console utilities for taskdeck."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "muted": "dim",
        "key": "cyan",
    }
)


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Shared console for CLI output, with the taskdeck message styles."""
    return Console(highlight=highlight, theme=THEME)
