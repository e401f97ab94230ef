"""Command 'config' of taskdeck: view and change app settings."""

import json
from typing import Annotated

import typer

from taskdeck.services import get_config_service
from taskdeck.utils.ui.console import get_console
from taskdeck.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper


def _parse_value(value: str) -> object:
    """Interpret ``true``/``false``/numbers/``null``; anything else stays a string."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


@command_wrapper
def config_command(
    key: Annotated[str | None, typer.Argument(help="Setting to change")] = None,
    value: Annotated[str | None, typer.Argument(help="New value")] = None,
    reset: Annotated[bool, typer.Option("--reset", help="Restore defaults")] = False,
) -> None:
    """Show settings, or set KEY to VALUE."""
    config_svc = get_config_service()

    if reset:
        config_svc.reset_config()
        format_success("Settings reset to defaults")
        return

    if key is None:
        for name, current in config_svc.config.model_dump().items():
            get_console().print(f"[key]{name}[/key] = {current}")
        get_console().print(f"[muted]{config_svc.config_path}[/muted]")
        return

    if value is None:
        raise AppError(f"Missing value for {key}")
    try:
        config_svc.update_config(**{key: _parse_value(value)})
    except ValueError as e:
        raise AppError(str(e)) from e
    format_success(f"{key} = {value}")
