"""Helpers shared by the CLI commands."""

from __future__ import annotations

import typer

from taskdeck.services import Store, get_config_service


def get_db_path_override(ctx: typer.Context) -> str | None:
    """The global ``--db-path`` option, if it was given."""
    obj = ctx.find_root().obj or {}
    return obj.get("db_path")


def open_store(ctx: typer.Context) -> Store:
    """Open the store at the configured (or overridden) database path."""
    path = get_config_service().resolve_db_path(get_db_path_override(ctx))
    return Store(path)
