"""CLI command implementations, registered on the Typer app in ``taskdeck.main``."""
