# wikinote/cli/__init__.py
from __future__ import annotations
from wikinote.cli.generic import app
from wikinote.cli.settings import settings_app

app.add_typer(settings_app, name="settings", help="Show and change formatting settings")

# Expose the main app only
__all__ = ["app"]
