# wikinote/cli/settings.py
from __future__ import annotations

import json
from pathlib import Path

import typer
from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wikinote import config
from wikinote.cli.generic import load_cli_settings
from wikinote.datatypes import SETTINGS_KEYS, Settings
from wikinote.exceptions import SettingsError
from wikinote.settings_store import JsonSettingsStore, coerce_setting, update_settings

settings_app = typer.Typer(add_completion=False, no_args_is_help=True)


def _resolve_name(key: str) -> str:
    """
    Accept attribute names, kebab-case or the persisted camelCase key.
    """
    name = key.replace("-", "_")
    for attr, stored in SETTINGS_KEYS.items():
        if key == stored:
            return attr
    return name


@settings_app.command("show")
def settings_show(
    settings_file: Path = typer.Option(
        config.DEFAULT_SETTINGS_PATH,
        "--settings-file",
        envvar=config.SETTINGS_ENV_VAR,
        help="Settings JSON file",
    ),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of table"),
) -> None:
    """
    Show the effective settings (stored values merged over defaults).
    """
    settings = load_cli_settings(settings_file)
    if json_out:
        typer.echo(json.dumps(settings.to_mapping(), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Settings ({escape(str(settings_file))})")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in settings.to_mapping().items():
        table.add_row(key, escape(repr(value)))
    print(table)


@settings_app.command("set")
def settings_set(
    key: str = typer.Argument(..., help="Setting name, e.g. template or bold-search-term"),
    value: str = typer.Argument(..., help='New value ("\\n" is read as a newline)'),
    settings_file: Path = typer.Option(
        config.DEFAULT_SETTINGS_PATH,
        "--settings-file",
        envvar=config.SETTINGS_ENV_VAR,
        help="Settings JSON file",
    ),
) -> None:
    """
    Change one setting and save it.
    """
    settings = load_cli_settings(settings_file)
    store = JsonSettingsStore(settings_file)
    name = _resolve_name(key)
    try:
        updated = update_settings(store, settings, **{name: coerce_setting(name, value)})
    except SettingsError as exc:
        print(Panel.fit(f"[bold red]Settings error:[/bold red] {escape(str(exc))}"))
        raise typer.Exit(code=2)

    print(
        Panel.fit(
            f"[bold green]Saved[/bold green] {escape(SETTINGS_KEYS[name])} = "
            f"{escape(repr(getattr(updated, name)))}"
        )
    )


@settings_app.command("reset")
def settings_reset(
    settings_file: Path = typer.Option(
        config.DEFAULT_SETTINGS_PATH,
        "--settings-file",
        envvar=config.SETTINGS_ENV_VAR,
        help="Settings JSON file",
    ),
) -> None:
    """
    Overwrite the stored settings with the defaults.
    """
    try:
        JsonSettingsStore(settings_file).save(Settings())
    except SettingsError as exc:
        print(Panel.fit(f"[bold red]Settings error:[/bold red] {escape(str(exc))}"))
        raise typer.Exit(code=2)
    print(Panel.fit("[bold green]Settings reset to defaults.[/bold green]"))
