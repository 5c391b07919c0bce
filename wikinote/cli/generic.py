# wikinote/cli/generic.py
from __future__ import annotations

import dataclasses
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.panel import Panel

from wikinote import config
from wikinote.datatypes import Outcome, Settings
from wikinote.exceptions import SettingsError
from wikinote.orchestrator import (
    FetchFn,
    TextSink,
    resolve_and_format,
    resolve_from_prompt,
    title_from_path,
)
from wikinote.settings_store import JsonSettingsStore, load_settings
from wikinote.sinks import ConsoleSink, FileSink
from wikinote.utils import configure_logging
from wikinote.wiki_client import WikiApiFetcher, fetch_query

app = typer.Typer(add_completion=False, no_args_is_help=True)


class Source(str, Enum):
    api = "api"
    wikipediaapi = "wikipediaapi"


def notify(message: str) -> None:
    """Show a user-visible notice."""
    print(Panel.fit(escape(message)))


def load_cli_settings(settings_file: Path) -> Settings:
    """
    Load settings for a command; a broken store exits with code 2.
    """
    try:
        return load_settings(JsonSettingsStore(settings_file))
    except SettingsError as exc:
        print(Panel.fit(f"[bold red]Settings error:[/bold red] {escape(str(exc))}"))
        raise typer.Exit(code=2)


def _fetcher(source: Source) -> FetchFn:
    if source is Source.wikipediaapi:
        return WikiApiFetcher()
    return fetch_query


def _sink(into: Optional[Path], line: Optional[int]) -> TextSink:
    if into is None:
        return ConsoleSink()
    return FileSink(into, line=line)


def _finish(outcome: Outcome) -> None:
    if not outcome.inserted and outcome is not Outcome.CANCELLED:
        raise typer.Exit(code=1)


@app.command()
def fetch(
    term: str = typer.Argument(..., help="Search term to look up on Wikipedia"),
    into: Optional[Path] = typer.Option(
        None, "--into", help="File to insert into (default: print to stdout)"
    ),
    line: Optional[int] = typer.Option(
        None, "--line", min=1, help="1-based line to insert before (default: append)"
    ),
    lang: Optional[str] = typer.Option(
        None, "--lang", help="Language code, e.g., en, ko, es (default: from settings)"
    ),
    source: Source = typer.Option(Source.api, help="Where to fetch extracts from"),
    settings_file: Path = typer.Option(
        config.DEFAULT_SETTINGS_PATH,
        "--settings-file",
        envvar=config.SETTINGS_ENV_VAR,
        help="Settings JSON file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """
    Fetch the summary for TERM, format it and insert it.
    """
    configure_logging(verbose)
    settings = load_cli_settings(settings_file)
    if lang:
        settings = dataclasses.replace(settings, language=lang)

    outcome = resolve_and_format(
        term, settings, _fetcher(source), _sink(into, line), notify
    )
    _finish(outcome)


@app.command()
def note(
    file: Path = typer.Argument(..., help="Note whose title is the search term"),
    line: Optional[int] = typer.Option(
        None, "--line", min=1, help="1-based line to insert before (default: append)"
    ),
    source: Source = typer.Option(Source.api, help="Where to fetch extracts from"),
    settings_file: Path = typer.Option(
        config.DEFAULT_SETTINGS_PATH,
        "--settings-file",
        envvar=config.SETTINGS_ENV_VAR,
        help="Settings JSON file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """
    Use FILE's title (base name without extension) as the search term and
    insert the summary into FILE itself.
    """
    configure_logging(verbose)
    settings = load_cli_settings(settings_file)

    outcome = resolve_and_format(
        title_from_path(file),
        settings,
        _fetcher(source),
        FileSink(file, line=line),
        notify,
    )
    _finish(outcome)


@app.command()
def ask(
    into: Optional[Path] = typer.Option(
        None, "--into", help="File to insert into (default: print to stdout)"
    ),
    line: Optional[int] = typer.Option(
        None, "--line", min=1, help="1-based line to insert before (default: append)"
    ),
    source: Source = typer.Option(Source.api, help="Where to fetch extracts from"),
    settings_file: Path = typer.Option(
        config.DEFAULT_SETTINGS_PATH,
        "--settings-file",
        envvar=config.SETTINGS_ENV_VAR,
        help="Settings JSON file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """
    Prompt for a search term; an empty answer cancels.
    """
    configure_logging(verbose)
    settings = load_cli_settings(settings_file)

    def prompt() -> Optional[str]:
        answer = typer.prompt("Enter search term", default="", show_default=False)
        return answer or None

    outcome = resolve_from_prompt(
        prompt, settings, _fetcher(source), _sink(into, line), notify
    )
    _finish(outcome)
