# wikinote/orchestrator.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from wikinote.datatypes import Extract, Outcome, Settings
from wikinote.disambiguation import is_ambiguous, next_search_term
from wikinote.exceptions import FetchError
from wikinote.formatter import format_insert
from wikinote.parser import parse_response

logger = logging.getLogger(__name__)

FetchFn = Callable[[str, str], Mapping[str, Any]]
TextSink = Callable[[str], None]
Notifier = Callable[[str], None]
PromptFn = Callable[[], Optional[str]]


def _log_notice(message: str) -> None:
    logger.info(message)


class _FetchFailed(Exception):
    """Internal signal: the fetch boundary already reported a FetchError."""


def _fetch_extract(
    search_term: str, settings: Settings, fetch_fn: FetchFn, notify: Notifier
) -> Optional[Extract]:
    """
    Fetch and parse one query. FetchError stops here and is reported once.
    """
    try:
        return parse_response(fetch_fn(search_term, settings.language), settings.language)
    except FetchError as exc:
        logger.warning("Fetch for %r failed: %s", search_term, exc)
        notify(f"Could not fetch {search_term} from Wikipedia: {exc}")
        raise _FetchFailed from exc


def resolve_and_format(
    search_term: str,
    settings: Settings,
    fetch_fn: FetchFn,
    sink: TextSink,
    notify: Notifier = _log_notice,
) -> Outcome:
    """
    Fetch -> parse -> (maybe) re-fetch the first disambiguation candidate
    -> format -> insert.

    At most two sequential fetches. Every failure emits exactly one
    notification and leaves the sink untouched. Formatting always uses the
    caller's original search term.
    """
    try:
        extract = _fetch_extract(search_term, settings, fetch_fn, notify)
        if extract is None:
            notify(f"{search_term} not found on Wikipedia.")
            return Outcome.NOT_FOUND

        outcome = Outcome.RESOLVED
        if is_ambiguous(extract):
            notify(f"Disambiguation found for {search_term}. Choosing first result.")
            candidate = next_search_term(extract)
            logger.debug("Disambiguation %r -> %r", search_term, candidate)

            extract = _fetch_extract(candidate, settings, fetch_fn, notify)
            if extract is None:
                notify(f"Could not resolve disambiguation for {search_term}.")
                return Outcome.DISAMBIGUATION_FAILED
            outcome = Outcome.RESOLVED_AFTER_DISAMBIGUATION
    except _FetchFailed:
        return Outcome.FETCH_ERROR

    sink(format_insert(extract, search_term, settings))
    logger.info("Inserted extract %r for %r", extract.title, search_term)
    return outcome


def resolve_from_prompt(
    prompt: PromptFn,
    settings: Settings,
    fetch_fn: FetchFn,
    sink: TextSink,
    notify: Notifier = _log_notice,
) -> Outcome:
    """
    Ask for a search term first; nothing (or a blank answer) cancels
    without any fetch, notification or insert.
    """
    search_term = prompt()
    if search_term is None or not search_term.strip():
        logger.debug("Search-term prompt cancelled")
        return Outcome.CANCELLED
    # The answer is the caller-supplied term, used exactly as typed
    return resolve_and_format(search_term, settings, fetch_fn, sink, notify)


def title_from_path(path: Path | str) -> str:
    """
    Search term for the "active file title" entry point: the file's base
    name without extension, e.g. notes/Alan Turing.md -> "Alan Turing".
    """
    return Path(path).stem
