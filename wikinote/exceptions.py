# wikinote/exceptions.py
"""Exception hierarchy shared by the fetch, parse and settings layers."""

from __future__ import annotations


class WikinoteError(Exception):
    """Base class for all wikinote errors."""


class FetchError(WikinoteError):
    """Raised when the extract query cannot be fetched or decoded."""


class MalformedResponseError(FetchError):
    """Raised when a decoded response does not carry ``query.pages``."""


class SettingsError(WikinoteError):
    """Raised when settings cannot be loaded, saved or updated."""
