# wikinote/datatypes.py
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from wikinote import config

logger = logging.getLogger(__name__)

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}


def parse_bool(value: Any) -> Optional[bool]:
    """
    Read a stored or typed boolean; None when `value` is not one.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    return None


@dataclass(frozen=True, slots=True)
class Extract:
    """
    Lead text, title and canonical URL of a resolved query term.
    `text` is the raw plain-text extract, sections included.
    """

    title: str
    text: str
    url: str


# Persisted (camelCase) key for each Settings attribute
SETTINGS_KEYS: dict[str, str] = {
    "template": "template",
    "paragraph_template": "paragraphTemplate",
    "use_paragraph_template": "useParagraphTemplate",
    "bold_search_term": "boldSearchTerm",
    "language": "language",
}


@dataclass(frozen=True, slots=True)
class Settings:
    """
    User formatting preferences.
    Immutable: updates go through `settings_store.update_settings`.
    """

    template: str = config.DEFAULT_TEMPLATE
    paragraph_template: str = config.DEFAULT_PARAGRAPH_TEMPLATE
    use_paragraph_template: bool = config.DEFAULT_USE_PARAGRAPH_TEMPLATE
    bold_search_term: bool = config.DEFAULT_BOLD_SEARCH_TERM
    language: str = config.DEFAULT_LANGUAGE

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "Settings":
        """
        Shallow-merge a stored mapping over the defaults, field by field.
        Accepts both persisted camelCase keys and attribute names;
        unknown keys are ignored. A value of the wrong type keeps the default.
        """
        data = data or {}
        defaults = cls()
        values: dict[str, Any] = {}
        for name, key in SETTINGS_KEYS.items():
            if key in data:
                raw = data[key]
            elif name in data:
                raw = data[name]
            else:
                continue

            default = getattr(defaults, name)
            value = parse_bool(raw) if isinstance(default, bool) else raw
            if value is None or not isinstance(value, type(default)):
                logger.warning("Ignoring stored %s=%r, using default %r", key, raw, default)
                continue
            values[name] = value
        return cls(**values)

    def to_mapping(self) -> dict[str, Any]:
        return {key: getattr(self, name) for name, key in SETTINGS_KEYS.items()}


class Outcome(str, enum.Enum):
    """Terminal state of one fetch-and-insert invocation."""

    RESOLVED = "resolved"
    RESOLVED_AFTER_DISAMBIGUATION = "resolved_after_disambiguation"
    NOT_FOUND = "not_found"
    DISAMBIGUATION_FAILED = "disambiguation_failed"
    FETCH_ERROR = "fetch_error"
    CANCELLED = "cancelled"

    @property
    def inserted(self) -> bool:
        return self in (Outcome.RESOLVED, Outcome.RESOLVED_AFTER_DISAMBIGUATION)
