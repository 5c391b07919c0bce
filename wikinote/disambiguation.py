# wikinote/disambiguation.py
from __future__ import annotations

from wikinote import config
from wikinote.datatypes import Extract


def is_ambiguous(extract: Extract) -> bool:
    """True when the extract is a disambiguation page ("X may refer to: ...")."""
    return config.DISAMBIGUATION_MARKER in extract.text


def next_search_term(extract: Extract) -> str:
    """
    Derive the follow-up search term from a disambiguation extract:
    the first listed candidate, cut at a comma and at any section heading
    the candidate runs into. Only one candidate is ever produced.
    """
    parts = extract.text.split(config.DISAMBIGUATION_MARKER)
    if len(parts) < 2:
        return ""
    # Text between the first marker and the next one, if any
    candidates = parts[1]
    first = candidates.strip().split(",")[0]
    # "== Astronomy ==\nMercury (planet)" -> "Mercury (planet)"
    return first.split(config.SECTION_DELIMITER)[-1].strip()
