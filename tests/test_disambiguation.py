from __future__ import annotations

from wikinote.datatypes import Extract
from wikinote.disambiguation import is_ambiguous, next_search_term


def _extract(text: str) -> Extract:
    return Extract(title="X", text=text, url="https://en.wikipedia.org/wiki/X")


def test_marker_makes_extract_ambiguous() -> None:
    assert is_ambiguous(_extract("Mercury may refer to:\n\nMercury (planet)"))


def test_plain_extract_is_not_ambiguous() -> None:
    assert not is_ambiguous(_extract("Paris is the capital of France."))
    # Marker match is literal and case-sensitive
    assert not is_ambiguous(_extract("It May Refer To: something"))


def test_next_search_term_takes_first_candidate() -> None:
    extract = _extract("X may refer to:\n\nFoo, a place\nBar, a person")
    assert next_search_term(extract) == "Foo"


def test_next_search_term_skips_leading_section_heading() -> None:
    extract = _extract(
        "Mercury may refer to:\n\n\n== Astronomy ==\nMercury (planet), the closest planet"
    )
    assert next_search_term(extract) == "Mercury (planet)"


def test_next_search_term_uses_first_marker_only() -> None:
    extract = _extract("A may refer to: B, x may refer to: C, y")
    assert next_search_term(extract) == "B"
    # Candidates stop at a second marker
    extract = _extract("A may refer to: B may refer to: C, y")
    assert next_search_term(extract) == "B"


def test_next_search_term_without_marker_is_empty() -> None:
    assert next_search_term(_extract("Nothing ambiguous here")) == ""
