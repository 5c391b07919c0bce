from __future__ import annotations

import dataclasses

from wikinote.datatypes import Extract, Settings
from wikinote.formatter import bold_first_match, format_body, format_insert, lead_section

URL = "https://en.wikipedia.org/wiki/X"


def _extract(text: str, title: str = "X") -> Extract:
    return Extract(title=title, text=text, url=URL)


def test_lead_section_stops_at_first_heading() -> None:
    assert lead_section("Intro line.\n\n==History==\nOld stuff") == "Intro line."


def test_body_without_paragraph_template(plain_settings: Settings) -> None:
    extract = _extract("Intro line.\n\n==History==\nOld stuff")
    assert format_body(extract, "X", plain_settings) == "Intro line."


def test_body_with_paragraph_template(plain_settings: Settings) -> None:
    settings = dataclasses.replace(
        plain_settings,
        use_paragraph_template=True,
        paragraph_template="> {{paragraphText}}\n>\n",
    )
    assert format_body(_extract("A\nB"), "X", settings) == "> A\n>\n> B"


def test_paragraph_template_keeps_empty_paragraphs(plain_settings: Settings) -> None:
    settings = dataclasses.replace(
        plain_settings,
        use_paragraph_template=True,
        paragraph_template="<p>{{paragraphText}}</p>",
    )
    body = format_body(_extract("A\n\nB\n== H ==\nC"), "X", settings)
    assert body == "<p>A</p><p></p><p>B</p>"


def test_bold_replaces_first_match_with_caller_casing(plain_settings: Settings) -> None:
    settings = dataclasses.replace(plain_settings, bold_search_term=True)
    body = format_body(_extract("Paris is a city. Paris is old."), "paris", settings)
    assert body == "**paris** is a city. Paris is old."


def test_bold_matches_term_literally() -> None:
    assert bold_first_match("C++ (pronounced C plus plus)", "c++") == (
        "**c++** (pronounced C plus plus)"
    )
    assert bold_first_match("axb then a.b", "a.b") == "axb then **a.b**"


def test_bold_without_match_or_term_is_noop() -> None:
    assert bold_first_match("Nothing here", "Paris") == "Nothing here"
    assert bold_first_match("Nothing here", "") == "Nothing here"


def test_bold_replacement_is_not_a_regex_template() -> None:
    assert bold_first_match("back\\1slash", "back\\1") == "**back\\1**slash"


def test_insert_fills_text_and_url(plain_settings: Settings) -> None:
    settings = dataclasses.replace(plain_settings, template="{{text}}\n> [Wikipedia]({{url}})")
    assert format_insert(_extract("Hi"), "X", settings) == (
        "Hi\n> [Wikipedia](https://en.wikipedia.org/wiki/X)"
    )


def test_insert_fills_search_term_and_title(plain_settings: Settings) -> None:
    settings = dataclasses.replace(plain_settings, template="# {{searchTerm}} ({{title}})\n{{text}}")
    extract = _extract("Body", title="Mercury (planet)")
    assert format_insert(extract, "mercury", settings) == "# mercury (Mercury (planet))\nBody"


def test_insert_replaces_first_placeholder_only(plain_settings: Settings) -> None:
    settings = dataclasses.replace(plain_settings, template="{{url}} {{url}} {{text}} {{text}}")
    assert format_insert(_extract("Hi"), "X", settings) == f"{URL} {{{{url}}}} Hi {{{{text}}}}"


def test_insert_does_not_resubstitute_body(plain_settings: Settings) -> None:
    extract = _extract("Literal {{text}} inside")
    assert format_insert(extract, "X", plain_settings) == "Literal {{text}} inside"


def test_insert_without_placeholders_is_template(plain_settings: Settings) -> None:
    settings = dataclasses.replace(plain_settings, template="static")
    assert format_insert(_extract("Hi"), "X", settings) == "static"


def test_default_settings_render_quote_block() -> None:
    extract = _extract("Paris is the capital.\nIt is large.\n\n== History ==\nOld")
    assert format_insert(extract, "Paris", Settings()) == (
        "> **Paris** is the capital.\n>\n> It is large.\n"
        "> [Wikipedia](https://en.wikipedia.org/wiki/X)"
    )


def test_formatting_is_idempotent() -> None:
    extract = _extract("Paris is the capital.\nIt is large.")
    settings = Settings()
    assert format_insert(extract, "paris", settings) == format_insert(extract, "paris", settings)


def test_stored_null_template_still_formats() -> None:
    settings = Settings.from_mapping({"template": None, "useParagraphTemplate": "false"})
    assert format_insert(_extract("Hi"), "X", settings) == "Hi\n> [Wikipedia](https://en.wikipedia.org/wiki/X)"


def test_plain_template_keeps_final_quote_paragraph(plain_settings: Settings) -> None:
    settings = dataclasses.replace(
        plain_settings,
        use_paragraph_template=True,
        paragraph_template="{{paragraphText}}\n",
    )
    assert format_body(_extract("A\n>"), "X", settings) == "A\n>"
