# wikinote/formatter.py
from __future__ import annotations

import re

from wikinote import config
from wikinote.datatypes import Extract, Settings

# Empty block-quote line left behind by the last rendered paragraph
_DANGLING_QUOTE = "\n>"


def lead_section(text: str) -> str:
    """
    Return the portion of an extract before its first section heading.
    """
    return text.split(config.SECTION_DELIMITER)[0].strip()


def _render_paragraphs(lead: str, paragraph_template: str) -> str:
    """
    Render each newline-separated paragraph (empty ones included) through
    the paragraph template and concatenate them, then trim once.
    """
    rendered = "".join(
        paragraph_template.replace(config.PARAGRAPH_PLACEHOLDER, paragraph, 1)
        for paragraph in lead.split("\n")
    )
    rendered = rendered.strip()
    # Only a marker produced by the template tail itself, e.g. "> {{paragraphText}}\n>\n"
    if paragraph_template.rstrip().endswith(_DANGLING_QUOTE) and rendered.endswith(
        _DANGLING_QUOTE
    ):
        rendered = rendered[: -len(_DANGLING_QUOTE)]
    return rendered


def bold_first_match(body: str, search_term: str) -> str:
    """
    Wrap the first case-insensitive, literal occurrence of `search_term`
    in `**...**`, using the caller's casing.
    """
    if not search_term:
        return body
    pattern = re.compile(re.escape(search_term), flags=re.IGNORECASE)
    return pattern.sub(lambda _match: f"**{search_term}**", body, count=1)


def format_body(extract: Extract, search_term: str, settings: Settings) -> str:
    """
    Build the user-facing body from the extract's lead section.
    """
    body = lead_section(extract.text)
    if settings.use_paragraph_template:
        body = _render_paragraphs(body, settings.paragraph_template)
    if settings.bold_search_term:
        body = bold_first_match(body, search_term)
    return body


def format_insert(extract: Extract, search_term: str, settings: Settings) -> str:
    """
    Fill the main template. Each placeholder is substituted once
    (first occurrence only), in order: text, searchTerm, url, title.
    """
    body = format_body(extract, search_term, settings)
    return (
        settings.template.replace(config.TEXT_PLACEHOLDER, body, 1)
        .replace(config.SEARCH_TERM_PLACEHOLDER, search_term, 1)
        .replace(config.URL_PLACEHOLDER, extract.url, 1)
        .replace(config.TITLE_PLACEHOLDER, extract.title, 1)
    )
