# wikinote/config.py
from __future__ import annotations

from pathlib import Path

import typer

# Wikipedia endpoints
EXTRACT_API_URL = (
    "https://{lang}.wikipedia.org/w/api.php?"
    "format=json&action=query&prop=extracts&explaintext=1&redirects&origin=*&titles="
)
ARTICLE_URL = "https://{lang}.wikipedia.org/wiki/{title}"
DEFAULT_UA = "wikinote/0.1 (https://github.com/wikinote/wikinote)"
DEFAULT_TIMEOUT = 10.0

# Extract parsing
NOT_FOUND_PAGE_KEY = "-1"
DISAMBIGUATION_MARKER = "may refer to:"
SECTION_DELIMITER = "=="

# Template placeholders
TEXT_PLACEHOLDER = "{{text}}"
SEARCH_TERM_PLACEHOLDER = "{{searchTerm}}"
URL_PLACEHOLDER = "{{url}}"
TITLE_PLACEHOLDER = "{{title}}"
PARAGRAPH_PLACEHOLDER = "{{paragraphText}}"

# Default settings
DEFAULT_TEMPLATE = "{{text}}\n> [Wikipedia]({{url}})"
DEFAULT_PARAGRAPH_TEMPLATE = "> {{paragraphText}}\n>\n"
DEFAULT_USE_PARAGRAPH_TEMPLATE = True
DEFAULT_BOLD_SEARCH_TERM = True
DEFAULT_LANGUAGE = "en"

# Settings persistence
SETTINGS_ENV_VAR = "WIKINOTE_SETTINGS"
DEFAULT_SETTINGS_PATH = Path(typer.get_app_dir("wikinote")) / "settings.json"
