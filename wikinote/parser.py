# wikinote/parser.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional
from urllib.parse import quote

from wikinote import config
from wikinote.datatypes import Extract
from wikinote.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

# Characters left untouched by URI-style (not component-style) encoding
_URI_SAFE = ";,/?:@&=+$!*'()#"


def article_url(title: str, language: str = config.DEFAULT_LANGUAGE) -> str:
    """
    Canonical article URL for a page title, e.g.
    https://en.wikipedia.org/wiki/Alan%20Turing
    """
    return config.ARTICLE_URL.format(lang=language, title=quote(title, safe=_URI_SAFE))


def parse_response(
    response: Mapping[str, Any], language: str = config.DEFAULT_LANGUAGE
) -> Optional[Extract]:
    """
    Decode a `query.pages` extract response.

    - Returns None when the title did not resolve (a "-1" page key).
    - Otherwise builds an Extract from the first page in enumeration order.
    - Raises MalformedResponseError when `query.pages` is absent.
    """
    try:
        pages = response["query"]["pages"]
    except (KeyError, TypeError) as exc:
        raise MalformedResponseError(
            f"Response has no query.pages mapping: {exc!r}"
        ) from exc
    if not isinstance(pages, Mapping):
        raise MalformedResponseError("query.pages is not a mapping")

    # Must short-circuit before any page is read
    if config.NOT_FOUND_PAGE_KEY in pages:
        return None

    for key, page in pages.items():
        if not isinstance(page, Mapping):
            raise MalformedResponseError(f"Page {key!r} is not a mapping")
        title = page.get("title", "")
        logger.debug("Parsed page %s (%r) from response", key, title)
        return Extract(
            title=title,
            text=page.get("extract") or "",
            url=article_url(title, language),
        )

    # Empty pages mapping, nothing resolved
    return None
