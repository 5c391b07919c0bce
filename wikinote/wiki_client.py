# wikinote/wiki_client.py
from __future__ import annotations

import logging
from typing import Any, Iterable
from urllib.parse import quote

import requests
import wikipediaapi

from wikinote import config
from wikinote.exceptions import FetchError

logger = logging.getLogger(__name__)

QueryResult = dict[str, Any]


def build_extract_url(search_term: str, language: str = config.DEFAULT_LANGUAGE) -> str:
    """
    Build the extract-query URL hosted on the target Wikipedia project.
    Sample: https://en.wikipedia.org/w/api.php?format=json&action=query
            &prop=extracts&explaintext=1&redirects&origin=*&titles=Jupiter
    """
    return config.EXTRACT_API_URL.format(lang=language) + quote(search_term, safe="")


def fetch_query(
    search_term: str,
    language: str = config.DEFAULT_LANGUAGE,
    *,
    timeout: float = config.DEFAULT_TIMEOUT,
) -> QueryResult:
    """
    GET the plain-text extract for `search_term` and decode it as JSON.

    - Uses the default UA string respecting Wikimedia etiquette.
    - Any transport, HTTP status or decode failure raises FetchError.
    """
    url = build_extract_url(search_term, language)
    headers = {
        "User-Agent": config.DEFAULT_UA,
        "Accept": "application/json",
    }
    logger.debug("GET %s", url)

    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as exc:
        raise FetchError(f"Request for {search_term!r} failed: {exc}") from exc
    except ValueError as exc:
        # JSON decode errors subclass ValueError
        raise FetchError(f"Response for {search_term!r} is not JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise FetchError(f"Response for {search_term!r} is not a JSON object")
    return data


def _walk_sections(
    sections: Iterable[wikipediaapi.WikipediaPageSection], level: int = 2
) -> Iterable[str]:
    """
    Yield plain-text section blocks with "== Title ==" headings,
    recursing into subsections with one more "=" per level.
    """
    for section in sections:
        marks = "=" * level
        block = f"{marks} {section.title.strip()} {marks}"
        text = (section.text or "").strip()
        yield f"{block}\n{text}" if text else block

        if section.sections:
            yield from _walk_sections(section.sections, level + 1)


class WikiApiFetcher:
    """
    Alternate fetch collaborator backed by wikipediaapi.
    Shapes a page into the same QueryResult mapping the extract query returns,
    so it can stand in for `fetch_query`.
    """

    def __init__(self, timeout: float = config.DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._clients: dict[str, wikipediaapi.Wikipedia] = {}

    def _client(self, language: str) -> wikipediaapi.Wikipedia:
        if language not in self._clients:
            self._clients[language] = wikipediaapi.Wikipedia(
                user_agent=config.DEFAULT_UA,
                language=language,
                extract_format=wikipediaapi.ExtractFormat.WIKI,
                timeout=self.timeout,
            )
        return self._clients[language]

    def __call__(
        self, search_term: str, language: str = config.DEFAULT_LANGUAGE
    ) -> QueryResult:
        try:
            page = self._client(language).page(search_term)
            if not page.exists():
                pages = {
                    config.NOT_FOUND_PAGE_KEY: {"title": search_term, "missing": ""}
                }
                return {"query": {"pages": pages}}

            blocks = [page.summary.strip()] if page.summary else []
            blocks.extend(_walk_sections(page.sections))
            extract = "\n\n".join(blocks)
            pages = {str(page.pageid): {"title": page.title, "extract": extract}}
        except (requests.RequestException, ValueError, KeyError) as exc:
            logger.warning("wikipediaapi lookup failed: %s", exc)
            raise FetchError(
                f"wikipediaapi lookup for {search_term!r} failed: {exc}"
            ) from exc

        return {"query": {"pages": pages}}
