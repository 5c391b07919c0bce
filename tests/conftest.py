from __future__ import annotations

from typing import Any

import pytest

from wikinote.datatypes import Settings


def page_response(title: str, extract: str, page_id: str = "1") -> dict[str, Any]:
    return {"query": {"pages": {page_id: {"pageid": int(page_id), "title": title, "extract": extract}}}}


def missing_response(title: str) -> dict[str, Any]:
    return {"query": {"pages": {"-1": {"ns": 0, "title": title, "missing": ""}}}}


class FakeFetcher:
    """Serves canned responses keyed by search term and records every call."""

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, str]] = []

    def __call__(self, search_term: str, language: str) -> Any:
        self.calls.append((search_term, language))
        response = self.responses[search_term]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def plain_settings() -> Settings:
    return Settings(
        template="{{text}}",
        use_paragraph_template=False,
        bold_search_term=False,
    )
