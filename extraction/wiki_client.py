"""
extraction/wiki_client.py — fetching pages from the MediaWiki parse API.

One request per page:
  GET https://en.wikipedia.org/w/api.php
      ?action=parse&page=<title>&format=json&prop=sections|text&disabletoc=1

Response → SourceDocument(markup = parse.text["*"],
                          headings = [s["anchor"] for s in parse.sections])

Public API:
  WikipediaClient(session, timeout).fetch(page) -> SourceDocument
  page_url(title)                                -> str
  SourceFetchError
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from data_model.documents import SourceDocument, SourcePage

log = logging.getLogger(__name__)

API_URL         = "https://en.wikipedia.org/w/api.php"
PAGE_URL        = "https://en.wikipedia.org/wiki/{title}"
DEFAULT_TIMEOUT = 30.0

HEADERS = {
    "User-Agent": "MisconceptionOfTheDay/0.1 (daily misconception digest; python-requests)",
    "Accept": "application/json",
}


class SourceFetchError(RuntimeError):
    """A single page could not be fetched or its response was unusable."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(f"{title}: {message}")
        self.title = title


def page_url(title: str) -> str:
    return PAGE_URL.format(title=quote(title, safe=",_()'"))


class WikipediaClient:
    """
    Fetches rendered pages. Without a session every call goes through
    requests.get, so concurrent fetches share no connection state.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        api_url: str = API_URL,
    ) -> None:
        self._session = session
        self._timeout = timeout
        self._api_url = api_url

    def fetch(self, page: SourcePage) -> SourceDocument:
        """
        Raises:
            SourceFetchError: network error, non-2xx status, non-JSON body,
                              API error payload or missing page text.
        """
        params = {
            "action":     "parse",
            "page":       page.title,
            "format":     "json",
            "prop":       "sections|text",
            "disabletoc": "1",
            "origin":     "*",
        }
        http: Any = self._session or requests
        log.debug("GET %s page=%s", self._api_url, page.title)

        try:
            resp = http.get(self._api_url, params=params, headers=HEADERS, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise SourceFetchError(page.title, f"request failed: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise SourceFetchError(page.title, "response is not JSON") from exc

        return _document_from_response(page, data)


def _document_from_response(page: SourcePage, data: Any) -> SourceDocument:
    if not isinstance(data, dict):
        raise SourceFetchError(page.title, "unexpected response shape")
    if "error" in data:
        err = data["error"]
        if isinstance(err, dict):
            raise SourceFetchError(page.title, f"API error {err.get('code')}: {err.get('info')}")
        raise SourceFetchError(page.title, f"API error: {err}")

    parsed = data.get("parse")
    if not isinstance(parsed, dict):
        parsed = {}
    text = parsed.get("text")
    markup = text.get("*") if isinstance(text, dict) else None
    if not isinstance(markup, str):
        raise SourceFetchError(page.title, "response has no page text")

    headings = [
        s["anchor"] for s in parsed.get("sections") or []
        if isinstance(s, dict) and s.get("anchor")
    ]
    return SourceDocument(
        page=page,
        markup=markup,
        source_url=page_url(page.title),
        headings=headings,
    )
