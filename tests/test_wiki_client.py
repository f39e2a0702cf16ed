"""
Tests for the MediaWiki parse API client (session mocked).
"""

from unittest.mock import Mock

import pytest
import requests

from data_model import SourcePage
from extraction.wiki_client import API_URL, SourceFetchError, WikipediaClient, page_url

PAGE = SourcePage(
    title="List_of_common_misconceptions_about_science,_technology,_and_mathematics",
    category="Science, Technology & Mathematics",
)


def _session(payload=None, status_error=None, json_error=None):
    response = Mock()
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    session = Mock()
    session.get.return_value = response
    return session


def test_page_url_keeps_wiki_punctuation():
    assert page_url(PAGE.title) == (
        "https://en.wikipedia.org/wiki/"
        "List_of_common_misconceptions_about_science,_technology,_and_mathematics"
    )


def test_fetch_builds_document():
    payload = {
        "parse": {
            "title": "x",
            "text": {"*": '<h2 id="Physics">Physics</h2>'},
            "sections": [{"anchor": "Physics"}, {"anchor": "See_also"}, {"line": "no anchor"}],
        }
    }
    session = _session(payload)
    document = WikipediaClient(session=session, timeout=5).fetch(PAGE)

    assert document.page == PAGE
    assert document.markup == '<h2 id="Physics">Physics</h2>'
    assert document.headings == ["Physics", "See_also"]
    assert document.source_url == page_url(PAGE.title)

    args, kwargs = session.get.call_args
    assert args == (API_URL,)
    assert kwargs["timeout"] == 5
    assert kwargs["params"]["action"] == "parse"
    assert kwargs["params"]["page"] == PAGE.title
    assert kwargs["params"]["prop"] == "sections|text"
    assert kwargs["params"]["format"] == "json"
    assert "User-Agent" in kwargs["headers"]


def test_api_error_payload():
    session = _session({"error": {"code": "missingtitle", "info": "The page does not exist."}})
    with pytest.raises(SourceFetchError, match="missingtitle"):
        WikipediaClient(session=session).fetch(PAGE)


def test_missing_text():
    with pytest.raises(SourceFetchError, match="no page text"):
        WikipediaClient(session=_session({"parse": {"sections": []}})).fetch(PAGE)


def test_connection_error():
    session = Mock()
    session.get.side_effect = requests.ConnectionError("unreachable")
    with pytest.raises(SourceFetchError, match="request failed") as info:
        WikipediaClient(session=session).fetch(PAGE)
    assert info.value.title == PAGE.title


def test_http_status_error():
    session = _session(status_error=requests.HTTPError("503 Server Error"))
    with pytest.raises(SourceFetchError, match="503"):
        WikipediaClient(session=session).fetch(PAGE)


def test_body_not_json():
    session = _session(json_error=ValueError("Expecting value"))
    with pytest.raises(SourceFetchError, match="not JSON"):
        WikipediaClient(session=session).fetch(PAGE)


def test_unexpected_shape():
    with pytest.raises(SourceFetchError, match="unexpected response shape"):
        WikipediaClient(session=_session(["not", "a", "dict"])).fetch(PAGE)


def test_string_error_payload():
    with pytest.raises(SourceFetchError, match="API error: maxlag"):
        WikipediaClient(session=_session({"error": "maxlag"})).fetch(PAGE)


def test_parse_payload_of_wrong_type():
    with pytest.raises(SourceFetchError, match="no page text"):
        WikipediaClient(session=_session({"parse": "text"})).fetch(PAGE)
