"""Shared fixtures for AppGap tests."""

import re
from unittest.mock import Mock

import pytest

from appgap.core.config import Settings

PAGE_RE = re.compile(r"/page=(\d+)/")


def make_entry(i, rating="4", title=None, body=None):
    """One feed entry shaped like the customer review RSS JSON."""
    return {
        "author": {"name": {"label": f"user{i}"}, "uri": {"label": ""}, "label": ""},
        "updated": {"label": "2024-05-01T10:00:00-07:00"},
        "im:rating": {"label": rating},
        "im:version": {"label": "1.2.3"},
        "id": {"label": str(10000 + i)},
        "title": {"label": title if title is not None else f"Title {i}"},
        "content": {"label": body if body is not None else f"Review body {i}", "attributes": {"type": "text"}},
    }


def make_page(start, count):
    return {"feed": {"entry": [make_entry(start + i) for i in range(count)]}}


def make_response(data=None, status_code=200):
    response = Mock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.json = Mock(return_value=data)
    return response


def make_session(pages, lookup=None):
    """Mock session serving ``pages[n]`` for page n (1-based).

    A page value may be a dict (feed JSON), an int (error status), an
    exception instance (raised) or missing (empty feed).
    """
    session = Mock()
    session.headers = {}

    def get(url, params=None, timeout=None):
        match = PAGE_RE.search(url)
        if match is None:
            if isinstance(lookup, Exception):
                raise lookup
            if isinstance(lookup, int):
                return make_response(status_code=lookup)
            return make_response(lookup if lookup is not None else {"resultCount": 0, "results": []})
        value = pages.get(int(match.group(1)), {"feed": {}})
        if isinstance(value, Exception):
            raise value
        if isinstance(value, int):
            return make_response(status_code=value)
        return make_response(value)

    session.get = Mock(side_effect=get)
    return session


def page_requests(session):
    """Page numbers requested from a mock session, in order."""
    pages = []
    for call in session.get.call_args_list:
        match = PAGE_RE.search(call.args[0])
        if match:
            pages.append(int(match.group(1)))
    return pages


def make_completion(content):
    """Mock OpenAI client whose chat completion returns ``content``."""
    client = Mock()
    message = Mock()
    message.content = content
    choice = Mock()
    choice.message = message
    client.chat.completions.create.return_value = Mock(choices=[choice])
    return client


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, openai_api_key="test-key", OPENAI_API_KEY="")


@pytest.fixture
def keyless_settings():
    return Settings(_env_file=None, openai_api_key="", OPENAI_API_KEY="")
