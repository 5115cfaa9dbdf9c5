import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests
import beartype  # to trigger the runtime typechecking

from mailchimp_python_api import MailchimpAPI

API_KEY = "0123456789abcdef0123456789abcdef-us6"
ENDPOINT = "https://us6.api.mailchimp.com/3.0"


def make_response(
    status_code: int = 200,
    payload: Optional[Any] = None,
    content: Optional[bytes] = None,
) -> requests.Response:
    """
    Build a real requests.Response as the transport would return it.
    `payload` is JSON encoded; `content` is used verbatim.
    """
    response = requests.Response()
    response.status_code = status_code
    if content is None:
        content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    response._content = content
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's MAILCHIMP_PYTHON_API_* variables out of the tests."""
    for name in (
        "MAILCHIMP_PYTHON_API_KEY",
        "MAILCHIMP_PYTHON_API_DEBUG",
        "MAILCHIMP_PYTHON_API_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def session():
    """
    A mocked transport. Tests set `session.request.return_value` (or
    `side_effect`) and inspect `session.request.call_args`.
    """
    mocked = MagicMock(spec=requests.Session)
    mocked.request.return_value = make_response(200, {})
    return mocked


@pytest.fixture
def api(session) -> MailchimpAPI:
    return MailchimpAPI(api_key=API_KEY, session=session, debug=False)


def sent_request(session) -> dict:
    """Keyword arguments of the last request handed to the transport."""
    assert session.request.call_count >= 1, "No request was sent"
    return session.request.call_args.kwargs


def sent_json(session) -> Any:
    data = sent_request(session)["data"]
    assert data is not None, "Request had no body"
    return json.loads(data)
