"""Shared fixtures for the DirecTV SHEF client tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from custom_components.directv_shef.api import DirecTVShefApi

HOST = "127.0.0.1"
PORT = 8080

OK_STATUS = {"code": 200, "commandResult": 0, "msg": "", "query": ""}


def make_response(status_code: int, body: Any) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    text = body if isinstance(body, str) else json.dumps(body)
    response._content = text.encode("utf-8")

    return response


@pytest.fixture
def api() -> DirecTVShefApi:
    return DirecTVShefApi(HOST, PORT)


@pytest.fixture
def mock_get():
    with patch(
        "custom_components.directv_shef.api.transport.requests.get"
    ) as mock:
        yield mock


@pytest.fixture
def respond(mock_get) -> Callable[..., None]:
    """Make the patched GET return a response with the given body."""

    def _respond(body: Any, status_code: int = 200) -> None:
        mock_get.return_value = make_response(status_code, body)

    return _respond


@pytest.fixture
def requested(mock_get) -> Callable[[], tuple[str, dict[str, list[str]]]]:
    """Return the path and query of the last requested URL."""

    def _requested() -> tuple[str, dict[str, list[str]]]:
        url = mock_get.call_args.args[0]
        parts = urlsplit(url)
        assert parts.scheme == "http"
        assert parts.netloc == f"{HOST}:{PORT}"

        return parts.path, parse_qs(parts.query)

    return _requested
