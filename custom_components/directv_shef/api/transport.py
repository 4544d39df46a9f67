"""Transport helpers for SHEF HTTP requests."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

import requests

from .errors import (
    DirecTVConnectionError,
    DirecTVDecodeError,
    DirecTVHttpStatusError,
)
from .utils import clean_params

_LOGGER = logging.getLogger(__name__)


def encode_params(params: Mapping[str, Any] | None) -> str:
    """Encode query parameters, omitting absent and empty values."""

    return urlencode(clean_params(params))


def build_url(
    host: str, port: int, path: str, params: Mapping[str, Any] | None = None
) -> str:
    """Build the request URL for a SHEF endpoint."""
    url = f"http://{host}:{port}{path}"
    query = encode_params(params)
    if query:
        url = f"{url}?{query}"

    return url


def get_json(url: str, timeout_s: float | None = None) -> dict[str, Any]:
    """Perform a GET request and decode the JSON object it returns."""
    _LOGGER.debug("GET %s", url)
    try:
        response = requests.get(url, timeout=timeout_s)
    except requests.RequestException as err:
        _LOGGER.debug("Request to %s failed: %s", url, err)
        raise DirecTVConnectionError(str(err)) from err

    if response.status_code != 200:
        _LOGGER.debug("Request to %s returned %s", url, response.status_code)
        raise DirecTVHttpStatusError(response.status_code, response.text)

    try:
        payload = response.json()
    except ValueError as err:
        _LOGGER.debug("Invalid JSON from %s: %s", url, err)
        raise DirecTVDecodeError(f"Invalid JSON response: {err}") from err

    if not isinstance(payload, dict):
        raise DirecTVDecodeError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    return payload
