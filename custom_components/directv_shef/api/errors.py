"""Exceptions for the DirecTV SHEF API client."""

from __future__ import annotations


class DirecTVApiError(Exception):
    """General API error."""


class DirecTVConnectionError(DirecTVApiError):
    """Connection or transport error."""


class DirecTVHttpStatusError(DirecTVApiError):
    """The device answered with a status code other than 200."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Expected status code 200, got {status_code}")
        self.status_code = status_code
        self.body = body


class DirecTVDecodeError(DirecTVApiError):
    """The response body was not a valid JSON object."""


class DirecTVDeviceError(DirecTVApiError):
    """The device reported a failure inside its status envelope."""

    def __init__(self, message: str, code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
