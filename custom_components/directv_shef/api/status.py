"""Status envelope helpers for the DirecTV SHEF API client."""

from __future__ import annotations

from typing import Any

from .errors import DirecTVDeviceError
from .models import StatusEnvelope
from .utils import safe_int, safe_str


def parse_status(res: Any) -> StatusEnvelope:
    """Extract the status envelope from a decoded response.

    A missing or malformed ``status`` object yields an empty envelope.
    """
    status = res.get("status") if isinstance(res, dict) else None
    if not isinstance(status, dict):
        return StatusEnvelope()

    return StatusEnvelope(
        code=safe_int(status.get("code")),
        command_result=safe_int(status.get("commandResult")),
        message=safe_str(status.get("msg")),
        query=safe_str(status.get("query")),
    )


def raise_if_device_error(res: Any) -> StatusEnvelope:
    """Raise a device error if the envelope carries a failure message.

    The ``code`` field is not a reliable success indicator on every
    firmware, so only ``msg`` is consulted.
    """
    envelope = parse_status(res)
    if envelope.is_error:
        raise DirecTVDeviceError(envelope.message, envelope.code)

    return envelope
