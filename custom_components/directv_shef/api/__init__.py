"""Public API surface for the DirecTV SHEF client."""

from .client import DirecTVShefApi
from .errors import (
    DirecTVApiError,
    DirecTVConnectionError,
    DirecTVDecodeError,
    DirecTVDeviceError,
    DirecTVHttpStatusError,
)
from .models import CommandResult, Location, ProgramStatus, VersionInfo
from .transport import build_url, encode_params

__all__ = [
    "DirecTVShefApi",
    "DirecTVApiError",
    "DirecTVConnectionError",
    "DirecTVDecodeError",
    "DirecTVDeviceError",
    "DirecTVHttpStatusError",
    "CommandResult",
    "Location",
    "ProgramStatus",
    "VersionInfo",
    "build_url",
    "encode_params",
]
