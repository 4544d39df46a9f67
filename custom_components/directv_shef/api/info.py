"""Receiver info parsing helpers for the DirecTV SHEF API client."""

from __future__ import annotations

from typing import Any

from .models import CommandResult, Location, VersionInfo
from .utils import safe_bool, safe_int, safe_str


def parse_locations(res: dict[str, Any]) -> list[Location]:
    """Parse location entries from /info/getLocations responses."""
    locations = res.get("locations")
    if not isinstance(locations, list):
        return []

    out: list[Location] = []
    for item in locations:
        if not isinstance(item, dict):
            continue

        out.append(
            Location(
                client_address=safe_str(item.get("clientAddr")),
                location_name=safe_str(item.get("locationName")),
            )
        )

    return out


def parse_serial_number(res: dict[str, Any]) -> str:
    return safe_str(res.get("serialNum"))


def parse_version(res: dict[str, Any]) -> VersionInfo:
    return VersionInfo(
        access_card_id=safe_str(res.get("accessCardId")),
        receiver_id=safe_str(res.get("receiverId")),
        software_version=safe_str(res.get("stbSoftwareVersion")),
        version=safe_str(res.get("version")),
        system_time=safe_int(res.get("systemTime")),
    )


def parse_mode(res: dict[str, Any]) -> int:
    return safe_int(res.get("mode"))


def parse_command_result(res: dict[str, Any]) -> CommandResult:
    """Parse a /serial/processCommand response."""
    ret = res.get("return")
    if not isinstance(ret, dict):
        ret = {}

    return CommandResult(
        command_flag=safe_bool(res.get("command")),
        param_flag=safe_bool(res.get("param")),
        prefix_flag=safe_bool(res.get("prefix")),
        data=safe_str(ret.get("data")),
        response_code=safe_int(ret.get("response")),
        value=safe_int(ret.get("value")),
    )


def ignore_payload(res: dict[str, Any]) -> None:
    """Discard the payload of action endpoints that only report status."""

    return None
