"""Diagnostics support for the DirecTV SHEF integration."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any

from homeassistant.components.diagnostics import async_redact_data
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import CONF_CLIENT_ADDR, CONF_HOST, DOMAIN

REDACT_KEYS = {
    CONF_HOST,
    CONF_CLIENT_ADDR,
    "program_id",
    "station_id",
}


def _serialize_datetime(value: datetime | None) -> str | None:
    if value is None:
        return None

    return value.isoformat()


def _state_to_dict(state: Any) -> dict[str, Any] | None:
    if state is None:
        return None

    program = getattr(state, "program", None)

    return {
        "mode": state.mode.name,
        "mode_value": int(state.mode),
        "program": asdict(program) if program is not None else None,
    }


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    data = hass.data.get(DOMAIN, {}).get(entry.entry_id, {})
    coordinator = data.get("coordinator")
    api = data.get("api")

    diagnostics: dict[str, Any] = {
        "entry": {
            "data": dict(entry.data),
            "options": dict(entry.options),
        },
        "coordinator": {
            "last_update_success": getattr(
                coordinator, "last_update_success", None
            ),
            "last_update_success_time": _serialize_datetime(
                getattr(coordinator, "last_update_success_time", None)
            ),
            "client_addr": getattr(coordinator, "client_addr", None),
            "data": _state_to_dict(getattr(coordinator, "data", None)),
        },
        "api": {
            "host": getattr(api, "host", None),
            "port": getattr(api, "port", None),
        },
    }

    return async_redact_data(diagnostics, REDACT_KEYS)
