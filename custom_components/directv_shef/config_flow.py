"""Config flow for the DirecTV SHEF integration."""

from __future__ import annotations

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.data_entry_flow import FlowResult

from .api import (
    DirecTVConnectionError,
    DirecTVDecodeError,
    DirecTVDeviceError,
    DirecTVHttpStatusError,
    DirecTVShefApi,
)
from .const import (
    CONF_CLIENT_ADDR,
    CONF_HOST,
    CONF_NAME,
    CONF_PORT,
    DEFAULT_PORT,
    DOMAIN,
)
from .helpers import async_get_default_name


class NoLocationsError(Exception):
    """The receiver answered but reported no tuners."""


def _unique_id(receiver_id: str, client_addr: str | None) -> str:
    """Build a unique id from the receiver id and tuner address."""
    receiver = "".join(receiver_id.split()).lower()

    return f"{receiver}_{client_addr or '0'}"


async def _validate_input(data: dict, default_name: str) -> dict:
    """Check the receiver is reachable and the tuner address is valid."""
    api = DirecTVShefApi(
        host=data[CONF_HOST],
        port=data.get(CONF_PORT, DEFAULT_PORT),
    )
    client_addr = str(data.get(CONF_CLIENT_ADDR) or "").strip() or None

    if not await api.async_is_connected():
        raise NoLocationsError
    await api.async_get_mode(client_addr)
    version = await api.async_get_version()

    return {
        "title": data.get(CONF_NAME) or default_name,
        "unique_id": _unique_id(version.receiver_id, client_addr),
        "client_addr": client_addr,
    }


class ConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle the initial configuration flow."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict | None = None
    ) -> FlowResult:
        """Handle the initial step from the UI."""
        errors: dict[str, str] = {}
        default_name = await async_get_default_name(
            self.hass, self.context.get("language")
        )

        if user_input is not None:
            try:
                info = await _validate_input(user_input, default_name)
            except (
                DirecTVConnectionError,
                DirecTVHttpStatusError,
                DirecTVDecodeError,
            ):
                errors["base"] = "cannot_connect"
            except DirecTVDeviceError:
                errors["base"] = "invalid_client_addr"
            except NoLocationsError:
                errors["base"] = "no_locations"
            except Exception:  # noqa: BLE001
                errors["base"] = "unknown"
            else:
                await self.async_set_unique_id(info["unique_id"])
                self._abort_if_unique_id_configured()

                return self.async_create_entry(
                    title=info["title"],
                    data={**user_input, CONF_CLIENT_ADDR: info["client_addr"]},
                )

        schema = vol.Schema(
            {
                vol.Required(CONF_HOST): str,
                vol.Optional(CONF_PORT, default=DEFAULT_PORT): int,
                vol.Optional(CONF_CLIENT_ADDR): str,
                vol.Optional(CONF_NAME, default=default_name): str,
            }
        )

        return self.async_show_form(
            step_id="user", data_schema=schema, errors=errors
        )
