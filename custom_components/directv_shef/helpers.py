"""Shared helper utilities for the DirecTV SHEF integration."""

from __future__ import annotations

from homeassistant.core import HomeAssistant
from homeassistant.helpers.translation import async_get_translations

from .const import DEFAULT_NAME, DOMAIN, NO_MINOR_CHANNEL


async def async_get_default_name(
    hass: HomeAssistant, language: str | None = None
) -> str:
    """Return the localized default name for this integration."""
    translations = await async_get_translations(
        hass,
        language or hass.config.language,
        "common",
        [DOMAIN],
    )
    return translations.get(
        f"component.{DOMAIN}.common.default_name", DEFAULT_NAME
    )


def parse_channel(media_id: str) -> tuple[int, int | None] | None:
    """Parse "249" or "249-1" into (major, minor), or None if invalid."""
    text = str(media_id).strip()
    major, sep, minor = text.partition("-")
    if not major.isdigit():
        return None

    if not sep:
        return int(major), None

    if not minor.isdigit():
        return None

    return int(major), int(minor)


def format_channel(major: int, minor: int) -> str:
    """Format a channel number, hiding the "no subchannel" minor."""
    if minor in (0, NO_MINOR_CHANNEL):
        return str(major)

    return f"{major}-{minor}"
