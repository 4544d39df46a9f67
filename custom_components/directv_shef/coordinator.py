"""Data update coordinator for a DirecTV receiver tuner."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
import logging

from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import (
    DataUpdateCoordinator,
    UpdateFailed,
)
from homeassistant.util import dt as dt_util

from .api import DirecTVApiError, DirecTVShefApi, ProgramStatus
from .const import DEFAULT_POLL_INTERVAL, DOMAIN, OperatingMode

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirecTVShefState:
    """Snapshot of a tuner's operating mode and tuned program."""

    mode: OperatingMode = OperatingMode.UNKNOWN
    program: ProgramStatus | None = None
    updated_at: datetime | None = None

    @property
    def is_on(self) -> bool:
        return self.mode == OperatingMode.ACTIVE


def _mode_from_value(value: int) -> OperatingMode:
    """Convert raw mode values to the OperatingMode enum."""
    try:
        return OperatingMode(value)
    except ValueError:
        return OperatingMode.UNKNOWN


class DirecTVShefCoordinator(DataUpdateCoordinator[DirecTVShefState]):
    """Coordinator that polls mode and tuned program for one tuner."""

    def __init__(
        self,
        hass: HomeAssistant,
        api: DirecTVShefApi,
        client_addr: str | None = None,
    ) -> None:
        super().__init__(
            hass,
            logger=_LOGGER,
            name=f"{DOMAIN}_coordinator",
            update_interval=timedelta(seconds=DEFAULT_POLL_INTERVAL),
        )
        self.api = api
        self.client_addr = client_addr

    async def _async_update_data(self) -> DirecTVShefState:
        """Fetch the operating mode and, when active, the tuned program."""
        try:
            mode = _mode_from_value(
                await self.api.async_get_mode(self.client_addr)
            )
            if mode != OperatingMode.ACTIVE:
                return DirecTVShefState(
                    mode=mode, updated_at=dt_util.utcnow()
                )

            program = await self.api.async_get_tuned(self.client_addr)
        except DirecTVApiError as err:
            raise UpdateFailed(str(err)) from err

        return DirecTVShefState(
            mode=mode, program=program, updated_at=dt_util.utcnow()
        )
