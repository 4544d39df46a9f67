"""Media player entity for DirecTV receivers."""

from __future__ import annotations

from datetime import datetime
import logging

from homeassistant.components.media_player import MediaPlayerEntity
from homeassistant.components.media_player.const import (
    MediaPlayerEntityFeature,
    MediaPlayerState,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .api import ProgramStatus
from .const import (
    CONF_NAME,
    DEFAULT_NAME,
    DOMAIN,
    REMOTE_KEYS,
    RemoteKey,
)
from .coordinator import DirecTVShefCoordinator
from .helpers import format_channel, parse_channel

try:
    from homeassistant.components.media_player.const import (
        MediaPlayerDeviceClass,
    )
except ImportError:
    MediaPlayerDeviceClass = None

_LOGGER = logging.getLogger(__name__)

_SUPPORTED_FEATURES = (
    MediaPlayerEntityFeature.TURN_ON
    | MediaPlayerEntityFeature.TURN_OFF
    | MediaPlayerEntityFeature.PLAY
    | MediaPlayerEntityFeature.PAUSE
    | MediaPlayerEntityFeature.STOP
    | MediaPlayerEntityFeature.NEXT_TRACK
    | MediaPlayerEntityFeature.PREVIOUS_TRACK
    | MediaPlayerEntityFeature.PLAY_MEDIA
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the media player entity for the config entry."""
    data = hass.data[DOMAIN][entry.entry_id]
    coordinator: DirecTVShefCoordinator = data["coordinator"]

    name = entry.data.get(CONF_NAME) or DEFAULT_NAME
    unique_id = entry.unique_id or entry.entry_id
    async_add_entities(
        [DirecTVShefMediaPlayer(name, unique_id, coordinator)]
    )


class DirecTVShefMediaPlayer(CoordinatorEntity, MediaPlayerEntity):
    """Media player entity representing one tuner of a DirecTV receiver."""

    _attr_icon = "mdi:satellite-variant"
    _attr_supported_features = _SUPPORTED_FEATURES
    if MediaPlayerDeviceClass is not None:
        _attr_device_class = MediaPlayerDeviceClass.RECEIVER

    def __init__(
        self,
        name: str,
        unique_id: str,
        coordinator: DirecTVShefCoordinator,
    ) -> None:
        super().__init__(coordinator)
        self._attr_name = name
        self._attr_unique_id = f"{DOMAIN}_{unique_id}"
        self.coordinator = coordinator

    @property
    def available(self) -> bool:
        """Return True when the coordinator last updated successfully."""

        return self.coordinator.last_update_success

    @property
    def state(self) -> MediaPlayerState | None:
        state = self.coordinator.data
        if state is None or not state.is_on:
            return MediaPlayerState.OFF

        if state.program is not None and state.program.is_off_air:
            return MediaPlayerState.ON

        return MediaPlayerState.PLAYING

    def _program(self) -> ProgramStatus | None:
        """Return the tuned program from coordinator data."""
        state = self.coordinator.data
        if state is None:
            return None

        return state.program

    @property
    def media_content_type(self) -> str:

        return "channel"

    @property
    def media_title(self) -> str | None:
        program = self._program()
        if program is None or not program.title:
            return None

        return program.title

    @property
    def media_series_title(self) -> str | None:
        program = self._program()
        if program is None or not program.episode_title:
            return None

        return program.episode_title

    @property
    def media_channel(self) -> str | None:
        """Return the call sign and channel number of the tuned program."""
        program = self._program()
        if program is None or not program.major:
            return None

        channel = format_channel(program.major, program.minor)
        if program.call_sign:
            return f"{program.call_sign} ({channel})"

        return channel

    @property
    def media_content_id(self) -> str | None:
        program = self._program()
        if program is None or not program.major:
            return None

        return format_channel(program.major, program.minor)

    @property
    def media_duration(self) -> int | None:
        program = self._program()
        if program is None or not program.duration:
            return None

        return program.duration

    @property
    def media_position(self) -> int | None:
        program = self._program()
        if program is None:
            return None

        return program.offset

    @property
    def media_position_updated_at(self) -> datetime | None:
        """Return when the reported position was fetched."""
        state = self.coordinator.data
        if state is None or state.program is None:
            return None

        return state.updated_at

    @property
    def extra_state_attributes(self) -> dict[str, object]:
        """Expose recording flags and the remote key vocabulary."""
        program = self._program()
        attrs: dict[str, object] = {"remote_keys": REMOTE_KEYS}
        if program is not None:
            attrs.update(
                {
                    "program_id": program.program_id,
                    "rating": program.rating,
                    "recording": program.is_recording,
                    "pay_per_view": program.is_ppv,
                    "video_on_demand": program.is_vod,
                }
            )

        return attrs

    async def _send_keys(self, *keys: RemoteKey) -> None:
        """Send one or more remote keys to this tuner and refresh."""
        for key in keys:
            await self.coordinator.api.async_send_key(
                key, client_addr=self.coordinator.client_addr
            )

        await self.coordinator.async_request_refresh()

    async def async_turn_on(self) -> None:
        await self._send_keys(RemoteKey.POWER_ON)

    async def async_turn_off(self) -> None:
        await self._send_keys(RemoteKey.POWER_OFF)

    async def async_media_play(self) -> None:
        await self._send_keys(RemoteKey.PLAY)

    async def async_media_pause(self) -> None:
        await self._send_keys(RemoteKey.PAUSE)

    async def async_media_stop(self) -> None:
        await self._send_keys(RemoteKey.STOP)

    async def async_media_next_track(self) -> None:
        """Go to the next channel."""
        await self._send_keys(RemoteKey.CHANUP)

    async def async_media_previous_track(self) -> None:
        """Go to the previous channel."""
        await self._send_keys(RemoteKey.CHANDOWN)

    async def async_play_media(
        self, media_type: str, media_id: str, **kwargs
    ) -> None:
        """Tune to a channel given as "major" or "major-minor"."""
        channel = parse_channel(media_id)
        if channel is None:
            _LOGGER.warning("Unknown media_id requested: %s", media_id)
            return

        major, minor = channel
        await self.coordinator.api.async_tune_to_channel(
            major, minor, client_addr=self.coordinator.client_addr
        )
        await self.coordinator.async_request_refresh()
