"""Data models for the DirecTV SHEF API client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Location:
    """A tuner (room) known to the set-top box."""

    client_address: str
    location_name: str


@dataclass(frozen=True)
class VersionInfo:
    """Receiver identity and firmware information."""

    access_card_id: str
    receiver_id: str
    software_version: str
    version: str
    system_time: int

    @property
    def system_datetime(self) -> datetime:
        """Return the device clock as a UTC datetime."""

        return datetime.fromtimestamp(self.system_time, tz=timezone.utc)


@dataclass(frozen=True)
class ProgramStatus:
    """Program information for a channel or the currently tuned program.

    Older receivers omit ``episode_title`` and ``offset``; those fields are
    left at their zero values.
    """

    call_sign: str = ""
    title: str = ""
    episode_title: str = ""
    date: str = ""
    rating: str = ""
    program_id: str = ""
    duration: int = 0
    offset: int = 0
    major: int = 0
    minor: int = 0
    start_time: int = 0
    station_id: int = 0
    is_off_air: bool = False
    is_ppv: bool = False
    is_recording: bool = False
    is_vod: bool = False
    is_pc_locked: int = 0


@dataclass(frozen=True)
class CommandResult:
    """Result of a serial command sent through /serial/processCommand."""

    command_flag: bool
    param_flag: bool
    prefix_flag: bool
    data: str
    response_code: int
    value: int


@dataclass(frozen=True)
class StatusEnvelope:
    """The ``status`` object embedded in every device response."""

    code: int = 0
    command_result: int = 0
    message: str = ""
    query: str = ""

    @property
    def is_error(self) -> bool:
        """Return True when the device reported a failure message."""

        return bool(self.message)
