"""API client for the DirecTV SHEF external control interface."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ..const import DEFAULT_PORT
from .info import (
    ignore_payload,
    parse_command_result,
    parse_locations,
    parse_mode,
    parse_serial_number,
    parse_version,
)
from .models import CommandResult, Location, ProgramStatus, VersionInfo
from .programs import parse_program_status
from .status import raise_if_device_error
from .transport import build_url, get_json

T = TypeVar("T")

ClientAddr = str | int | None


class DirecTVShefApi:
    """Blocking client for a single set-top box, with async wrappers.

    The client holds no connection state; every call opens its own HTTP
    request, so one instance may be shared between threads.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        timeout_s: float | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._timeout_s = timeout_s

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    def request(
        self,
        path: str,
        params: Mapping[str, Any] | None,
        parser: Callable[[dict[str, Any]], T],
    ) -> T:
        """Call an endpoint and parse its payload.

        Transport, HTTP status and JSON errors are raised by the transport
        layer; a non-empty status message is raised as a device error
        before the payload is parsed.
        """
        url = build_url(self._host, self._port, path, params)
        res = get_json(url, self._timeout_s)
        raise_if_device_error(res)

        return parser(res)

    def get_locations(self, client_addr: ClientAddr = None) -> list[Location]:
        """Return the tuners (rooms) known to the receiver."""

        return self.request(
            "/info/getLocations", {"clientAddr": client_addr}, parse_locations
        )

    def is_connected(self, client_addr: ClientAddr = None) -> bool:
        """Return True if the receiver reports at least one location."""

        return len(self.get_locations(client_addr)) > 0

    def get_serial_number(self, client_addr: ClientAddr = None) -> str:
        return self.request(
            "/info/getSerialNum",
            {"clientAddr": client_addr},
            parse_serial_number,
        )

    def get_version(self, client_addr: ClientAddr = None) -> VersionInfo:
        """Return version information, including the receiver clock."""

        return self.request(
            "/info/getVersion", {"clientAddr": client_addr}, parse_version
        )

    def get_mode(self, client_addr: ClientAddr = None) -> int:
        """Return the operating mode (0 active, 1 standby)."""

        return self.request(
            "/info/mode", {"clientAddr": client_addr}, parse_mode
        )

    def send_key(
        self,
        key: str,
        hold: str | None = None,
        client_addr: ClientAddr = None,
    ) -> None:
        """Send a remote key press.

        Key names are not checked locally; the receiver rejects unknown
        keys with a device error.
        """
        self.request(
            "/remote/processKey",
            {"key": key, "hold": hold, "clientAddr": client_addr},
            ignore_payload,
        )

    def send_serial_command(
        self, cmd: str, client_addr: ClientAddr = None
    ) -> CommandResult:
        """Send a raw serial command code such as ``FA83``."""

        return self.request(
            "/serial/processCommand",
            {"cmd": cmd, "clientAddr": client_addr},
            parse_command_result,
        )

    def get_program_info(
        self,
        major: int | str,
        minor: int | str | None = None,
        time: int | None = None,
        client_addr: ClientAddr = None,
    ) -> ProgramStatus:
        """Return program info for a channel, now or at a Unix time."""

        return self.request(
            "/tv/getProgInfo",
            {
                "major": major,
                "minor": minor,
                "time": time or None,
                "clientAddr": client_addr,
            },
            parse_program_status,
        )

    def get_tuned(self, client_addr: ClientAddr = None) -> ProgramStatus:
        """Return the program playing on the selected tuner."""

        return self.request(
            "/tv/getTuned", {"clientAddr": client_addr}, parse_program_status
        )

    def tune_to_channel(
        self,
        major: int | str,
        minor: int | str | None = None,
        client_addr: ClientAddr = None,
    ) -> None:
        self.request(
            "/tv/tune",
            {"major": major, "minor": minor, "clientAddr": client_addr},
            ignore_payload,
        )

    async def async_get_locations(
        self, client_addr: ClientAddr = None
    ) -> list[Location]:
        return await asyncio.to_thread(self.get_locations, client_addr)

    async def async_is_connected(self, client_addr: ClientAddr = None) -> bool:
        return await asyncio.to_thread(self.is_connected, client_addr)

    async def async_get_serial_number(
        self, client_addr: ClientAddr = None
    ) -> str:
        return await asyncio.to_thread(self.get_serial_number, client_addr)

    async def async_get_version(
        self, client_addr: ClientAddr = None
    ) -> VersionInfo:
        return await asyncio.to_thread(self.get_version, client_addr)

    async def async_get_mode(self, client_addr: ClientAddr = None) -> int:
        return await asyncio.to_thread(self.get_mode, client_addr)

    async def async_send_key(
        self,
        key: str,
        hold: str | None = None,
        client_addr: ClientAddr = None,
    ) -> None:
        await asyncio.to_thread(self.send_key, key, hold, client_addr)

    async def async_send_serial_command(
        self, cmd: str, client_addr: ClientAddr = None
    ) -> CommandResult:
        return await asyncio.to_thread(
            self.send_serial_command, cmd, client_addr
        )

    async def async_get_program_info(
        self,
        major: int | str,
        minor: int | str | None = None,
        time: int | None = None,
        client_addr: ClientAddr = None,
    ) -> ProgramStatus:
        return await asyncio.to_thread(
            self.get_program_info, major, minor, time, client_addr
        )

    async def async_get_tuned(
        self, client_addr: ClientAddr = None
    ) -> ProgramStatus:
        return await asyncio.to_thread(self.get_tuned, client_addr)

    async def async_tune_to_channel(
        self,
        major: int | str,
        minor: int | str | None = None,
        client_addr: ClientAddr = None,
    ) -> None:
        await asyncio.to_thread(
            self.tune_to_channel, major, minor, client_addr
        )
