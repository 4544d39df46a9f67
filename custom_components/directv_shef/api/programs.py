"""Program status parsing helpers for the DirecTV SHEF API client."""

from __future__ import annotations

from typing import Any

from .models import ProgramStatus
from .utils import safe_bool, safe_int, safe_str


def parse_program_status(res: dict[str, Any]) -> ProgramStatus:
    """Parse /tv/getProgInfo and /tv/getTuned responses.

    Both response generations are accepted. Newer receivers add
    ``episodeTitle``, ``offset`` and the ``status`` object; missing fields
    fall back to zero values.
    """
    return ProgramStatus(
        call_sign=safe_str(res.get("callsign")),
        title=safe_str(res.get("title")),
        episode_title=safe_str(res.get("episodeTitle")),
        date=safe_str(res.get("date")),
        rating=safe_str(res.get("rating")),
        program_id=safe_str(res.get("programId")),
        duration=safe_int(res.get("duration")),
        offset=safe_int(res.get("offset")),
        major=safe_int(res.get("major")),
        minor=safe_int(res.get("minor")),
        start_time=safe_int(res.get("startTime")),
        station_id=safe_int(res.get("stationId")),
        is_off_air=safe_bool(res.get("isOffAir")),
        is_ppv=safe_bool(res.get("isPpv")),
        is_recording=safe_bool(res.get("isRecording")),
        is_vod=safe_bool(res.get("isVod")),
        is_pc_locked=safe_int(_first(res, "isPclocked", "isPcLocked")),
    )


def _first(res: dict[str, Any], *keys: str) -> Any:
    """Return the value of the first key present in the response."""
    for key in keys:
        if key in res:
            return res[key]

    return None
