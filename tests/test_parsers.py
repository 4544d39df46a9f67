"""Tests for response parsing helpers."""

from __future__ import annotations

import pytest

from custom_components.directv_shef.api.errors import DirecTVDeviceError
from custom_components.directv_shef.api.info import (
    parse_command_result,
    parse_locations,
    parse_version,
)
from custom_components.directv_shef.api.models import ProgramStatus
from custom_components.directv_shef.api.programs import parse_program_status
from custom_components.directv_shef.api.status import (
    parse_status,
    raise_if_device_error,
)
from custom_components.directv_shef.api.utils import safe_int

LEGACY_PROGRAM = {
    "callsign": "KOMOHD",
    "date": "2010",
    "duration": 3600,
    "isOffAir": True,
    "isPclocked": 1,
    "isPpv": False,
    "isRecording": True,
    "isVod": False,
    "major": 4,
    "minor": 65535,
    "programId": "9873211",
    "rating": "TV-PG",
    "startTime": 1278342000,
    "stationId": 3900947,
    "title": "Evening News",
}


def test_program_status_legacy_shape():
    program = parse_program_status(LEGACY_PROGRAM)

    assert program.call_sign == "KOMOHD"
    assert program.title == "Evening News"
    assert program.is_off_air is True
    assert program.is_recording is True
    assert program.is_pc_locked == 1
    assert program.episode_title == ""
    assert program.offset == 0


def test_program_status_current_shape():
    program = parse_program_status(
        {
            **LEGACY_PROGRAM,
            "episodeTitle": "Pilot",
            "offset": 120,
            "status": {"code": 200, "msg": "", "query": "/tv/getTuned"},
        }
    )

    assert program.episode_title == "Pilot"
    assert program.offset == 120
    assert program.station_id == 3900947


def test_program_status_defaults_for_missing_fields():
    assert parse_program_status({}) == ProgramStatus()
    assert parse_program_status(
        {"title": None, "major": None}
    ) == ProgramStatus()


def test_program_status_coerces_numeric_strings():
    program = parse_program_status(
        {"major": "249", "startTime": "1278342000", "isVod": "true"}
    )

    assert program.major == 249
    assert program.start_time == 1278342000
    assert program.is_vod is True


def test_parse_locations_skips_malformed_entries():
    locations = parse_locations(
        {"locations": [{"clientAddr": 0, "locationName": "Den"}, "junk"]}
    )

    assert len(locations) == 1
    assert locations[0].client_address == "0"


def test_parse_locations_missing_key():
    assert parse_locations({"status": {}}) == []


def test_parse_version_missing_fields():
    version = parse_version({})

    assert version.receiver_id == ""
    assert version.system_time == 0


def test_parse_command_result_flags():
    result = parse_command_result(
        {"command": 1, "param": 0, "prefix": "false", "return": None}
    )

    assert result.command_flag is True
    assert result.param_flag is False
    assert result.prefix_flag is False
    assert result.value == 0


def test_parse_status_missing():
    envelope = parse_status({"mode": 0})

    assert envelope.message == ""
    assert envelope.is_error is False


@pytest.mark.parametrize(
    "status",
    [
        {"code": 200, "msg": ""},
        {"code": 0, "msg": None},
        {},
    ],
)
def test_raise_if_device_error_accepts_success(status):
    envelope = raise_if_device_error({"status": status})

    assert envelope.is_error is False


@pytest.mark.parametrize(
    "status",
    [
        {"code": 403, "msg": "Forbidden.Invalid client address"},
        {"code": 200, "msg": "Tuner unavailable"},
        {"code": 200, "msg": "OK."},
        {"code": 200, "msg": "OK"},
        {"code": 0, "msg": "   "},
        {"msg": "OK."},
        {"code": 500, "commandResult": 1, "msg": "Internal error"},
    ],
)
def test_raise_if_device_error_rejects_failures(status):
    with pytest.raises(DirecTVDeviceError) as err:
        raise_if_device_error({"mode": 1, "status": status})

    assert err.value.message == status["msg"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, 1), (False, 0), ("42", 42), (7, 7), (None, 0), ("n/a", 0)],
)
def test_safe_int(value, expected):
    assert safe_int(value) == expected
