"""Tests for integration helper functions."""

from __future__ import annotations

import pytest

from custom_components.directv_shef.config_flow import _unique_id
from custom_components.directv_shef.coordinator import (
    DirecTVShefState,
    _mode_from_value,
)
from custom_components.directv_shef.const import OperatingMode
from custom_components.directv_shef.helpers import format_channel, parse_channel


@pytest.mark.parametrize(
    ("media_id", "expected"),
    [
        ("249", (249, None)),
        (" 502-1 ", (502, 1)),
        ("abc", None),
        ("249-", None),
        ("-1", None),
        ("", None),
    ],
)
def test_parse_channel(media_id, expected):
    assert parse_channel(media_id) == expected


@pytest.mark.parametrize(
    ("major", "minor", "expected"),
    [(249, 65535, "249"), (249, 0, "249"), (502, 1, "502-1")],
)
def test_format_channel(major, minor, expected):
    assert format_channel(major, minor) == expected


def test_unique_id_from_receiver():
    assert _unique_id("0288 7745 2797", None) == "028877452797_0"
    assert _unique_id("0288 7745 2797", "88A4C3B2E1F0") == (
        "028877452797_88A4C3B2E1F0"
    )


def test_mode_from_value():
    assert _mode_from_value(0) is OperatingMode.ACTIVE
    assert _mode_from_value(1) is OperatingMode.STANDBY
    assert _mode_from_value(7) is OperatingMode.UNKNOWN


def test_state_is_on():
    assert DirecTVShefState(mode=OperatingMode.ACTIVE).is_on is True
    assert DirecTVShefState(mode=OperatingMode.STANDBY).is_on is False
    assert DirecTVShefState().is_on is False
