"""Tests for argument validation helpers."""

from __future__ import annotations

import pytest

from vlcremote.domain.commands import PlayOption, SortOrder
from vlcremote.domain.errors import (
    InvalidPlaybackRate,
    InvalidPlayOption,
    InvalidPreampGainValue,
    InvalidSeekValue,
    InvalidSortMode,
    InvalidVolumeValue,
    ValidationError,
)
from vlcremote.domain.validation import (
    validate_gain,
    validate_play_option,
    validate_playback_rate,
    validate_seek,
    validate_sort_order,
    validate_volume,
)


@pytest.mark.parametrize("value", ["10", "+10", "-10", "10%", "0", "+5%"])
def test_volume_accepts_numeric_forms(value: str) -> None:
    assert validate_volume(value) == value


@pytest.mark.parametrize(
    "value",
    ["abc", "", "10%%", "1.5", "10\n", "% 10", "\u0661\u0660", "\u0661\u0660%"],
)
def test_volume_rejects_other_values(value: str) -> None:
    with pytest.raises(InvalidVolumeValue):
        _ = validate_volume(value)


@pytest.mark.parametrize(
    "value",
    ["+1H:2M", "1000", "-10%", "1h", "2m", "+3M:10S", "-1H:2M:3s", ":45", '1m:5"'],
)
def test_seek_accepts_numbers_and_durations(value: str) -> None:
    assert validate_seek(value) == value


@pytest.mark.parametrize("value", ["garbage", "1X", "++1", "1H 2M", "1:30", "\u0661H", "+\u0662M"])
def test_seek_rejects_other_values(value: str) -> None:
    with pytest.raises(InvalidSeekValue):
        _ = validate_seek(value)


@pytest.mark.parametrize("gain", [-20, -1, 0, 7, 20])
def test_gain_accepts_bounds(gain: int) -> None:
    assert validate_gain(gain) == gain


@pytest.mark.parametrize("gain", [-30, -21, 21, 30])
def test_gain_rejects_out_of_range(gain: int) -> None:
    with pytest.raises(InvalidPreampGainValue):
        _ = validate_gain(gain)


@pytest.mark.parametrize("rate", [0, -1.0, float("nan")])
def test_playback_rate_must_be_positive(rate: float) -> None:
    with pytest.raises(InvalidPlaybackRate):
        _ = validate_playback_rate(rate)


@pytest.mark.parametrize("rate", [0.01, 1.0, 16])
def test_playback_rate_accepts_positive(rate: float) -> None:
    assert validate_playback_rate(rate) == rate


def test_sort_order_accepts_zero_and_one() -> None:
    assert validate_sort_order(0) is SortOrder.NORMAL
    assert validate_sort_order(1) is SortOrder.REVERSE


@pytest.mark.parametrize("order_id", [-1, 2, 7])
def test_sort_order_rejects_other_ids(order_id: int) -> None:
    with pytest.raises(InvalidSortMode):
        _ = validate_sort_order(order_id)


def test_play_option_accepts_known_values_and_none() -> None:
    assert validate_play_option("noaudio") is PlayOption.NO_AUDIO
    assert validate_play_option("novideo") is PlayOption.NO_VIDEO
    assert validate_play_option(None) is None


@pytest.mark.parametrize("option", ["fullscreen", "NOAUDIO", ""])
def test_play_option_rejects_other_values(option: str) -> None:
    with pytest.raises(InvalidPlayOption):
        _ = validate_play_option(option)


def test_validation_errors_share_base_class() -> None:
    with pytest.raises(ValidationError):
        _ = validate_volume("loud")
    with pytest.raises(ValueError):
        _ = validate_gain(99)
