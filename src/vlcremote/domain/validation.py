"""
Summary: Pre-flight checks for arguments sent to the VLC web interface.
Why: Reject malformed values locally so no request is issued for them.
"""

from __future__ import annotations

import re
from typing import Final

from .commands import PlayOption, SortOrder
from .errors import (
    InvalidPlaybackRate,
    InvalidPlayOption,
    InvalidPreampGainValue,
    InvalidSeekValue,
    InvalidSortMode,
    InvalidVolumeValue,
)

VOLUME_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d+(%)?$", re.ASCII)
SEEK_NUMBER_PATTERN: Final[re.Pattern[str]] = VOLUME_PATTERN
SEEK_DURATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""^([+-])?(\d+[Hh])?(:)?(\d+[Mm'])?(:\d+([Ss"])?)?$""",
    re.ASCII,
)

GAIN_MIN: Final[int] = -20
GAIN_MAX: Final[int] = 20


def validate_volume(value: str) -> str:
    """Accept ``+<int>``, ``-<int>``, ``<int>`` or ``<int>%``."""

    if not VOLUME_PATTERN.fullmatch(value):
        raise InvalidVolumeValue(f"invalid volume value: {value!r}")
    return value


def validate_seek(value: str) -> str:
    """Accept a volume-style number/percentage or a duration.

    Duration form: ``[+-][<int>H:][<int>M:][<int>[S]]``, e.g. ``+1H:2M``.
    """

    if SEEK_NUMBER_PATTERN.fullmatch(value) or SEEK_DURATION_PATTERN.fullmatch(value):
        return value
    raise InvalidSeekValue(f"invalid seek value: {value!r}")


def validate_gain(gain: int) -> int:
    if gain < GAIN_MIN or gain > GAIN_MAX:
        raise InvalidPreampGainValue(
            f"gain must be between {GAIN_MIN} and {GAIN_MAX}, got {gain}"
        )
    return gain


def validate_playback_rate(rate: float) -> float:
    if not rate > 0:
        raise InvalidPlaybackRate(f"playback rate must be > 0, got {rate}")
    return rate


def validate_sort_order(order_id: int) -> SortOrder:
    try:
        return SortOrder(order_id)
    except ValueError as exc:
        raise InvalidSortMode(f"invalid playlist sort order: {order_id}") from exc


def validate_play_option(option: str | None) -> PlayOption | None:
    """Return the matching ``PlayOption`` or ``None`` when no option is given."""

    if option is None:
        return None
    try:
        return PlayOption(option)
    except ValueError as exc:
        raise InvalidPlayOption(f"invalid play option: {option!r}") from exc


__all__ = [
    "GAIN_MAX",
    "GAIN_MIN",
    "validate_gain",
    "validate_play_option",
    "validate_playback_rate",
    "validate_seek",
    "validate_sort_order",
    "validate_volume",
]
