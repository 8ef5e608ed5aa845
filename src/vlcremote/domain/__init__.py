"""
Summary: Domain vocabulary, records and errors of the VLC web interface.
Why: Share one set of types between the client, the CLI and tests.
"""

from __future__ import annotations

from .commands import Command, Endpoint, ParamKey, PlayOption, SortOrder
from .errors import (
    DecodeError,
    InvalidPlaybackRate,
    InvalidPlayOption,
    InvalidPreampGainValue,
    InvalidSeekValue,
    InvalidSortMode,
    InvalidVolumeValue,
    NetworkError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
    VLCError,
)
from .models import (
    Browse,
    BrowseElement,
    Equalizer,
    Information,
    Playlist,
    Stats,
    Status,
    StreamTable,
    VideoEffects,
    VLMElement,
    VLMResult,
)

__all__ = [
    "Browse",
    "BrowseElement",
    "Command",
    "DecodeError",
    "Endpoint",
    "Equalizer",
    "Information",
    "InvalidPlayOption",
    "InvalidPlaybackRate",
    "InvalidPreampGainValue",
    "InvalidSeekValue",
    "InvalidSortMode",
    "InvalidVolumeValue",
    "NetworkError",
    "ParamKey",
    "PlayOption",
    "Playlist",
    "RequestConstructionError",
    "SortOrder",
    "Stats",
    "Status",
    "StreamTable",
    "TransportError",
    "UnexpectedStatusError",
    "VLCError",
    "VLMElement",
    "VLMResult",
    "ValidationError",
    "VideoEffects",
]
