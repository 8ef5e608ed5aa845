"""vlcremote: control a running VLC instance through its HTTP interface.

Typical use::

    from vlcremote import create_client

    vlc = create_client("http://127.0.0.1:8080", password="secret")
    status = vlc.set_volume("+10")
"""

from __future__ import annotations

from vlcremote.domain.errors import (
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
from vlcremote.domain.models import Browse, Playlist, Status, VLMResult
from vlcremote.platform.vlc import (
    VLC,
    HTTPTransport,
    RequestAuth,
    Transport,
    build_endpoint,
    client_from_config,
    create_client,
)

__version__ = "0.1.0"

__all__ = [
    "Browse",
    "DecodeError",
    "HTTPTransport",
    "InvalidPlayOption",
    "InvalidPlaybackRate",
    "InvalidPreampGainValue",
    "InvalidSeekValue",
    "InvalidSortMode",
    "InvalidVolumeValue",
    "NetworkError",
    "Playlist",
    "RequestAuth",
    "RequestConstructionError",
    "Status",
    "Transport",
    "TransportError",
    "UnexpectedStatusError",
    "VLC",
    "VLCError",
    "VLMResult",
    "ValidationError",
    "build_endpoint",
    "client_from_config",
    "create_client",
]
