"""
Summary: Exception hierarchy raised by the VLC HTTP client.
Why: Give callers one base class to catch while keeping failure kinds distinct.
"""

from __future__ import annotations


class VLCError(Exception):
    """Base class for every error raised by vlcremote."""


# Local validation ------------------------------------------------------------


class ValidationError(VLCError, ValueError):
    """An argument was rejected before any request was sent."""


class InvalidPlayOption(ValidationError):
    """Play option is not one of the supported values."""


class InvalidSortMode(ValidationError):
    """Playlist sort order id is neither 0 nor 1."""


class InvalidVolumeValue(ValidationError):
    """Volume value does not match ``[+-]<int>[%]``."""


class InvalidSeekValue(ValidationError):
    """Seek value is neither a number/percentage nor a duration."""


class InvalidPreampGainValue(ValidationError):
    """Preamp or band gain is outside ``[-20, 20]``."""


class InvalidPlaybackRate(ValidationError):
    """Playback rate is not strictly positive."""


# Transport -------------------------------------------------------------------


class TransportError(VLCError):
    """The HTTP round trip to the VLC web interface failed."""


class RequestConstructionError(TransportError):
    """The request object could not be built (e.g. malformed base URL)."""


class NetworkError(TransportError):
    """The connection or request itself failed."""


class UnexpectedStatusError(TransportError):
    """The server answered with a status code outside 2xx."""

    def __init__(self, status_code: int, endpoint: str) -> None:
        super().__init__(f"unexpected status code {status_code} for {endpoint}")
        self.status_code: int = status_code
        self.endpoint: str = endpoint


# Decoding --------------------------------------------------------------------


class DecodeError(VLCError):
    """The response body does not match the expected shape."""


__all__ = [
    "DecodeError",
    "InvalidPlayOption",
    "InvalidPlaybackRate",
    "InvalidPreampGainValue",
    "InvalidSeekValue",
    "InvalidSortMode",
    "InvalidVolumeValue",
    "NetworkError",
    "RequestConstructionError",
    "TransportError",
    "UnexpectedStatusError",
    "VLCError",
    "ValidationError",
]
