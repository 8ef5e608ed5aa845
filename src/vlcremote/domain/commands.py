"""
Summary: Closed vocabularies for endpoints, query keys and command tokens.
Why: Keep request construction free of ad-hoc string literals.

Values follow VLC's ``share/lua/http/requests/README.txt``.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Endpoint(StrEnum):
    """Fixed request paths served by the VLC web interface."""

    STATUS = "requests/status.json"
    PLAYLIST = "requests/playlist.json"
    BROWSE = "requests/browse.json"
    VLM = "requests/vlm.xml"
    VLM_COMMAND = "requests/vlm_cmd.xml"


class ParamKey(StrEnum):
    """Query parameter names understood by the request handlers."""

    COMMAND = "command"
    INPUT = "input"
    ID = "id"
    VAL = "val"
    OPTION = "option"
    BAND = "band"
    DIR = "dir"
    URI = "uri"


class Command(StrEnum):
    """Values accepted by the ``command`` parameter of ``status.json``."""

    # Playlist
    STOP = "pl_stop"
    EMPTY = "pl_empty"
    PLAY = "pl_play"
    PAUSE = "pl_pause"
    NEXT = "pl_next"
    PREVIOUS = "pl_previous"
    DELETE = "pl_delete"
    SORT = "pl_sort"
    RANDOM = "pl_random"
    LOOP = "pl_loop"
    REPEAT = "pl_repeat"
    SERVICE_DISCOVERY = "pl_sd"
    FORCE_RESUME = "pl_forceresume"
    FORCE_PAUSE = "pl_forcepause"

    # Input
    IN_PLAY = "in_play"
    IN_ENQUEUE = "in_enqueue"

    # General
    FULLSCREEN = "fullscreen"
    VOLUME = "volume"
    SEEK = "seek"
    ADD_SUBTITLE = "addsubtitle"
    PREAMP = "preamp"
    EQUALIZER = "equalizer"
    ENABLE_EQ = "enableeq"
    SET_PRESET = "setpreset"
    TITLE = "title"
    CHAPTER = "chapter"
    AUDIO_TRACK = "audio_track"
    VIDEO_TRACK = "video_track"
    SUBTITLE_TRACK = "subtitle_track"
    AUDIO_DELAY = "audiodelay"
    SUBTITLE_DELAY = "subdelay"
    RATE = "rate"
    ASPECT_RATIO = "aspectratio"


class PlayOption(StrEnum):
    """Options accepted alongside ``in_play``."""

    NO_AUDIO = "noaudio"
    NO_VIDEO = "novideo"


class SortOrder(IntEnum):
    """Order ids accepted by ``pl_sort``."""

    NORMAL = 0
    REVERSE = 1


__all__ = ["Command", "Endpoint", "ParamKey", "PlayOption", "SortOrder"]
