"""Where: src/vlcremote/domain/models.py
What: Typed records mirroring the VLC web interface responses.
Why: Hand callers immutable values instead of raw JSON dictionaries/XML trees.

Every ``from_dict`` tolerates missing keys (VLC omits fields depending on
what is playing) but raises ``TypeError``/``ValueError`` when a present key
carries a value of the wrong kind. The decoder turns those into
``DecodeError``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self, cast


# Field coercion helpers -------------------------------------------------------


def _mapping(value: object, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"{name}: expected an object, got {type(value).__name__}")
    return cast(Mapping[str, Any], value)


def _list(value: object, name: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{name}: expected a list, got {type(value).__name__}")
    return cast(list[Any], value)


def _str(value: object, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (Mapping, list)):
        raise TypeError(f"{name}: expected a scalar, got {type(value).__name__}")
    return str(value)


def _int(value: object, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{name}: expected an integer, got {value}")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError(f"{name}: expected an integer, got {type(value).__name__}")


def _float(value: object, name: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise TypeError(f"{name}: expected a number, got {type(value).__name__}")


def _bool(value: object, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str) and value.strip().lower() in {"true", "1"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "0", ""}:
        return False
    raise TypeError(f"{name}: expected a boolean, got {value!r}")


def _str_map(value: object, name: str) -> dict[str, str]:
    return {str(key): _str(item, f"{name}.{key}") for key, item in _mapping(value, name).items()}


# status.json -------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class VideoEffects:
    hue: float = 0.0
    saturation: float = 0.0
    contrast: float = 0.0
    brightness: float = 0.0
    gamma: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            hue=_float(data.get("hue"), "hue"),
            saturation=_float(data.get("saturation"), "saturation"),
            contrast=_float(data.get("contrast"), "contrast"),
            brightness=_float(data.get("brightness"), "brightness"),
            gamma=_float(data.get("gamma"), "gamma"),
        )


@dataclass(frozen=True, slots=True)
class Equalizer:
    """Equalizer state; present only while the equalizer is enabled."""

    presets: dict[str, str] = field(default_factory=dict)
    bands: dict[str, str] = field(default_factory=dict)
    preamp: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            presets=_str_map(data.get("presets"), "presets"),
            bands=_str_map(data.get("bands"), "bands"),
            preamp=_float(data.get("preamp"), "preamp"),
        )


@dataclass(frozen=True, slots=True)
class StreamTable:
    """One entry of ``information.category`` (``meta`` or ``Stream N``)."""

    _KEYS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("filename", "filename"),
        ("decoded_format", "Decoded_format"),
        ("color_transfer_function", "Color_transfer_function"),
        ("chroma_location", "Chroma_location"),
        ("video_resolution", "Video_resolution"),
        ("frame_rate", "Frame_rate"),
        ("codec", "Codec"),
        ("orientation", "Orientation"),
        ("color_space", "Color_space"),
        ("type", "Type"),
        ("color_primaries", "Color_primaries"),
        ("buffer_dimensions", "Buffer_dimensions"),
        ("channels", "Channels"),
        ("bits_per_sample", "Bits_per_sample"),
        ("sample_rate", "Sample_rate"),
    )

    filename: str = ""
    decoded_format: str = ""
    color_transfer_function: str = ""
    chroma_location: str = ""
    video_resolution: str = ""
    frame_rate: str = ""
    codec: str = ""
    orientation: str = ""
    color_space: str = ""
    type: str = ""
    color_primaries: str = ""
    buffer_dimensions: str = ""
    channels: str = ""
    bits_per_sample: str = ""
    sample_rate: str = ""
    # Remaining keys, e.g. meta tags such as ``title`` or ``artist``.
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        known = {json_key for _, json_key in cls._KEYS}
        values = {attr: _str(data.get(json_key), json_key) for attr, json_key in cls._KEYS}
        extra = {
            str(key): _str(value, str(key)) for key, value in data.items() if key not in known
        }
        return cls(**values, extra=extra)


@dataclass(frozen=True, slots=True)
class Information:
    chapters: list[Any] = field(default_factory=list)
    category: dict[str, StreamTable] = field(default_factory=dict)
    titles: list[Any] = field(default_factory=list)
    chapter: int = 0
    title: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        category = {
            str(key): StreamTable.from_dict(_mapping(value, f"category.{key}"))
            for key, value in _mapping(data.get("category"), "category").items()
        }
        return cls(
            chapters=_list(data.get("chapters"), "chapters"),
            category=category,
            titles=_list(data.get("titles"), "titles"),
            chapter=_int(data.get("chapter"), "chapter"),
            title=_int(data.get("title"), "title"),
        )

    @property
    def meta(self) -> StreamTable | None:
        """Return the ``meta`` table describing the current item, if any."""

        return self.category.get("meta")


@dataclass(frozen=True, slots=True)
class Stats:
    _FLOATS: ClassVar[tuple[str, ...]] = (
        "inputbitrate",
        "averagedemuxbitrate",
        "demuxbitrate",
        "averageinputbitrate",
        "sendbitrate",
    )
    _INTS: ClassVar[tuple[str, ...]] = (
        "lostabuffers",
        "readpackets",
        "sentbytes",
        "displayedpictures",
        "demuxreadpackets",
        "sentpackets",
        "demuxreadbytes",
        "decodedaudio",
        "playedabuffers",
        "demuxdiscontinuity",
        "lostpictures",
        "decodedvideo",
        "readbytes",
        "demuxcorrupted",
    )

    inputbitrate: float = 0.0
    averagedemuxbitrate: float = 0.0
    demuxbitrate: float = 0.0
    averageinputbitrate: float = 0.0
    sendbitrate: float = 0.0
    lostabuffers: int = 0
    readpackets: int = 0
    sentbytes: int = 0
    displayedpictures: int = 0
    demuxreadpackets: int = 0
    sentpackets: int = 0
    demuxreadbytes: int = 0
    decodedaudio: int = 0
    playedabuffers: int = 0
    demuxdiscontinuity: int = 0
    lostpictures: int = 0
    decodedvideo: int = 0
    readbytes: int = 0
    demuxcorrupted: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        values: dict[str, Any] = {name: _float(data.get(name), name) for name in cls._FLOATS}
        values.update({name: _int(data.get(name), name) for name in cls._INTS})
        return cls(**values)


@dataclass(frozen=True, slots=True)
class Status:
    """Player state returned by ``requests/status.json``."""

    audiofilters: dict[str, str] = field(default_factory=dict)
    information: Information | None = None
    stats: Stats | None = None
    aspectratio: str = ""
    version: str = ""
    state: str = ""
    equalizer: list[Equalizer] = field(default_factory=list)
    videoeffects: VideoEffects = field(default_factory=VideoEffects)
    fullscreen: int = 0
    length: int = 0
    apiversion: int = 0
    rate: float = 0.0
    volume: int = 0
    time: int = 0
    seek_sec: int = 0
    currentplid: int = 0
    position: float = 0.0
    audiodelay: float = 0.0
    subtitledelay: float = 0.0
    repeat: bool = False
    loop: bool = False
    random: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        information = data.get("information")
        stats = data.get("stats")
        return cls(
            audiofilters=_str_map(data.get("audiofilters"), "audiofilters"),
            information=(
                Information.from_dict(_mapping(information, "information"))
                if information is not None
                else None
            ),
            stats=Stats.from_dict(_mapping(stats, "stats")) if stats is not None else None,
            aspectratio=_str(data.get("aspectratio"), "aspectratio"),
            version=_str(data.get("version"), "version"),
            state=_str(data.get("state"), "state"),
            equalizer=_equalizers(data.get("equalizer")),
            videoeffects=VideoEffects.from_dict(_mapping(data.get("videoeffects"), "videoeffects")),
            fullscreen=_int(data.get("fullscreen"), "fullscreen"),
            length=_int(data.get("length"), "length"),
            apiversion=_int(data.get("apiversion"), "apiversion"),
            rate=_float(data.get("rate"), "rate"),
            volume=_int(data.get("volume"), "volume"),
            time=_int(data.get("time"), "time"),
            seek_sec=_int(data.get("seek_sec"), "seek_sec"),
            currentplid=_int(data.get("currentplid"), "currentplid"),
            position=_float(data.get("position"), "position"),
            audiodelay=_float(data.get("audiodelay"), "audiodelay"),
            subtitledelay=_float(data.get("subtitledelay"), "subtitledelay"),
            repeat=_bool(data.get("repeat"), "repeat"),
            loop=_bool(data.get("loop"), "loop"),
            random=_bool(data.get("random"), "random"),
        )


def _equalizers(value: object) -> list[Equalizer]:
    # VLC reports ``[]`` while disabled and a single object once enabled.
    if isinstance(value, Mapping):
        return [Equalizer.from_dict(cast(Mapping[str, Any], value))]
    return [
        Equalizer.from_dict(_mapping(item, "equalizer[]"))
        for item in _list(value, "equalizer")
    ]


# playlist.json -----------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Playlist:
    """A node of the playlist tree; the root and folders carry ``children``."""

    ro: str = ""
    type: str = ""
    name: str = ""
    id: str = ""
    uri: str = ""
    current: str = ""
    children: list[Playlist] = field(default_factory=list)
    duration: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            ro=_str(data.get("ro"), "ro"),
            type=_str(data.get("type"), "type"),
            name=_str(data.get("name"), "name"),
            id=_str(data.get("id"), "id"),
            uri=_str(data.get("uri"), "uri"),
            current=_str(data.get("current"), "current"),
            children=[
                cls.from_dict(_mapping(child, "children[]"))
                for child in _list(data.get("children"), "children")
            ],
            duration=_int(data.get("duration"), "duration"),
        )

    def walk(self) -> Iterator[Playlist]:
        """Yield this node and all descendants depth-first."""

        yield self
        for child in self.children:
            yield from child.walk()

    def items(self) -> list[Playlist]:
        """Return the playable leaves of the tree in playlist order."""

        return [node for node in self.walk() if node.type == "leaf"]

    def find(self, item_id: int | str) -> Playlist | None:
        wanted = str(item_id)
        return next((node for node in self.walk() if node.id == wanted), None)

    def current_item(self) -> Playlist | None:
        """Return the item VLC marks as ``current``, if any."""

        return next((node for node in self.walk() if node.current == "current"), None)


# browse.json -------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BrowseElement:
    type: str = ""
    path: str = ""
    name: str = ""
    uri: str = ""
    size: int = 0
    uid: int = 0
    gid: int = 0
    mode: int = 0
    access_time: int = 0
    creation_time: int = 0
    modification_time: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            type=_str(data.get("type"), "type"),
            path=_str(data.get("path"), "path"),
            name=_str(data.get("name"), "name"),
            uri=_str(data.get("uri"), "uri"),
            size=_int(data.get("size"), "size"),
            uid=_int(data.get("uid"), "uid"),
            gid=_int(data.get("gid"), "gid"),
            mode=_int(data.get("mode"), "mode"),
            access_time=_int(data.get("access_time"), "access_time"),
            creation_time=_int(data.get("creation_time"), "creation_time"),
            modification_time=_int(data.get("modification_time"), "modification_time"),
        )

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"


@dataclass(frozen=True, slots=True)
class Browse:
    """Directory listing returned by ``requests/browse.json``."""

    element: list[BrowseElement] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            element=[
                BrowseElement.from_dict(_mapping(item, "element[]"))
                for item in _list(data.get("element"), "element")
            ]
        )


# vlm.xml / vlm_cmd.xml ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class VLMElement:
    """A broadcast, vod or schedule declared in the VLM configuration."""

    kind: str
    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class VLMResult:
    """Parsed ``<vlm>`` document.

    ``error`` is filled by VLC itself when a VLM command is rejected; it is
    not a transport or decoding failure.
    """

    ROOT_TAG: ClassVar[str] = "vlm"
    _GROUPS: ClassVar[frozenset[str]] = frozenset({"broadcasts", "vods", "schedules"})

    error: str = ""
    elements: list[VLMElement] = field(default_factory=list)

    @classmethod
    def from_element(cls, root: ET.Element) -> Self:
        elements = [
            VLMElement(kind=item.tag, name=item.get("name", ""), attributes=dict(item.attrib))
            for group in root
            if group.tag in cls._GROUPS
            for item in group
        ]
        return cls(error=root.findtext("error", default=""), elements=elements)

    @property
    def ok(self) -> bool:
        return not self.error


__all__ = [
    "Browse",
    "BrowseElement",
    "Equalizer",
    "Information",
    "Playlist",
    "Stats",
    "Status",
    "StreamTable",
    "VLMElement",
    "VLMResult",
    "VideoEffects",
]
