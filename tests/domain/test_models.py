"""Tests for response record construction."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

import pytest

from vlcremote.domain.models import (
    Browse,
    Equalizer,
    Playlist,
    Status,
    StreamTable,
    VLMResult,
)


def _status_payload() -> dict[str, Any]:
    return {
        "fullscreen": False,
        "aspectratio": "default",
        "audiodelay": 0,
        "apiversion": 3,
        "currentplid": 4,
        "time": 42,
        "volume": 256,
        "length": 215,
        "random": False,
        "audiofilters": {"filter_0": ""},
        "rate": 1,
        "videoeffects": {"hue": 0, "saturation": 1, "contrast": 1, "brightness": 1, "gamma": 1},
        "state": "playing",
        "loop": True,
        "version": "3.0.20 Vetinari",
        "position": 0.1953,
        "repeat": False,
        "subtitledelay": 0,
        "equalizer": [],
        "information": {
            "chapter": 0,
            "chapters": [],
            "title": 0,
            "titles": [],
            "category": {
                "meta": {"filename": "track.flac", "title": "Song", "artist": "Band"},
                "Stream 0": {"Codec": "FLAC (flac)", "Type": "Audio", "Channels": "Stereo", "Sample_rate": "44100 Hz"},
            },
        },
        "stats": {"inputbitrate": 0.12, "readbytes": 1024, "decodedaudio": 300},
    }


def test_status_from_dict_maps_fields() -> None:
    status = Status.from_dict(_status_payload())

    assert status.state == "playing"
    assert status.volume == 256
    assert status.fullscreen == 0
    assert status.loop is True
    assert status.rate == 1.0
    assert status.currentplid == 4
    assert status.videoeffects.saturation == 1.0
    assert status.audiofilters == {"filter_0": ""}
    assert status.equalizer == []
    assert status.stats is not None
    assert status.stats.readbytes == 1024
    assert status.stats.inputbitrate == pytest.approx(0.12)


def test_status_information_category_tables() -> None:
    status = Status.from_dict(_status_payload())

    assert status.information is not None
    meta = status.information.meta
    assert meta is not None
    assert meta.filename == "track.flac"
    assert meta.extra == {"title": "Song", "artist": "Band"}

    stream = status.information.category["Stream 0"]
    assert stream == StreamTable(
        codec="FLAC (flac)", type="Audio", channels="Stereo", sample_rate="44100 Hz"
    )


def test_status_defaults_when_keys_missing() -> None:
    status = Status.from_dict({})

    assert status == Status()
    assert status.information is None
    assert status.stats is None


def test_status_equalizer_object_is_wrapped() -> None:
    payload = {
        "equalizer": {
            "preamp": 12.0,
            "bands": {"band0": 1.5},
            "presets": {"preset0": "Flat"},
        }
    }

    status = Status.from_dict(payload)

    assert status.equalizer == [
        Equalizer(presets={"preset0": "Flat"}, bands={"band0": "1.5"}, preamp=12.0)
    ]


@pytest.mark.parametrize(
    "payload",
    [
        {"volume": "loud"},
        {"videoeffects": [1, 2]},
        {"information": "none"},
        {"state": {"nested": True}},
        {"repeat": "sometimes"},
        {"time": 1.5},
    ],
)
def test_status_rejects_wrong_field_types(payload: dict[str, Any]) -> None:
    with pytest.raises((TypeError, ValueError)):
        _ = Status.from_dict(payload)


def _playlist_payload() -> dict[str, Any]:
    return {
        "ro": "rw",
        "type": "node",
        "name": "",
        "id": "1",
        "children": [
            {
                "ro": "ro",
                "type": "node",
                "name": "Playlist",
                "id": "2",
                "children": [
                    {"ro": "rw", "type": "leaf", "name": "a.mp3", "id": "4", "duration": 180, "uri": "file:///a.mp3"},
                    {
                        "ro": "rw",
                        "type": "leaf",
                        "name": "b.mp3",
                        "id": "5",
                        "duration": 200,
                        "uri": "file:///b.mp3",
                        "current": "current",
                    },
                ],
            },
            {"ro": "ro", "type": "node", "name": "Media Library", "id": "3", "children": []},
        ],
    }


def test_playlist_tree_helpers() -> None:
    playlist = Playlist.from_dict(_playlist_payload())

    assert [node.id for node in playlist.walk()] == ["1", "2", "4", "5", "3"]
    assert [item.name for item in playlist.items()] == ["a.mp3", "b.mp3"]

    current = playlist.current_item()
    assert current is not None
    assert current.uri == "file:///b.mp3"
    assert current.duration == 200

    found = playlist.find(4)
    assert found is not None and found.name == "a.mp3"
    assert playlist.find("99") is None


def test_playlist_rejects_non_list_children() -> None:
    with pytest.raises(TypeError):
        _ = Playlist.from_dict({"id": "1", "children": {"id": "2"}})


def test_browse_elements() -> None:
    browse = Browse.from_dict(
        {
            "element": [
                {"type": "dir", "path": "/home", "name": "home", "uri": "file:///home", "size": 4096, "mode": 16877},
                {"type": "file", "path": "/a.mkv", "name": "a.mkv", "uri": "file:///a.mkv", "size": 10},
            ]
        }
    )

    assert [element.name for element in browse.element] == ["home", "a.mkv"]
    assert browse.element[0].is_dir
    assert not browse.element[1].is_dir
    assert browse.element[0].mode == 16877


def test_vlm_result_from_element() -> None:
    root = ET.fromstring(
        "<vlm>"
        "<error></error>"
        '<broadcasts><broadcast name="ch1" enabled="yes" loop="no"/></broadcasts>'
        '<vods><vod name="film" enabled="no"/></vods>'
        "<schedules/>"
        "</vlm>"
    )

    result = VLMResult.from_element(root)

    assert result.ok
    assert result.error == ""
    assert [(element.kind, element.name) for element in result.elements] == [
        ("broadcast", "ch1"),
        ("vod", "film"),
    ]
    assert result.elements[0].attributes == {"name": "ch1", "enabled": "yes", "loop": "no"}


def test_vlm_result_carries_remote_error() -> None:
    root = ET.fromstring("<vlm><error>Unknown command `bogus'</error></vlm>")

    result = VLMResult.from_element(root)

    assert not result.ok
    assert result.error == "Unknown command `bogus'"
