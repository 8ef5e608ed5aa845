"""Tests for CLI subcommand dispatch."""

from __future__ import annotations

from typing import Any

import pytest

from vlcremote.platform.vlc import VLC
from vlcremote.ui.cli.args.options import CLIArgs, ConnectionOverrides
from vlcremote.ui.cli.args.parser import SIMPLE_COMMANDS
from vlcremote.ui.cli.commands import CommandExecutor


def _args(command: str, **values: Any) -> CLIArgs:
    return CLIArgs(command=command, connection=ConnectionOverrides(), values=values)


@pytest.mark.parametrize(
    ("args", "endpoint"),
    [
        (_args("status"), "requests/status.json"),
        (_args("resume"), "requests/status.json?command=pl_forceresume"),
        (_args("play", source=None, item_id=None, option=None), "requests/status.json?command=pl_play"),
        (_args("play", source=None, item_id=3, option=None), "requests/status.json?command=pl_play&id=3"),
        (
            _args("play", source="file:///x", item_id=None, option="novideo"),
            "requests/status.json?command=in_play&input=file:///x&option=novideo",
        ),
        (_args("pause", item_id=None), "requests/status.json?command=pl_pause"),
        (_args("pause", item_id=9), "requests/status.json?command=pl_pause&id=9"),
        (_args("sort", order=0, mode=1), "requests/status.json?command=pl_sort&id=0&val=1"),
        (_args("eq", band=2, gain=-3), "requests/status.json?band=2&command=equalizer&val=-3"),
        (_args("track", kind="chapter", track_id=4), "requests/status.json?command=chapter&val=4"),
        (_args("track", kind="audio", track_id=1), "requests/status.json?command=audio_track&val=1"),
        (_args("rate", rate=1.25), "requests/status.json?command=rate&val=1.250000"),
        (_args("browse", uri="file:///tmp", directory=None), "requests/browse.json?uri=file:///tmp"),
        (_args("browse", uri=None, directory="/tmp"), "requests/browse.json?dir=/tmp"),
        (_args("playlist"), "requests/playlist.json"),
        (_args("force-pause"), "requests/status.json?command=pl_forcepause"),
        (_args("equalizer", state="on"), "requests/status.json?command=enableeq&val=1"),
        (_args("equalizer", state="off"), "requests/status.json?command=enableeq&val=0"),
        (_args("eq-preset", preset_id=2), "requests/status.json?command=setpreset&id=2"),
        (_args("delay", stream="audio", seconds=-0.5), "requests/status.json?command=audiodelay&val=-0.500000"),
        (_args("delay", stream="subtitle", seconds=1.0), "requests/status.json?command=subdelay&val=1.000000"),
        (_args("aspect", ratio="16:9"), "requests/status.json?command=aspectratio&val=16:9"),
        (
            _args("subtitle", subtitle_uri="file:///movie.srt"),
            "requests/status.json?command=addsubtitle&val=file:///movie.srt",
        ),
        (_args("discover", module="sap"), "requests/status.json?command=pl_sd&val=sap"),
    ],
)
def test_executor_dispatches_to_endpoint(stub_transport: Any, args: CLIArgs, endpoint: str) -> None:
    _ = CommandExecutor(VLC(stub_transport)).execute(args)

    assert stub_transport.endpoints == [endpoint]


def test_executor_vlm_with_and_without_command(stub_transport: Any) -> None:
    stub_transport.response = b"<vlm/>"
    executor = CommandExecutor(VLC(stub_transport))

    _ = executor.execute(_args("vlm", vlm_command=None))
    _ = executor.execute(_args("vlm", vlm_command="show"))

    assert stub_transport.endpoints == ["requests/vlm.xml", "requests/vlm_cmd.xml?command=show"]


def test_executor_covers_simple_commands(stub_transport: Any) -> None:
    executor = CommandExecutor(VLC(stub_transport))

    assert set(SIMPLE_COMMANDS) <= executor.commands
