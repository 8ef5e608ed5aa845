"""Dispatch parsed CLI arguments to ``VLC`` facade operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, final

from vlcremote.domain.models import Browse, Playlist, Status, VLMResult
from vlcremote.platform.vlc import VLC
from vlcremote.ui.cli.args.options import CLIArgs

CommandResult = Status | Playlist | Browse | VLMResult


@final
class CommandExecutor:
    """Run one subcommand against a ``VLC`` client."""

    def __init__(self, vlc: VLC) -> None:
        self._vlc = vlc
        self._handlers: dict[str, Callable[[dict[str, Any]], CommandResult]] = {
            "status": lambda _: vlc.get_status(),
            "resume": lambda _: vlc.force_resume_playlist(),
            "force-pause": lambda _: vlc.force_pause_playlist(),
            "stop": lambda _: vlc.stop_playlist(),
            "next": lambda _: vlc.play_next_in_playlist(),
            "previous": lambda _: vlc.play_previous_in_playlist(),
            "empty": lambda _: vlc.empty_playlist(),
            "random": lambda _: vlc.toggle_playlist_random(),
            "loop": lambda _: vlc.toggle_playlist_loop(),
            "repeat": lambda _: vlc.toggle_playlist_repeat(),
            "fullscreen": lambda _: vlc.toggle_fullscreen(),
            "playlist": lambda _: vlc.get_playlist(),
            "play": self._play,
            "enqueue": lambda v: vlc.add_to_playlist(v["source"]),
            "pause": self._pause,
            "delete": lambda v: vlc.delete_from_playlist(v["item_id"]),
            "sort": lambda v: vlc.sort_playlist(v["order"], v["mode"]),
            "volume": lambda v: vlc.set_volume(v["value"]),
            "seek": lambda v: vlc.seek_to_value(v["value"]),
            "rate": lambda v: vlc.set_playback_rate(v["rate"]),
            "preamp": lambda v: vlc.set_preamp(v["gain"]),
            "eq": lambda v: vlc.set_eq(v["band"], v["gain"]),
            "equalizer": lambda v: vlc.enable_eq(v["state"] == "on"),
            "eq-preset": lambda v: vlc.set_eq_preset(v["preset_id"]),
            "delay": self._delay,
            "aspect": lambda v: vlc.set_aspect_ratio(v["ratio"]),
            "subtitle": lambda v: vlc.add_subtitle(v["subtitle_uri"]),
            "discover": lambda v: vlc.enable_service_discovery_module(v["module"]),
            "track": self._track,
            "browse": self._browse,
            "vlm": self._vlm,
        }

    @property
    def commands(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def execute(self, args: CLIArgs) -> CommandResult:
        """Run the subcommand named in ``args``.

        Raises:
            KeyError: If the subcommand is unknown.
            VLCError: Propagated from the client.
        """
        handler = self._handlers[args.command]
        return handler(args.values)

    def _play(self, values: dict[str, Any]) -> Status:
        source = values.get("source")
        if source:
            return self._vlc.play_source(source, values.get("option"))
        item_id = values.get("item_id")
        if item_id is not None:
            return self._vlc.play_playlist_item(item_id)
        return self._vlc.play_last_active_playlist_item()

    def _pause(self, values: dict[str, Any]) -> Status:
        item_id = values.get("item_id")
        if item_id is not None:
            return self._vlc.pause_playlist(item_id)
        return self._vlc.pause_with_last_active_playlist_item()

    def _track(self, values: dict[str, Any]) -> Status:
        selectors: dict[str, Callable[[int], Status]] = {
            "audio": self._vlc.select_audio_track,
            "video": self._vlc.select_video_track,
            "subtitle": self._vlc.select_subtitle_track,
            "title": self._vlc.select_title,
            "chapter": self._vlc.select_chapter,
        }
        return selectors[values["kind"]](values["track_id"])

    def _delay(self, values: dict[str, Any]) -> Status:
        if values["stream"] == "audio":
            return self._vlc.set_audio_delay(values["seconds"])
        return self._vlc.set_subtitle_delay(values["seconds"])

    def _browse(self, values: dict[str, Any]) -> Browse:
        uri = values.get("uri")
        if uri:
            return self._vlc.browse_uri(uri)
        return self._vlc.browse_directory(values["directory"])

    def _vlm(self, values: dict[str, Any]) -> VLMResult:
        command = values.get("vlm_command")
        if command:
            return self._vlc.run_vlm_command(command)
        return self._vlc.get_vlm_elements()


__all__ = ["CommandExecutor", "CommandResult"]
