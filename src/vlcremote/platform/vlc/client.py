"""Where: src/vlcremote/platform/vlc/client.py
What: Facade exposing VLC web interface commands as typed operations.
Why: Callers deal with validated arguments and records, not query strings.

This module delegates specialised responsibilities to smaller helpers:
- ``query`` builds deterministic endpoints from parameter maps
- ``http_client`` performs the authenticated GET
- ``decoding`` turns response bodies into records

Endpoints and tokens follow VLC's ``share/lua/http/requests/README.txt``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, TypeVar
from urllib.parse import quote_plus

from vlcremote.domain.commands import Command, Endpoint, ParamKey
from vlcremote.domain.errors import DecodeError, ValidationError
from vlcremote.domain.models import Browse, Playlist, Status, VLMResult
from vlcremote.domain.validation import (
    validate_gain,
    validate_play_option,
    validate_playback_rate,
    validate_seek,
    validate_sort_order,
    validate_volume,
)
from vlcremote.platform.logging import logger

from .decoding import decode_json, decode_xml
from .http_client import HTTPTransport, RequestAuth, Transport
from .query import ParamMap, build_endpoint, format_float, format_int

if TYPE_CHECKING:
    from vlcremote.config.config import Config

R = TypeVar("R")


class VLC:
    """Client for a running VLC instance's HTTP interface.

    Every operation performs exactly one request and returns the decoded
    response, or raises. The instance holds nothing but its transport.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport: Transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    # Plumbing -----------------------------------------------------------------

    def _execute(self, base: Endpoint, params: ParamMap | None, decode: Callable[[bytes], R]) -> R:
        endpoint = build_endpoint(base, params)
        raw = self._transport.get(endpoint)
        try:
            return decode(raw)
        except DecodeError as exc:
            logger.warning(
                "Unable to decode response from %s: %s",
                endpoint,
                exc,
                extra={
                    "request_event": "request.error",
                    "endpoint": endpoint,
                    "error_message": str(exc),
                },
            )
            raise

    def _status(self, params: ParamMap | None = None) -> Status:
        return self._execute(Endpoint.STATUS, params, lambda raw: decode_json(raw, Status))

    def _browse(self, params: ParamMap) -> Browse:
        return self._execute(Endpoint.BROWSE, params, lambda raw: decode_json(raw, Browse))

    def _vlm(self, base: Endpoint, params: ParamMap | None = None) -> VLMResult:
        return self._execute(base, params, lambda raw: decode_xml(raw, VLMResult))

    @contextmanager
    def _validating(self, operation: str) -> Iterator[None]:
        try:
            yield
        except ValidationError as exc:
            # Callers report the raised error; this record only traces it.
            logger.debug(
                "Rejected %s: %s",
                operation,
                exc,
                extra={
                    "request_event": "request.rejected",
                    "operation": operation,
                    "error_message": str(exc),
                },
            )
            raise

    @staticmethod
    def _command(command: Command, **values: str) -> dict[str, str]:
        params: dict[str, str] = {ParamKey.COMMAND: command}
        for key, value in values.items():
            params[ParamKey(key)] = value
        return params

    # Status -------------------------------------------------------------------

    def get_status(self) -> Status:
        """Return the current status, including current item info and metadata."""

        return self._status()

    # Playlist control ---------------------------------------------------------

    def empty_playlist(self) -> Status:
        return self._status(self._command(Command.EMPTY))

    def play_source(self, source: str, option: str | None = None) -> Status:
        """Add ``source`` (a URI) to the playlist and start playing it.

        Args:
            source: MRL of the item to play.
            option: Optional ``"noaudio"`` or ``"novideo"``.

        Raises:
            InvalidPlayOption: If ``option`` is given but unsupported.
        """
        with self._validating("play_source"):
            play_option = validate_play_option(option)

        params = self._command(Command.IN_PLAY, input=source)
        if play_option is not None:
            params[ParamKey.OPTION] = play_option
        return self._status(params)

    def add_to_playlist(self, source: str) -> Status:
        """Enqueue ``source`` without starting playback."""

        return self._status(self._command(Command.IN_ENQUEUE, input=source))

    def play_last_active_playlist_item(self) -> Status:
        return self._status(self._command(Command.PLAY))

    def play_playlist_item(self, item_id: int) -> Status:
        return self._status(self._command(Command.PLAY, id=format_int(item_id)))

    def pause_with_last_active_playlist_item(self) -> Status:
        """Toggle pause.

        When stopped, plays the current item, or the first playlist item if
        there is no current one.
        """
        return self._status(self._command(Command.PAUSE))

    def pause_playlist(self, item_id: int) -> Status:
        """Toggle pause; when stopped, plays the item with ``item_id``."""

        return self._status(self._command(Command.PAUSE, id=format_int(item_id)))

    def force_resume_playlist(self) -> Status:
        """Resume playback if paused, otherwise do nothing."""

        return self._status(self._command(Command.FORCE_RESUME))

    def force_pause_playlist(self) -> Status:
        """Pause playback if not paused, otherwise do nothing."""

        return self._status(self._command(Command.FORCE_PAUSE))

    def stop_playlist(self) -> Status:
        return self._status(self._command(Command.STOP))

    def play_next_in_playlist(self) -> Status:
        return self._status(self._command(Command.NEXT))

    def play_previous_in_playlist(self) -> Status:
        return self._status(self._command(Command.PREVIOUS))

    def delete_from_playlist(self, item_id: int) -> Status:
        return self._status(self._command(Command.DELETE, id=format_int(item_id)))

    def sort_playlist(self, order_id: int, mode: int) -> Status:
        """Sort the playlist.

        Args:
            order_id: ``0`` for normal order, ``1`` for reverse order.
            mode: Sort key. A non-exhaustive list: 0 id, 1 name, 3 author,
                5 random, 7 track number.

        Raises:
            InvalidSortMode: If ``order_id`` is neither 0 nor 1.
        """
        with self._validating("sort_playlist"):
            order = validate_sort_order(order_id)

        return self._status(
            self._command(Command.SORT, id=format_int(order), val=format_int(mode))
        )

    def toggle_playlist_random(self) -> Status:
        return self._status(self._command(Command.RANDOM))

    def toggle_playlist_loop(self) -> Status:
        return self._status(self._command(Command.LOOP))

    def toggle_playlist_repeat(self) -> Status:
        return self._status(self._command(Command.REPEAT))

    def enable_service_discovery_module(self, module: str) -> Status:
        """Enable a service discovery module (e.g. ``sap``, ``shoutcast``, ``podcast``)."""

        return self._status(self._command(Command.SERVICE_DISCOVERY, val=module))

    # Playback -----------------------------------------------------------------

    def toggle_fullscreen(self) -> Status:
        return self._status(self._command(Command.FULLSCREEN))

    def set_volume(self, value: str) -> Status:
        """Set the volume; accepts ``+<int>``, ``-<int>``, ``<int>`` or ``<int>%``."""

        with self._validating("set_volume"):
            volume = validate_volume(value)

        return self._status(self._command(Command.VOLUME, val=volume))

    def seek_to_value(self, value: str) -> Status:
        """Seek playback.

        Accepted forms are ``[+-][<int>H:][<int>M:][<int>[S]]`` and
        ``[+-]<int>[%]``. For example ``1000`` seeks to the 1000th second,
        ``+1H:2M`` seeks 1 hour and 2 minutes forward and ``-10%`` seeks 10%
        back.
        """
        with self._validating("seek_to_value"):
            seek = validate_seek(value)

        return self._status(self._command(Command.SEEK, val=seek))

    def add_subtitle(self, subtitle_uri: str) -> Status:
        return self._status(self._command(Command.ADD_SUBTITLE, val=subtitle_uri))

    def set_playback_rate(self, rate: float) -> Status:
        """Set the playback rate; must be > 0."""

        with self._validating("set_playback_rate"):
            valid_rate = validate_playback_rate(rate)

        return self._status(self._command(Command.RATE, val=format_float(valid_rate)))

    def set_aspect_ratio(self, ratio: str) -> Status:
        """Set the aspect ratio.

        VLC recognises 1:1, 4:3, 5:4, 16:9, 16:10, 221:100, 235:100 and
        239:100; anything else resets the default.
        """
        return self._status(self._command(Command.ASPECT_RATIO, val=ratio))

    def set_audio_delay(self, delay: float) -> Status:
        """Set the audio delay in seconds."""

        return self._status(self._command(Command.AUDIO_DELAY, val=format_float(delay)))

    def set_subtitle_delay(self, delay: float) -> Status:
        """Set the subtitle delay in seconds."""

        return self._status(self._command(Command.SUBTITLE_DELAY, val=format_float(delay)))

    # Equalizer ----------------------------------------------------------------

    def set_preamp(self, gain: int) -> Status:
        """Set the preamp gain in dB, within ``[-20, 20]``."""

        with self._validating("set_preamp"):
            valid_gain = validate_gain(gain)

        return self._status(self._command(Command.PREAMP, val=format_int(valid_gain)))

    def set_eq(self, band: int, gain: int) -> Status:
        """Set the gain in dB, within ``[-20, 20]``, of a single band.

        Bands: 0: 60 Hz, 1: 170 Hz, 2: 310 Hz, 3: 600 Hz, 4: 1 kHz,
        5: 3 kHz, 6: 6 kHz, 7: 12 kHz, 8: 14 kHz, 9: 16 kHz.
        """
        with self._validating("set_eq"):
            valid_gain = validate_gain(gain)

        return self._status(
            self._command(Command.EQUALIZER, band=format_int(band), val=format_int(valid_gain))
        )

    def enable_eq(self, enabled: bool) -> Status:
        return self._status(self._command(Command.ENABLE_EQ, val="1" if enabled else "0"))

    def set_eq_preset(self, preset_id: int) -> Status:
        return self._status(self._command(Command.SET_PRESET, id=format_int(preset_id)))

    # Tracks -------------------------------------------------------------------

    def select_title(self, title_id: int) -> Status:
        return self._status(self._command(Command.TITLE, val=format_int(title_id)))

    def select_chapter(self, chapter_id: int) -> Status:
        return self._status(self._command(Command.CHAPTER, val=format_int(chapter_id)))

    def select_audio_track(self, track_id: int) -> Status:
        """Select an audio track by its stream number."""

        return self._status(self._command(Command.AUDIO_TRACK, val=format_int(track_id)))

    def select_video_track(self, track_id: int) -> Status:
        """Select a video track by its stream number."""

        return self._status(self._command(Command.VIDEO_TRACK, val=format_int(track_id)))

    def select_subtitle_track(self, track_id: int) -> Status:
        """Select a subtitle track by its stream number."""

        return self._status(self._command(Command.SUBTITLE_TRACK, val=format_int(track_id)))

    # Playlist / browse --------------------------------------------------------

    def get_playlist(self) -> Playlist:
        """Fetch the playlist tree."""

        return self._execute(Endpoint.PLAYLIST, None, lambda raw: decode_json(raw, Playlist))

    def browse_directory(self, directory_path: str) -> Browse:
        """List ``directory_path`` on the VLC host.

        VLC deprecated the ``dir`` parameter; prefer ``browse_uri``.
        """
        return self._browse({ParamKey.DIR: directory_path})

    def browse_uri(self, folder_uri: str) -> Browse:
        """List the folder at ``folder_uri`` (``file://...``)."""

        return self._browse({ParamKey.URI: folder_uri})

    # VLM ----------------------------------------------------------------------

    def get_vlm_elements(self) -> VLMResult:
        """Fetch the declared VLM broadcasts, vods and schedules."""

        return self._vlm(Endpoint.VLM)

    def run_vlm_command(self, command: str) -> VLMResult:
        """Run a VLM command line, e.g. ``"new ch1 broadcast enabled"``.

        A command VLC rejects is reported through ``VLMResult.error``.
        """
        return self._vlm(Endpoint.VLM_COMMAND, {ParamKey.COMMAND: quote_plus(command)})


def create_client(
    base_url: str,
    username: str = "",
    password: str = "",
    timeout: float | None = None,
) -> VLC:
    """Build a ``VLC`` facade backed by ``HTTPTransport``."""

    transport = HTTPTransport(
        base_url.rstrip("/"),
        RequestAuth(username=username, password=password),
        timeout=timeout,
    )
    return VLC(transport)


def client_from_config(config: Config) -> VLC:
    """Build a ``VLC`` facade from a loaded ``Config``."""

    return create_client(
        config.base_url,
        username=config.username,
        password=config.password or "",
        timeout=config.timeout,
    )


__all__ = ["VLC", "client_from_config", "create_client"]
