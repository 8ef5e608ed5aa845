"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import Final, final

from vlcremote.config.config import Config
from vlcremote.domain.commands import PlayOption
from vlcremote.platform.logging import DEFAULT_LOG_FILE, setup_logger
from vlcremote.ui.cli.args.options import CLIArgs, ConnectionOverrides

# Subcommands that take no arguments of their own
SIMPLE_COMMANDS: Final[dict[str, str]] = {
    "status": "Show the current player status",
    "resume": "Resume playback if paused",
    "force-pause": "Pause playback if playing",
    "stop": "Stop playback",
    "next": "Play the next playlist item",
    "previous": "Play the previous playlist item",
    "empty": "Empty the playlist",
    "random": "Toggle random playback",
    "loop": "Toggle playlist loop",
    "repeat": "Toggle repeat of the current item",
    "fullscreen": "Toggle fullscreen",
    "playlist": "Show the playlist",
}

TRACK_KINDS: Final[tuple[str, ...]] = ("audio", "video", "subtitle", "title", "chapter")

_GLOBAL_DESTS: Final[frozenset[str]] = frozenset(
    {"command", "url", "username", "password", "timeout", "json", "verbose", "quiet"}
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="vlcremote",
            description="Control a running VLC instance through its HTTP interface.",
            epilog="Use '--' before values starting with '-', e.g. 'vlcremote seek -- -10%'.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument("--url", help="Root URL of the VLC web interface")
        _ = parser.add_argument("--username", help="HTTP Basic user name")
        _ = parser.add_argument("--password", help="VLC Lua HTTP password")
        _ = parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
        _ = parser.add_argument(
            "--json",
            action="store_true",
            help="Print the decoded response as JSON",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Log every request",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        for name, help_text in SIMPLE_COMMANDS.items():
            _ = subparsers.add_parser(name, help=help_text)

        play_parser = subparsers.add_parser("play", help="Play a source, a playlist item, or resume")
        target = play_parser.add_mutually_exclusive_group()
        _ = target.add_argument("source", nargs="?", help="MRL to add and play", metavar="SOURCE")
        _ = target.add_argument("--id", type=int, dest="item_id", help="Playlist item to play")
        _ = play_parser.add_argument(
            "--option",
            choices=[option.value for option in PlayOption],
            help="Play option for SOURCE",
        )

        enqueue_parser = subparsers.add_parser("enqueue", help="Add a source to the playlist")
        _ = enqueue_parser.add_argument("source", metavar="SOURCE")

        pause_parser = subparsers.add_parser("pause", help="Toggle pause")
        _ = pause_parser.add_argument("--id", type=int, dest="item_id", help="Item to play when stopped")

        delete_parser = subparsers.add_parser("delete", help="Delete a playlist item")
        _ = delete_parser.add_argument("item_id", type=int, metavar="ID")

        sort_parser = subparsers.add_parser("sort", help="Sort the playlist")
        _ = sort_parser.add_argument("order", type=int, metavar="ORDER", help="0 normal, 1 reverse")
        _ = sort_parser.add_argument(
            "mode",
            type=int,
            metavar="MODE",
            help="0 id, 1 name, 3 author, 5 random, 7 track number",
        )

        volume_parser = subparsers.add_parser("volume", help="Set the volume (+N, -N, N or N%%)")
        _ = volume_parser.add_argument("value", metavar="VALUE")

        seek_parser = subparsers.add_parser("seek", help="Seek (e.g. 1000, +1H:2M, -10%%)")
        _ = seek_parser.add_argument("value", metavar="VALUE")

        rate_parser = subparsers.add_parser("rate", help="Set the playback rate")
        _ = rate_parser.add_argument("rate", type=float, metavar="RATE")

        preamp_parser = subparsers.add_parser("preamp", help="Set the preamp gain in dB")
        _ = preamp_parser.add_argument("gain", type=int, metavar="GAIN")

        eq_parser = subparsers.add_parser("eq", help="Set the gain of an equalizer band")
        _ = eq_parser.add_argument("band", type=int, metavar="BAND")
        _ = eq_parser.add_argument("gain", type=int, metavar="GAIN")

        equalizer_parser = subparsers.add_parser("equalizer", help="Turn the equalizer on or off")
        _ = equalizer_parser.add_argument("state", choices=("on", "off"))

        preset_parser = subparsers.add_parser("eq-preset", help="Apply an equalizer preset")
        _ = preset_parser.add_argument("preset_id", type=int, metavar="ID")

        delay_parser = subparsers.add_parser("delay", help="Set the audio or subtitle delay in seconds")
        _ = delay_parser.add_argument("stream", choices=("audio", "subtitle"))
        _ = delay_parser.add_argument("seconds", type=float, metavar="SECONDS")

        aspect_parser = subparsers.add_parser("aspect", help="Set the aspect ratio (e.g. 16:9)")
        _ = aspect_parser.add_argument("ratio", metavar="RATIO")

        subtitle_parser = subparsers.add_parser("subtitle", help="Add a subtitle file")
        _ = subtitle_parser.add_argument("subtitle_uri", metavar="URI")

        discover_parser = subparsers.add_parser("discover", help="Enable a service discovery module")
        _ = discover_parser.add_argument("module", metavar="MODULE", help="e.g. sap, shoutcast, podcast")

        track_parser = subparsers.add_parser("track", help="Select a track, title or chapter")
        _ = track_parser.add_argument("kind", choices=TRACK_KINDS)
        _ = track_parser.add_argument("track_id", type=int, metavar="ID")

        browse_parser = subparsers.add_parser("browse", help="List a folder on the VLC host")
        location = browse_parser.add_mutually_exclusive_group(required=True)
        _ = location.add_argument("--uri", help="Folder URI, e.g. file:///home")
        _ = location.add_argument("--dir", dest="directory", help="Folder path (deprecated by VLC)")

        vlm_parser = subparsers.add_parser("vlm", help="List VLM elements or run a VLM command")
        _ = vlm_parser.add_argument("vlm_command", nargs="?", metavar="COMMAND")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argparse rejects the command line.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        # Console only until the config names the log file; load errors must still show.
        _ = setup_logger(console_level=log_level)
        configuration = Config.load()
        _ = setup_logger(
            log_file=configuration.log_file or DEFAULT_LOG_FILE,
            console_level=log_level,
        )

        values = {
            key: value
            for key, value in vars(parsed_args).items()
            if key not in _GLOBAL_DESTS
        }
        return CLIArgs(
            command=parsed_args.command,
            connection=ConnectionOverrides(
                base_url=parsed_args.url,
                username=parsed_args.username,
                password=parsed_args.password,
                timeout=parsed_args.timeout,
            ),
            output_json=bool(parsed_args.json),
            verbose=is_verbose,
            quiet=is_quiet,
            values=values,
        )


__all__ = ["ArgumentParser", "SIMPLE_COMMANDS", "TRACK_KINDS"]
