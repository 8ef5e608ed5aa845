"""Command line interface for vlcremote."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from vlcremote.config.config import Config
from vlcremote.domain.errors import ValidationError, VLCError
from vlcremote.platform.logging import logger
from vlcremote.platform.vlc import client_from_config
from vlcremote.ui.cli.args import ArgumentParser
from vlcremote.ui.cli.args.options import CLIArgs
from vlcremote.ui.cli.commands import CommandExecutor
from vlcremote.ui.cli.display import render_result

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_USAGE: int = 2
EXIT_INTERRUPTED: int = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def resolve_config(args: CLIArgs) -> Config:
        """Merge the loaded configuration with command line overrides."""

        overrides = args.connection
        return Config.load().with_overrides(
            base_url=overrides.base_url,
            username=overrides.username,
            password=overrides.password,
            timeout=overrides.timeout,
        )

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        console: Console | None = None,
    ) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            console: Console used for results (for testing).

        Returns:
            int: Process exit code.
        """
        output = console or Console()
        try:
            args = ArgumentParser.process_args(args_list)
            config = CommandProcessor.resolve_config(args)
            executor = CommandExecutor(client_from_config(config))
            result = executor.execute(args)
            if not args.quiet:
                render_result(output, result, as_json=args.output_json)
            return EXIT_OK

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except ValidationError as e:
            logger.error("Invalid argument: %s", e)
            return EXIT_USAGE
        except VLCError as e:
            logger.error("Request failed: %s", e)
            return EXIT_FAILURE
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return EXIT_FAILURE


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). argparse itself may still
        raise ``SystemExit`` for malformed command lines.
    """
    return CommandProcessor.process_command()
