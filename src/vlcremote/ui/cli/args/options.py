"""Command line argument options."""

from dataclasses import dataclass, field
from typing import Any, final


@final
@dataclass(slots=True)
class ConnectionOverrides:
    """Connection settings given on the command line (``None`` when absent)."""

    base_url: str | None = None
    username: str | None = None
    password: str | None = None
    timeout: float | None = None


@final
@dataclass(slots=True)
class CLIArgs:
    """Parsed command line for a single subcommand invocation."""

    command: str
    connection: ConnectionOverrides
    output_json: bool = False
    verbose: bool = False
    quiet: bool = False
    # Subcommand specific values, keyed by argparse destination
    values: dict[str, Any] = field(default_factory=dict)


__all__ = ["CLIArgs", "ConnectionOverrides"]
