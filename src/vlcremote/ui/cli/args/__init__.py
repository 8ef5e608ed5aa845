"""Argument parsing for the vlcremote CLI."""

from .options import CLIArgs, ConnectionOverrides
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ConnectionOverrides"]
