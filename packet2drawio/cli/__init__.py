"""Command line interface."""

from packet2drawio.cli.lib import build_parser, cmd_convert, main

__all__ = ["build_parser", "cmd_convert", "main"]
