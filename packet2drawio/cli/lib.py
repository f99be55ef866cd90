"""Command line interface for packet2drawio.

Usage:
    packet2drawio tcp.mmd
    packet2drawio tcp.mmd --output diagrams/tcp.drawio
    packet2drawio --list-env layout
    python . tcp.mmd -v
"""

import argparse
from pathlib import Path

from dotenv import load_dotenv

from packet2drawio.config import (
    EnvVar,
    get_environment,
    get_environment_info,
    get_output_path,
    list_environment_variables,
)
from packet2drawio.convert import ConversionError, convert_file
from packet2drawio.core.log import get_logger, setup_logging
from packet2drawio.layout import LayoutConfig

logger = get_logger("cli")

DRAWIO_APP_URL = "https://app.diagrams.net/"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="packet2drawio",
        description="Convert Mermaid packet diagrams to draw.io XML",
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the packet description file",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (default: $PACKET2DRAWIO_OUTPUT or output.drawio)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--list-env",
        nargs="?",
        const="all",
        default=None,
        metavar="CATEGORY",
        help="List environment variables (optionally one category) and exit",
    )
    return parser


def format_environment(category: str | None = None) -> str:
    """Render environment variables with their current and default values."""
    lines: list[str] = []
    for var in list_environment_variables(category):
        info = get_environment_info(var)
        lines.append(f"{info.name}={get_environment(var)}")
        lines.append(
            f"    [{info.category}] {info.description} (default: {info.default})"
        )
    return "\n".join(lines)


def cmd_list_env(category: str) -> int:
    """Handle the --list-env option."""
    text = format_environment(None if category == "all" else category)
    if not text:
        logger.error(f"Unknown category: {category}")
        return 1
    print(text)
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle the convert command."""
    output_path = get_output_path(args.output)

    try:
        logger.info(f"Processing {args.input}...")
        result = convert_file(
            args.input,
            output_path,
            config=LayoutConfig.from_environment(),
        )
    except (ConversionError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

    if result.is_empty:
        logger.warning("No packet blocks found. Ensure format is 'start-end: label'")
        return 0

    for warning in result.warnings:
        logger.warning(warning.message)

    logger.info(f"Success! Saved to {result.output_path}")
    logger.info(f"You can now open {result.output_path} in {DRAWIO_APP_URL}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=get_environment(EnvVar.LOG_LEVEL), verbose=args.verbose)

    if args.list_env is not None:
        return cmd_list_env(args.list_env)
    if args.input is None:
        parser.error("the following arguments are required: input")

    return cmd_convert(args)
