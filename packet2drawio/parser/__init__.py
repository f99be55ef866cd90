"""Packet text parser."""

from packet2drawio.parser.lib import LINE_PATTERN, parse_line, parse_packet

__all__ = [
    "LINE_PATTERN",
    "parse_line",
    "parse_packet",
]
