"""Parser for packet field declarations.

Reads the field lines of a Mermaid ``packet-beta`` block::

    packet-beta
    title TCP Packet
    0-15: "Source Port"
    16-31: Destination Port

Only lines of the form ``start-end: label`` produce records. Everything else
(the diagram header, titles, comments, blank lines) is skipped without error.
"""

import re

from packet2drawio.core.log import get_logger
from packet2drawio.ir import BitRange

logger = get_logger(__name__)

# Groups: start, end, quoted label, unquoted label
LINE_PATTERN = re.compile(r'^\s*([0-9]+)-([0-9]+):\s*(?:"([^"]*)"|(.+))\s*$')


def parse_line(line: str) -> BitRange | None:
    """Parse a single line into a BitRange.

    Args:
        line: One line of source text, without its newline.

    Returns:
        The parsed BitRange, or None if the line is not a field declaration.
    """
    match = LINE_PATTERN.match(line.rstrip("\r"))
    if match is None:
        return None

    start, end, quoted, unquoted = match.groups()
    return BitRange(
        start=int(start),
        end=int(end),
        label=quoted if quoted is not None else unquoted,
    )


def parse_packet(source: str) -> list[BitRange]:
    """Parse packet source text into bit ranges, in input order.

    Args:
        source: Complete source text.

    Returns:
        One BitRange per matching line. Empty when nothing matched.
    """
    lines = source.split("\n")
    ranges = [rng for rng in map(parse_line, lines) if rng is not None]
    logger.debug(
        f"Parsed {len(ranges)} field(s), skipped {len(lines) - len(ranges)} line(s)"
    )
    return ranges


__all__ = ["LINE_PATTERN", "parse_line", "parse_packet"]
