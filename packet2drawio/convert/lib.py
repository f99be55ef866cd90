"""Conversion pipeline: packet text to diagram document.

Chains the parser, layout engine and a markup provider, and handles the file
boundary on either side. Conversion either produces a complete document or
nothing; no partial output is ever written.
"""

from dataclasses import dataclass, field
from pathlib import Path

from packet2drawio.core.log import get_logger
from packet2drawio.ir import BitRange, LayoutBlock
from packet2drawio.layout import (
    LayoutConfig,
    LayoutWarning,
    calculate_layout_with_warnings,
)
from packet2drawio.parser import parse_packet
from packet2drawio.providers import get_provider

logger = get_logger(__name__)


class ConversionError(Exception):
    """Error during conversion."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class InputAccessError(ConversionError):
    """Source text could not be read."""


class OutputAccessError(ConversionError):
    """Generated document could not be written."""


@dataclass
class ConversionResult:
    """Outcome of one conversion.

    Attributes:
        ranges: Parsed bit ranges.
        blocks: Computed layout blocks.
        document: Generated document, None when nothing was parsed.
        warnings: Layout warnings.
        provider: Name of the provider used.
        output_path: Where the document was written, if it was.
    """

    ranges: list[BitRange]
    blocks: list[LayoutBlock]
    document: str | None
    warnings: list[LayoutWarning] = field(default_factory=list)
    provider: str = ""
    output_path: Path | None = None

    @property
    def is_empty(self) -> bool:
        """True when the source contained no field declarations."""
        return not self.ranges


def convert_text(
    source: str,
    config: LayoutConfig | None = None,
    provider: str = "drawio",
) -> ConversionResult:
    """Convert packet source text into a diagram document.

    Args:
        source: Packet text.
        config: Grid geometry, defaults to LayoutConfig().
        provider: Markup provider name.

    Returns:
        ConversionResult. ``document`` is None when no ranges were parsed.
    """
    ranges = parse_packet(source)
    if not ranges:
        return ConversionResult(ranges=[], blocks=[], document=None, provider=provider)

    layout = calculate_layout_with_warnings(ranges, config)
    markup = get_provider(provider)
    return ConversionResult(
        ranges=ranges,
        blocks=layout.blocks,
        document=markup.transpile(layout.blocks),
        warnings=layout.warnings,
        provider=markup.name,
    )


def read_source(path: Path | str) -> str:
    """Read UTF-8 source text.

    Raises:
        InputAccessError: If the file is missing or unreadable.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputAccessError(f"Cannot read {path}: {e}", path=path) from e


def write_output(text: str, path: Path | str) -> Path:
    """Write a document as UTF-8.

    Returns:
        The path written.

    Raises:
        OutputAccessError: If the file cannot be written.
    """
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputAccessError(f"Cannot write {path}: {e}", path=path) from e
    return path


def convert_file(
    input_path: Path | str,
    output_path: Path | str,
    config: LayoutConfig | None = None,
    provider: str = "drawio",
) -> ConversionResult:
    """Convert a packet file and write the document.

    Nothing is written when the source contains no field declarations.

    Raises:
        InputAccessError: If the source cannot be read.
        OutputAccessError: If the document cannot be written.
    """
    source = read_source(input_path)
    result = convert_text(source, config=config, provider=provider)
    if result.is_empty:
        logger.debug(f"No fields in {input_path}; skipping write")
        return result

    result.output_path = write_output(result.document, output_path)
    logger.debug(f"Wrote {len(result.blocks)} block(s) to {result.output_path}")
    return result


__all__ = [
    "ConversionError",
    "ConversionResult",
    "InputAccessError",
    "OutputAccessError",
    "convert_file",
    "convert_text",
    "read_source",
    "write_output",
]
