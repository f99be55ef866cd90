"""packet2drawio: Mermaid packet diagrams to draw.io XML."""

from packet2drawio.convert import (
    ConversionError,
    ConversionResult,
    InputAccessError,
    OutputAccessError,
    convert_file,
    convert_text,
)
from packet2drawio.ir import BitRange, LayoutBlock
from packet2drawio.layout import LayoutConfig, calculate_layout
from packet2drawio.parser import parse_packet
from packet2drawio.providers import LayoutProvider, get_provider, list_providers

__version__ = "0.1.0"

__all__ = [
    # IR
    "BitRange",
    "LayoutBlock",
    # Pipeline stages
    "parse_packet",
    "LayoutConfig",
    "calculate_layout",
    # Providers
    "LayoutProvider",
    "get_provider",
    "list_providers",
    # Conversion
    "convert_text",
    "convert_file",
    "ConversionResult",
    "ConversionError",
    "InputAccessError",
    "OutputAccessError",
]
