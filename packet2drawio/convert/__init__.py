"""Conversion pipeline and file boundary."""

from packet2drawio.convert.lib import (
    ConversionError,
    ConversionResult,
    InputAccessError,
    OutputAccessError,
    convert_file,
    convert_text,
    read_source,
    write_output,
)

__all__ = [
    # Errors
    "ConversionError",
    "InputAccessError",
    "OutputAccessError",
    # Results
    "ConversionResult",
    # Pipeline
    "convert_text",
    "convert_file",
    "read_source",
    "write_output",
]
