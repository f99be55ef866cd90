"""Intermediate Representation (IR) models for packet layouts."""

from packet2drawio.ir.lib import BitRange, LayoutBlock

__all__ = [
    "BitRange",
    "LayoutBlock",
]
