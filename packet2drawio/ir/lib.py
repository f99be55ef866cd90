"""Core IR models for packet layouts.

This module defines the Intermediate Representation (IR) passed between the
pipeline stages: the parser produces `BitRange` records from packet text, the
layout engine turns each one into a pixel-space `LayoutBlock`, and the markup
providers serialize those blocks into a diagram document.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class BitRange(BaseModel):
    """An inclusive span of bit positions carrying a field label.

    Attributes:
        start: First bit of the field (0-based).
        end: Last bit of the field, inclusive.
        label: Human-readable field name.

    Example:
        >>> BitRange(start=0, end=15, label="Source Port").bit_length
        16
    """

    start: Annotated[int, Field(ge=0)] = Field(..., description="First bit offset")
    end: Annotated[int, Field(ge=0)] = Field(
        ..., description="Last bit offset (inclusive)"
    )
    label: str = Field(..., description="Field label")

    model_config = {
        "frozen": True,
    }

    @property
    def bit_length(self) -> int:
        """Number of bits covered by the range."""
        return self.end - self.start + 1


class LayoutBlock(BaseModel):
    """Pixel-space rectangle computed for one bit range.

    Attributes:
        label: Field label carried over from the bit range.
        x: Left edge in pixels.
        y: Top edge in pixels.
        width: Width in pixels.
        height: Height in pixels.
    """

    label: str = Field(..., description="Field label")
    x: int = Field(..., description="Left edge in pixels")
    y: int = Field(..., description="Top edge in pixels")
    width: int = Field(..., description="Width in pixels")
    height: int = Field(..., description="Height in pixels")

    model_config = {
        "frozen": True,
    }


__all__ = ["BitRange", "LayoutBlock"]
