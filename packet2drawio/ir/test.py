"""Tests for IR models."""

import pytest
from pydantic import ValidationError

from packet2drawio.ir import BitRange, LayoutBlock


class TestBitRange:
    """Tests for BitRange model."""

    @pytest.mark.unit
    def test_bit_length(self):
        """Length counts both endpoints."""
        assert BitRange(start=0, end=15, label="A").bit_length == 16
        assert BitRange(start=7, end=7, label="Flag").bit_length == 1

    @pytest.mark.unit
    def test_rejects_negative_offsets(self):
        """Offsets are non-negative integers."""
        with pytest.raises(ValidationError):
            BitRange(start=-1, end=3, label="bad")

    @pytest.mark.unit
    def test_inverted_range_allowed(self):
        """end < start is representable; it is reported later by the layout."""
        rng = BitRange(start=8, end=3, label="Backwards")
        assert rng.bit_length == -4

    @pytest.mark.unit
    def test_frozen(self):
        """Ranges are immutable once parsed."""
        rng = BitRange(start=0, end=3, label="Version")
        with pytest.raises(ValidationError):
            rng.start = 1


class TestLayoutBlock:
    """Tests for LayoutBlock model."""

    @pytest.mark.unit
    def test_fields(self):
        """Block keeps geometry as integers."""
        block = LayoutBlock(label="A", x=0, y=40, width=320, height=40)
        assert block.model_dump() == {
            "label": "A",
            "x": 0,
            "y": 40,
            "width": 320,
            "height": 40,
        }

    @pytest.mark.unit
    def test_equality(self):
        """Blocks with the same values compare equal."""
        a = LayoutBlock(label="A", x=0, y=0, width=20, height=40)
        b = LayoutBlock(label="A", x=0, y=0, width=20, height=40)
        assert a == b
