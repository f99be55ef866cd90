"""Unit tests for the layout engine."""

import pytest

from packet2drawio.ir import BitRange, LayoutBlock
from packet2drawio.layout import (
    LayoutConfig,
    LayoutIssue,
    calculate_layout,
    calculate_layout_with_warnings,
    layout_range,
)


class TestLayoutRange:
    """Geometry of single ranges."""

    @pytest.mark.unit
    def test_first_row(self):
        """0-15 occupies the left half of row 0."""
        block = layout_range(BitRange(start=0, end=15, label="A"))
        assert block == LayoutBlock(label="A", x=0, y=0, width=320, height=40)

    @pytest.mark.unit
    def test_second_row(self):
        """32-47 starts row 1 at the left edge."""
        block = layout_range(BitRange(start=32, end=47, label="B"))
        assert block == LayoutBlock(label="B", x=0, y=40, width=320, height=40)

    @pytest.mark.unit
    def test_offset_within_row(self):
        """x follows the start bit's position inside its row."""
        block = layout_range(BitRange(start=72, end=75, label="Data Offset"))
        assert (block.x, block.y, block.width) == (160, 80, 80)

    @pytest.mark.unit
    def test_single_bit(self):
        """A one-bit field is one cell wide."""
        block = layout_range(BitRange(start=106, end=106, label="URG"))
        assert (block.x, block.y, block.width) == (200, 120, 20)

    @pytest.mark.unit
    def test_row_span_not_split(self):
        """A range crossing rows is drawn on its start row only."""
        block = layout_range(BitRange(start=16, end=47, label="Wide"))
        assert block == LayoutBlock(label="Wide", x=320, y=0, width=640, height=40)

    @pytest.mark.unit
    def test_custom_config(self):
        """Cell sizes and row width come from the config."""
        config = LayoutConfig(cell_width=10, cell_height=25, row_width_bits=8)
        block = layout_range(BitRange(start=10, end=13, label="N"), config)
        assert block == LayoutBlock(label="N", x=20, y=25, width=40, height=25)


class TestCalculateLayout:
    """Tests for calculate_layout."""

    @pytest.mark.unit
    def test_header_fields(self):
        """Two adjacent byte fields sit side by side on row 0."""
        blocks = calculate_layout(
            [
                BitRange(start=0, end=7, label="Source Port"),
                BitRange(start=8, end=15, label="Dest Port"),
            ]
        )
        assert blocks == [
            LayoutBlock(label="Source Port", x=0, y=0, width=160, height=40),
            LayoutBlock(label="Dest Port", x=160, y=0, width=160, height=40),
        ]

    @pytest.mark.unit
    def test_preserves_order(self, tcp_ranges):
        """One block per range, same order."""
        blocks = calculate_layout(tcp_ranges)
        assert [b.label for b in blocks] == [r.label for r in tcp_ranges]

    @pytest.mark.unit
    def test_deterministic(self, tcp_ranges):
        """Repeated calls return equal results."""
        first = calculate_layout(tcp_ranges)
        calculate_layout([BitRange(start=5, end=9, label="noise")])
        assert calculate_layout(tcp_ranges) == first

    @pytest.mark.unit
    def test_accepts_generator(self, tcp_ranges):
        """Any iterable of ranges is accepted."""
        assert calculate_layout(r for r in tcp_ranges) == calculate_layout(tcp_ranges)

    @pytest.mark.unit
    def test_empty(self):
        """No ranges, no blocks."""
        assert calculate_layout([]) == []

    @pytest.mark.unit
    def test_large_offsets_unbounded(self):
        """Large offsets produce correspondingly large coordinates."""
        block = calculate_layout([BitRange(start=3200, end=3201, label="Far")])[0]
        assert (block.x, block.y) == (0, 4000)


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    @pytest.mark.unit
    def test_defaults(self):
        """Defaults are 20x40 cells and 32-bit rows."""
        config = LayoutConfig()
        assert (config.cell_width, config.cell_height, config.row_width_bits) == (
            20,
            40,
            32,
        )

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kwargs",
        [{"cell_width": 0}, {"cell_height": -5}, {"row_width_bits": 0}],
    )
    def test_rejects_non_positive(self, kwargs):
        """Zero or negative sizes are rejected."""
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)

    @pytest.mark.unit
    def test_from_environment(self, monkeypatch):
        """Cell sizes are read from the environment."""
        monkeypatch.setenv("PACKET2DRAWIO_CELL_WIDTH", "12")
        monkeypatch.setenv("PACKET2DRAWIO_CELL_HEIGHT", "30")
        config = LayoutConfig.from_environment()
        assert config == LayoutConfig(cell_width=12, cell_height=30)

    @pytest.mark.unit
    def test_from_environment_defaults(self, monkeypatch):
        """Unset variables give the default geometry."""
        monkeypatch.delenv("PACKET2DRAWIO_CELL_WIDTH", raising=False)
        monkeypatch.delenv("PACKET2DRAWIO_CELL_HEIGHT", raising=False)
        assert LayoutConfig.from_environment() == LayoutConfig()


class TestLayoutWarnings:
    """Tests for calculate_layout_with_warnings."""

    @pytest.mark.unit
    def test_clean_input_has_no_warnings(self, tcp_ranges):
        """Row-aligned fields produce no warnings."""
        result = calculate_layout_with_warnings(tcp_ranges)
        assert not result.has_warnings
        assert result.blocks == calculate_layout(tcp_ranges)

    @pytest.mark.unit
    def test_row_span_warning(self):
        """Crossing a row boundary is reported but not fixed."""
        ranges = [BitRange(start=16, end=47, label="Wide")]
        result = calculate_layout_with_warnings(ranges)
        assert [w.issue for w in result.warnings] == [LayoutIssue.ROW_SPAN]
        assert result.warnings[0].label == "Wide"
        assert result.blocks[0].width == 640

    @pytest.mark.unit
    def test_full_row_is_not_a_span(self):
        """0-31 ends on the last bit of row 0."""
        result = calculate_layout_with_warnings([BitRange(start=0, end=31, label="W")])
        assert not result.has_warnings

    @pytest.mark.unit
    def test_inverted_warning(self):
        """end < start is reported; geometry is computed verbatim."""
        result = calculate_layout_with_warnings([BitRange(start=9, end=2, label="Odd")])
        assert [w.issue for w in result.warnings] == [LayoutIssue.INVERTED]
        assert result.blocks[0].width == -120
