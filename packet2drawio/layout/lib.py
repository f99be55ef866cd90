"""Layout engine mapping bit ranges onto a fixed-width pixel grid.

Each packet row holds ``ROW_WIDTH_BITS`` bits. A bit is ``CELL_WIDTH`` pixels
wide and a row is ``CELL_HEIGHT`` pixels tall. A range is placed on the row
that contains its first bit; ranges that cross a row boundary are not split
and simply extend past the right edge of that row.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from packet2drawio.config import EnvVar, get_environment
from packet2drawio.core.log import get_logger
from packet2drawio.ir import BitRange, LayoutBlock

logger = get_logger(__name__)

CELL_WIDTH = 20
CELL_HEIGHT = 40
ROW_WIDTH_BITS = 32


@dataclass(frozen=True)
class LayoutConfig:
    """Grid geometry used by the layout engine.

    Attributes:
        cell_width: Pixel width of one bit.
        cell_height: Pixel height of one row.
        row_width_bits: Bits per row.
    """

    cell_width: int = CELL_WIDTH
    cell_height: int = CELL_HEIGHT
    row_width_bits: int = ROW_WIDTH_BITS

    def __post_init__(self):
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError(
                f"Cell size must be positive, got "
                f"{self.cell_width}x{self.cell_height}"
            )
        if self.row_width_bits <= 0:
            raise ValueError(
                f"Row width must be positive, got {self.row_width_bits}"
            )

    @classmethod
    def from_environment(cls) -> "LayoutConfig":
        """Build a config from PACKET2DRAWIO_CELL_WIDTH/HEIGHT."""
        return cls(
            cell_width=get_environment(EnvVar.CELL_WIDTH),
            cell_height=get_environment(EnvVar.CELL_HEIGHT),
        )


class LayoutIssue(str, Enum):
    """Range shapes the grid cannot draw faithfully."""

    ROW_SPAN = "row_span"
    INVERTED = "inverted"


@dataclass
class LayoutWarning:
    """Warning emitted when a range cannot be represented exactly.

    Attributes:
        issue: Kind of problem.
        label: Label of the offending range.
        message: Human-readable explanation.
    """

    issue: LayoutIssue
    label: str
    message: str


@dataclass
class LayoutResult:
    """Blocks computed for a sequence of ranges, plus any warnings."""

    blocks: list[LayoutBlock]
    warnings: list[LayoutWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check if any warnings were emitted."""
        return len(self.warnings) > 0


def layout_range(rng: BitRange, config: LayoutConfig | None = None) -> LayoutBlock:
    """Compute the pixel rectangle for one bit range."""
    config = config or LayoutConfig()
    row, start_bit_in_row = divmod(rng.start, config.row_width_bits)
    return LayoutBlock(
        label=rng.label,
        x=start_bit_in_row * config.cell_width,
        y=row * config.cell_height,
        width=rng.bit_length * config.cell_width,
        height=config.cell_height,
    )


def calculate_layout(
    ranges: Iterable[BitRange], config: LayoutConfig | None = None
) -> list[LayoutBlock]:
    """Lay out bit ranges on the grid, one block per range, in input order.

    Args:
        ranges: Parsed bit ranges.
        config: Grid geometry. Defaults to 20x40 pixel cells, 32 bits per row.

    Returns:
        list[LayoutBlock]: Geometry for each range.
    """
    config = config or LayoutConfig()
    return [layout_range(rng, config) for rng in ranges]


def check_range(
    rng: BitRange, config: LayoutConfig | None = None
) -> list[LayoutWarning]:
    """Report range shapes that the grid draws inexactly."""
    config = config or LayoutConfig()
    warnings: list[LayoutWarning] = []

    if rng.end < rng.start:
        warnings.append(
            LayoutWarning(
                issue=LayoutIssue.INVERTED,
                label=rng.label,
                message=(
                    f"'{rng.label}' ends before it starts "
                    f"({rng.start}-{rng.end}); width is {rng.bit_length} bit(s)"
                ),
            )
        )
    elif rng.start // config.row_width_bits != rng.end // config.row_width_bits:
        warnings.append(
            LayoutWarning(
                issue=LayoutIssue.ROW_SPAN,
                label=rng.label,
                message=(
                    f"'{rng.label}' ({rng.start}-{rng.end}) crosses a "
                    f"{config.row_width_bits}-bit row boundary and is drawn "
                    f"on a single row"
                ),
            )
        )

    return warnings


def calculate_layout_with_warnings(
    ranges: Iterable[BitRange], config: LayoutConfig | None = None
) -> LayoutResult:
    """Lay out bit ranges and collect warnings about inexact shapes.

    The blocks are identical to `calculate_layout`; warnings never alter
    geometry.
    """
    config = config or LayoutConfig()
    ranges = list(ranges)
    result = LayoutResult(blocks=calculate_layout(ranges, config))
    for rng in ranges:
        result.warnings.extend(check_range(rng, config))

    for warning in result.warnings:
        logger.debug(warning.message)
    return result


__all__ = [
    "CELL_HEIGHT",
    "CELL_WIDTH",
    "ROW_WIDTH_BITS",
    "LayoutConfig",
    "LayoutIssue",
    "LayoutResult",
    "LayoutWarning",
    "calculate_layout",
    "calculate_layout_with_warnings",
    "check_range",
    "layout_range",
]
