"""Layout engine: bit ranges to pixel geometry."""

from packet2drawio.layout.lib import (
    CELL_HEIGHT,
    CELL_WIDTH,
    ROW_WIDTH_BITS,
    LayoutConfig,
    LayoutIssue,
    LayoutResult,
    LayoutWarning,
    calculate_layout,
    calculate_layout_with_warnings,
    check_range,
    layout_range,
)

__all__ = [
    # Constants
    "CELL_WIDTH",
    "CELL_HEIGHT",
    "ROW_WIDTH_BITS",
    # Types
    "LayoutConfig",
    "LayoutIssue",
    "LayoutResult",
    "LayoutWarning",
    # Functions
    "calculate_layout",
    "calculate_layout_with_warnings",
    "check_range",
    "layout_range",
]
