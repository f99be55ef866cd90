"""draw.io (mxGraph XML) provider."""

from packet2drawio.providers.drawio.lib import (
    BLOCK_STYLE,
    DrawioProvider,
    MxCell,
    MxGeometry,
)

__all__ = [
    "BLOCK_STYLE",
    "DrawioProvider",
    "MxCell",
    "MxGeometry",
]
