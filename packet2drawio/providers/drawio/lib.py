"""draw.io provider for packet diagrams.

draw.io (diagrams.net) stores diagrams as mxGraph XML. A diagram is a flat
list of ``mxCell`` elements under a single ``root``; nesting between shapes is
expressed through ``parent`` id references rather than element nesting. The
first two cells are required by the editor: ``0`` is the graph root and ``1``
the default layer every shape is placed on.

See: https://www.drawio.com/doc/faq/drawio-file-format

Example output:
    ```xml
    <?xml version="1.0" encoding="UTF-8"?>
    <mxfile host="Electron" type="device">
      <diagram name="Page-1" id="diagram_1">
        <mxGraphModel dx="1422" dy="798" ...>
          <root>
            <mxCell id="0" />
            <mxCell id="1" parent="0" />
            <mxCell id="cell_2" value="Source Port" style="..." parent="1" vertex="1">
              <mxGeometry x="0" y="0" width="320" height="40" as="geometry" />
            </mxCell>
          </root>
        </mxGraphModel>
      </diagram>
    </mxfile>
    ```
"""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Sequence

from packet2drawio.ir import LayoutBlock
from packet2drawio.providers.lib import LayoutProvider, register_provider

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

MXFILE_ATTRIBUTES = {"host": "Electron", "type": "device"}
DIAGRAM_ATTRIBUTES = {"name": "Page-1", "id": "diagram_1"}
GRAPH_MODEL_ATTRIBUTES = {
    "dx": "1422",
    "dy": "798",
    "grid": "1",
    "gridSize": "10",
    "guides": "1",
    "tooltips": "1",
    "connect": "1",
    "arrows": "1",
    "fold": "1",
    "page": "1",
    "pageScale": "1",
    "pageWidth": "850",
    "pageHeight": "1100",
}

BLOCK_STYLE = (
    "rounded=0;whiteSpace=wrap;html=1;"
    "fillColor=#f5f5f5;strokeColor=#666666;fontColor=#333333;"
)

ROOT_CELL_ID = "0"
LAYER_CELL_ID = "1"


@dataclass(frozen=True)
class MxGeometry:
    """Position and size of a vertex."""

    x: int
    y: int
    width: int
    height: int

    def attributes(self) -> dict[str, str]:
        return {
            "x": str(self.x),
            "y": str(self.y),
            "width": str(self.width),
            "height": str(self.height),
            "as": "geometry",
        }


@dataclass(frozen=True)
class MxCell:
    """One mxCell record, linked to its parent by id.

    Attributes:
        id: Unique cell id.
        parent: Id of the parent cell, None for the graph root.
        value: Display text.
        style: draw.io style string.
        vertex: Whether the cell is a shape.
        geometry: Geometry child, for vertices.
    """

    id: str
    parent: str | None = None
    value: str | None = None
    style: str | None = None
    vertex: bool = False
    geometry: MxGeometry | None = None

    def attributes(self) -> dict[str, str]:
        attrs = {"id": self.id}
        if self.value is not None:
            attrs["value"] = INVALID_XML_CHARS.sub("", self.value)
        if self.style is not None:
            attrs["style"] = self.style
        if self.parent is not None:
            attrs["parent"] = self.parent
        if self.vertex:
            attrs["vertex"] = "1"
        return attrs


@register_provider
class DrawioProvider(LayoutProvider):
    """Serializes LayoutBlocks into a draw.io document.

    Each block becomes a rectangle on the default layer, in input order, so
    later blocks are drawn above earlier ones.
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "drawio"

    @property
    def file_extension(self) -> str:
        """draw.io file extension."""
        return ".drawio"

    def build_cells(self, blocks: Sequence[LayoutBlock]) -> list[MxCell]:
        """Build the flat cell list: root, default layer, one vertex per block.

        Args:
            blocks: Blocks in draw order.

        Returns:
            list[MxCell]: Cells in document order.
        """
        cells = [
            MxCell(id=ROOT_CELL_ID),
            MxCell(id=LAYER_CELL_ID, parent=ROOT_CELL_ID),
        ]
        for index, block in enumerate(blocks):
            cells.append(
                MxCell(
                    id=f"cell_{index + 2}",
                    parent=LAYER_CELL_ID,
                    value=block.label,
                    style=BLOCK_STYLE,
                    vertex=True,
                    geometry=MxGeometry(
                        x=block.x, y=block.y, width=block.width, height=block.height
                    ),
                )
            )
        return cells

    def build_document(self, cells: Sequence[MxCell]) -> ET.Element:
        """Wrap cells in the mxfile/diagram/mxGraphModel/root envelope."""
        mxfile = ET.Element("mxfile", MXFILE_ATTRIBUTES)
        diagram = ET.SubElement(mxfile, "diagram", DIAGRAM_ATTRIBUTES)
        model = ET.SubElement(diagram, "mxGraphModel", GRAPH_MODEL_ATTRIBUTES)
        root = ET.SubElement(model, "root")

        for cell in cells:
            element = ET.SubElement(root, "mxCell", cell.attributes())
            if cell.geometry is not None:
                ET.SubElement(element, "mxGeometry", cell.geometry.attributes())

        return mxfile

    def transpile(self, blocks: Sequence[LayoutBlock]) -> str:
        """Transpile layout blocks to an indented draw.io XML document.

        Args:
            blocks: Blocks in draw order.

        Returns:
            str: Complete XML document, declaration included.
        """
        document = self.build_document(self.build_cells(blocks))
        ET.indent(document, space="  ")
        body = ET.tostring(document, encoding="unicode")
        return f"{XML_DECLARATION}\n{body}\n"
