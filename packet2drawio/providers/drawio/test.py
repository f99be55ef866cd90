"""Unit tests for the draw.io provider."""

import xml.etree.ElementTree as ET

import pytest

from packet2drawio.ir import LayoutBlock
from packet2drawio.providers.drawio import BLOCK_STYLE, DrawioProvider, MxCell


@pytest.fixture
def provider():
    """Create a DrawioProvider instance."""
    return DrawioProvider()


@pytest.fixture
def blocks():
    """Two header fields on the first row."""
    return [
        LayoutBlock(label="Source Port", x=0, y=0, width=160, height=40),
        LayoutBlock(label="Dest Port", x=160, y=0, width=160, height=40),
    ]


def _parse(document: str) -> ET.Element:
    return ET.fromstring(document.encode("utf-8"))


def _vertices(tree: ET.Element) -> list[ET.Element]:
    return [cell for cell in tree.iter("mxCell") if cell.get("vertex") == "1"]


class TestDrawioProvider:
    """Tests for DrawioProvider."""

    @pytest.mark.unit
    def test_provider_name(self, provider):
        """Provider has correct name."""
        assert provider.name == "drawio"

    @pytest.mark.unit
    def test_file_extension(self, provider):
        """Provider has correct file extension."""
        assert provider.file_extension == ".drawio"

    @pytest.mark.unit
    def test_declaration(self, provider, blocks):
        """Document starts with an XML declaration."""
        result = provider.transpile(blocks)
        assert result.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<mxfile')

    @pytest.mark.unit
    def test_envelope(self, provider, blocks):
        """Cells sit under mxfile/diagram/mxGraphModel/root."""
        tree = _parse(provider.transpile(blocks))
        assert tree.tag == "mxfile"
        assert tree.attrib == {"host": "Electron", "type": "device"}

        diagram = tree.find("diagram")
        assert diagram.attrib == {"name": "Page-1", "id": "diagram_1"}

        model = diagram.find("mxGraphModel")
        assert model.get("gridSize") == "10"
        assert model.get("pageWidth") == "850"
        assert model.get("pageHeight") == "1100"
        assert model.find("root") is not None

    @pytest.mark.unit
    def test_boundary_cells(self, provider, blocks):
        """Root and layer cells come first."""
        root = _parse(provider.transpile(blocks)).find("diagram/mxGraphModel/root")
        first, second = list(root)[:2]
        assert first.attrib == {"id": "0"}
        assert second.attrib == {"id": "1", "parent": "0"}

    @pytest.mark.unit
    def test_vertex_cells(self, provider, blocks):
        """Each block becomes a vertex on layer 1 with its geometry."""
        cells = _vertices(_parse(provider.transpile(blocks)))
        assert [c.get("id") for c in cells] == ["cell_2", "cell_3"]
        assert [c.get("value") for c in cells] == ["Source Port", "Dest Port"]

        for cell in cells:
            assert cell.get("parent") == "1"
            assert cell.get("style") == BLOCK_STYLE

        geometry = cells[1].find("mxGeometry")
        assert geometry.attrib == {
            "x": "160",
            "y": "0",
            "width": "160",
            "height": "40",
            "as": "geometry",
        }

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_node_count(self, provider, count):
        """N blocks give N vertices plus the two boundary cells."""
        blocks = [
            LayoutBlock(label=f"F{i}", x=i * 20, y=0, width=20, height=40)
            for i in range(count)
        ]
        tree = _parse(provider.transpile(blocks))
        all_cells = list(tree.iter("mxCell"))
        assert len(all_cells) == count + 2
        assert len({c.get("id") for c in all_cells}) == count + 2
        assert len(_vertices(tree)) == count

    @pytest.mark.unit
    def test_label_escaping(self, provider):
        """Markup characters in labels round-trip through the XML."""
        label = 'Flags <A&B> "quoted"'
        blocks = [LayoutBlock(label=label, x=0, y=0, width=20, height=40)]
        result = provider.transpile(blocks)
        assert "&lt;A&amp;B&gt;" in result
        assert _vertices(_parse(result))[0].get("value") == label

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "label,expected",
        [
            ("Flags\x0bA", "FlagsA"),
            ("Ctl\x01", "Ctl"),
            ("Form\x0cfeed", "Formfeed"),
            ("Nul\x00\ufffe\uffff", "Nul"),
        ],
    )
    def test_control_characters_dropped(self, provider, label, expected):
        """Characters XML 1.0 cannot carry are removed from labels."""
        blocks = [LayoutBlock(label=label, x=0, y=0, width=20, height=40)]
        tree = _parse(provider.transpile(blocks))
        assert _vertices(tree)[0].get("value") == expected

    @pytest.mark.unit
    def test_tab_kept(self, provider):
        """Tab is a legal XML character and survives."""
        blocks = [LayoutBlock(label="A\tB", x=0, y=0, width=20, height=40)]
        tree = _parse(provider.transpile(blocks))
        assert _vertices(tree)[0].get("value") == "A\tB"

    @pytest.mark.unit
    def test_indented(self, provider, blocks):
        """Output is pretty-printed with two-space indentation."""
        lines = provider.transpile(blocks).splitlines()
        assert lines[2] == '  <diagram name="Page-1" id="diagram_1">'
        assert any(line.startswith("          <mxGeometry ") for line in lines)

    @pytest.mark.unit
    def test_deterministic(self, provider, blocks):
        """Same blocks, same document."""
        assert provider.transpile(blocks) == provider.transpile(list(blocks))


class TestBuildCells:
    """Tests for the flat cell list."""

    @pytest.mark.unit
    def test_parent_links(self, provider, blocks):
        """Vertices link to the layer, the layer to the root."""
        cells = provider.build_cells(blocks)
        assert cells[0] == MxCell(id="0")
        assert cells[1] == MxCell(id="1", parent="0")
        assert all(cell.parent == "1" for cell in cells[2:])

    @pytest.mark.unit
    def test_boundary_cells_have_no_geometry(self, provider, blocks):
        """Only vertices carry geometry."""
        cells = provider.build_cells(blocks)
        assert [c.geometry is None for c in cells] == [True, True, False, False]

    @pytest.mark.unit
    def test_cell_attribute_order(self, provider, blocks):
        """Vertex attributes serialize as id, value, style, parent, vertex."""
        cell = provider.build_cells(blocks)[2]
        assert list(cell.attributes()) == ["id", "value", "style", "parent", "vertex"]
