"""Tests for the conversion pipeline."""

import xml.etree.ElementTree as ET

import pytest

from packet2drawio.convert import (
    ConversionError,
    InputAccessError,
    OutputAccessError,
    convert_file,
    convert_text,
    read_source,
    write_output,
)
from packet2drawio.ir import LayoutBlock
from packet2drawio.layout import LayoutConfig, LayoutIssue

HEADER_SOURCE = '0-7: "Source Port"\n8-15: "Dest Port"\n'


class TestConvertText:
    """Tests for convert_text."""

    @pytest.mark.unit
    def test_end_to_end(self):
        """Two byte fields become two vertices with matching geometry."""
        result = convert_text(HEADER_SOURCE)

        assert result.blocks == [
            LayoutBlock(label="Source Port", x=0, y=0, width=160, height=40),
            LayoutBlock(label="Dest Port", x=160, y=0, width=160, height=40),
        ]
        assert result.provider == "drawio"

        tree = ET.fromstring(result.document.encode("utf-8"))
        cells = list(tree.iter("mxCell"))
        assert [c.get("id") for c in cells] == ["0", "1", "cell_2", "cell_3"]
        geometries = [
            (g.get("x"), g.get("y"), g.get("width"), g.get("height"))
            for g in tree.iter("mxGeometry")
        ]
        assert geometries == [("0", "0", "160", "40"), ("160", "0", "160", "40")]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line", ["0-7: Flags\x0bA", '0-7: "Ctl\x01"', "0-7: Form\x0cfeed"]
    )
    def test_control_characters_give_well_formed_document(self, line):
        """Labels with control characters still produce parseable XML."""
        result = convert_text(line)
        tree = ET.fromstring(result.document.encode("utf-8"))
        assert len(list(tree.iter("mxGeometry"))) == 1

    @pytest.mark.unit
    def test_empty_source(self):
        """No declarations, no document."""
        result = convert_text("packet-beta\ntitle Empty\n")
        assert result.is_empty
        assert result.document is None
        assert result.blocks == []

    @pytest.mark.unit
    def test_config_passed_to_layout(self):
        """Custom grid geometry reaches the blocks."""
        result = convert_text("0-1: A", config=LayoutConfig(cell_width=5))
        assert result.blocks[0].width == 10

    @pytest.mark.unit
    def test_warnings_collected(self):
        """Row-spanning ranges are reported on the result."""
        result = convert_text('0-15: "A"\n16-47: "B"')
        assert [w.issue for w in result.warnings] == [LayoutIssue.ROW_SPAN]
        assert result.document is not None

    @pytest.mark.unit
    def test_unknown_provider(self):
        """Unknown providers raise KeyError."""
        with pytest.raises(KeyError):
            convert_text(HEADER_SOURCE, provider="visio")


class TestFileBoundary:
    """Tests for reading and writing files."""

    @pytest.mark.unit
    def test_read_source(self, tmp_path):
        """UTF-8 text is read verbatim."""
        path = tmp_path / "in.mmd"
        path.write_text("0-3: Größe\n", encoding="utf-8")
        assert read_source(path) == "0-3: Größe\n"

    @pytest.mark.unit
    def test_read_missing_file(self, tmp_path):
        """Missing input raises InputAccessError with the path."""
        path = tmp_path / "missing.mmd"
        with pytest.raises(InputAccessError) as exc_info:
            read_source(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value, ConversionError)

    @pytest.mark.unit
    def test_write_output(self, tmp_path):
        """Documents are written and the path returned."""
        path = tmp_path / "out.drawio"
        assert write_output("<mxfile />", path) == path
        assert path.read_text(encoding="utf-8") == "<mxfile />"

    @pytest.mark.unit
    def test_write_into_missing_directory(self, tmp_path):
        """Unwritable destinations raise OutputAccessError."""
        path = tmp_path / "no" / "such" / "dir" / "out.drawio"
        with pytest.raises(OutputAccessError) as exc_info:
            write_output("<mxfile />", path)
        assert exc_info.value.path == path


class TestConvertFile:
    """Tests for convert_file."""

    @pytest.mark.integration
    def test_writes_document(self, tmp_path):
        """A parsed file produces an output document."""
        source = tmp_path / "tcp.mmd"
        source.write_text(HEADER_SOURCE, encoding="utf-8")
        output = tmp_path / "tcp.drawio"

        result = convert_file(source, output)

        assert result.output_path == output
        assert output.read_text(encoding="utf-8") == result.document

    @pytest.mark.integration
    def test_empty_input_writes_nothing(self, tmp_path):
        """No output file is created when nothing was parsed."""
        source = tmp_path / "empty.mmd"
        source.write_text("packet-beta\n", encoding="utf-8")
        output = tmp_path / "empty.drawio"

        result = convert_file(source, output)

        assert result.is_empty
        assert result.output_path is None
        assert not output.exists()

    @pytest.mark.integration
    def test_missing_input_writes_nothing(self, tmp_path):
        """Input errors propagate before any output is written."""
        output = tmp_path / "out.drawio"
        with pytest.raises(InputAccessError):
            convert_file(tmp_path / "missing.mmd", output)
        assert not output.exists()
