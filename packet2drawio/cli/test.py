"""Tests for the command line interface."""

import logging

import pytest

from packet2drawio.cli import build_parser, main


@pytest.fixture
def source_file(tmp_path, tcp_source):
    """A packet file on disk."""
    path = tmp_path / "tcp.mmd"
    path.write_text(tcp_source, encoding="utf-8")
    return path


class TestBuildParser:
    """Tests for argument parsing."""

    @pytest.mark.unit
    def test_defaults(self):
        """Output defaults to None so the environment can supply it."""
        args = build_parser().parse_args(["in.mmd"])
        assert str(args.input) == "in.mmd"
        assert args.output is None
        assert args.verbose is False

    @pytest.mark.unit
    def test_output_flag(self):
        """-o and --output set the destination."""
        assert str(build_parser().parse_args(["a", "-o", "b.drawio"]).output) == (
            "b.drawio"
        )
        assert str(build_parser().parse_args(["a", "--output", "c"]).output) == "c"

    @pytest.mark.unit
    def test_input_required(self):
        """A missing input path is a usage error unless listing variables."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    @pytest.mark.unit
    def test_list_env_flag(self):
        """--list-env takes an optional category."""
        assert build_parser().parse_args(["--list-env"]).list_env == "all"
        assert build_parser().parse_args(["--list-env", "layout"]).list_env == (
            "layout"
        )
        assert build_parser().parse_args(["in.mmd"]).list_env is None


class TestListEnv:
    """Tests for --list-env."""

    @pytest.mark.unit
    def test_lists_all_variables(self, capsys, monkeypatch):
        """Every variable is printed with its current value."""
        monkeypatch.setenv("PACKET2DRAWIO_CELL_WIDTH", "12")

        assert main(["--list-env"]) == 0

        out = capsys.readouterr().out
        assert "PACKET2DRAWIO_CELL_WIDTH=12" in out
        assert "PACKET2DRAWIO_CELL_HEIGHT=" in out
        assert "PACKET2DRAWIO_OUTPUT=" in out
        assert "PACKET2DRAWIO_LOG_LEVEL=" in out
        assert "(default: 20)" in out

    @pytest.mark.unit
    def test_category_filter(self, capsys):
        """A category restricts the listing."""
        assert main(["--list-env", "output"]) == 0

        out = capsys.readouterr().out
        assert "PACKET2DRAWIO_OUTPUT=" in out
        assert "PACKET2DRAWIO_CELL_WIDTH" not in out

    @pytest.mark.unit
    def test_unknown_category(self, capsys, caplog):
        """Unknown categories are reported and exit 1."""
        assert main(["--list-env", "nope"]) == 1
        assert capsys.readouterr().out == ""
        assert "Unknown category: nope" in caplog.text


class TestMain:
    """Tests for the CLI entry point."""

    @pytest.mark.integration
    def test_success(self, source_file, tmp_path, caplog):
        """A valid file is converted and the path reported."""
        caplog.set_level(logging.INFO)
        output = tmp_path / "tcp.drawio"

        assert main([str(source_file), "-o", str(output)]) == 0

        assert output.read_text(encoding="utf-8").startswith("<?xml")
        assert f"Processing {source_file}..." in caplog.text
        assert f"Success! Saved to {output}" in caplog.text
        assert "https://app.diagrams.net/" in caplog.text

    @pytest.mark.integration
    def test_default_output_path(self, source_file, tmp_path, monkeypatch):
        """Without -o the document lands in output.drawio."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PACKET2DRAWIO_OUTPUT", raising=False)

        assert main([str(source_file)]) == 0
        assert (tmp_path / "output.drawio").exists()

    @pytest.mark.integration
    def test_output_path_from_environment(self, source_file, tmp_path, monkeypatch):
        """PACKET2DRAWIO_OUTPUT replaces the default destination."""
        target = tmp_path / "from-env.drawio"
        monkeypatch.setenv("PACKET2DRAWIO_OUTPUT", str(target))

        assert main([str(source_file)]) == 0
        assert target.exists()

    @pytest.mark.integration
    def test_empty_input_warns(self, tmp_path, caplog):
        """No fields: warning, exit 0, no file."""
        caplog.set_level(logging.INFO)
        source = tmp_path / "empty.mmd"
        source.write_text("packet-beta\ntitle Nothing\n", encoding="utf-8")
        output = tmp_path / "empty.drawio"

        assert main([str(source), "-o", str(output)]) == 0

        assert not output.exists()
        assert "No packet blocks found" in caplog.text

    @pytest.mark.integration
    def test_missing_input(self, tmp_path, caplog):
        """Unreadable input is reported and exits 1."""
        output = tmp_path / "out.drawio"

        assert main([str(tmp_path / "missing.mmd"), "-o", str(output)]) == 1

        assert not output.exists()
        assert "Error: Cannot read" in caplog.text

    @pytest.mark.integration
    def test_unwritable_output(self, source_file, tmp_path, caplog):
        """Unwritable output is reported and exits 1."""
        output = tmp_path / "missing-dir" / "out.drawio"

        assert main([str(source_file), "-o", str(output)]) == 1
        assert "Error: Cannot write" in caplog.text

    @pytest.mark.integration
    def test_row_span_reported(self, tmp_path, caplog):
        """Layout warnings are surfaced without failing."""
        source = tmp_path / "wide.mmd"
        source.write_text('16-47: "Wide"\n', encoding="utf-8")
        output = tmp_path / "wide.drawio"

        assert main([str(source), "-o", str(output)]) == 0
        assert output.exists()
        assert "crosses a 32-bit row boundary" in caplog.text

    @pytest.mark.integration
    def test_invalid_cell_size(self, source_file, tmp_path, monkeypatch, caplog):
        """A non-positive cell size from the environment is an error."""
        monkeypatch.setenv("PACKET2DRAWIO_CELL_WIDTH", "0")
        output = tmp_path / "out.drawio"

        assert main([str(source_file), "-o", str(output)]) == 1
        assert not output.exists()
        assert "Cell size must be positive" in caplog.text
