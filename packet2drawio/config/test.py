"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_output_path,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("PACKET2DRAWIO_CELL_WIDTH", raising=False)
        assert get_environment(EnvVar.CELL_WIDTH) == 20

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("PACKET2DRAWIO_CELL_WIDTH", "99")
        assert get_environment(EnvVar.CELL_WIDTH, override=5) == 5

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("PACKET2DRAWIO_CELL_HEIGHT", "64")
        result = get_environment(EnvVar.CELL_HEIGHT)
        assert result == 64
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("PACKET2DRAWIO_CELL_HEIGHT", "tall")
        assert get_environment(EnvVar.CELL_HEIGHT) == 40

    @pytest.mark.unit
    def test_blank_value_returns_default(self, monkeypatch):
        """An empty variable counts as unset."""
        monkeypatch.setenv("PACKET2DRAWIO_LOG_LEVEL", "  ")
        assert get_environment(EnvVar.LOG_LEVEL) == "INFO"

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch):
        """Path variables are converted to Path objects."""
        monkeypatch.setenv("PACKET2DRAWIO_OUTPUT", "diagrams/tcp.drawio")
        result = get_environment(EnvVar.OUTPUT_PATH)
        assert result == Path("diagrams/tcp.drawio")

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("PACKET2DRAWIO_LOG_LEVEL", "debug")
        assert get_environment(EnvVar.LOG_LEVEL) == "debug"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.CELL_WIDTH)
        assert isinstance(info, EnvConfig)
        assert info.name == "PACKET2DRAWIO_CELL_WIDTH"
        assert info.default == 20
        assert info.var_type is int
        assert info.category == "layout"

    @pytest.mark.unit
    def test_all_variables_prefixed(self):
        """Every variable lives under the project prefix."""
        for var in EnvVar:
            assert var.value.name.startswith("PACKET2DRAWIO_")
            assert var.value.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_list_all(self):
        """None returns every variable."""
        assert list_environment_variables() == list(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Category filter keeps only matching variables."""
        layout_vars = list_environment_variables("layout")
        assert set(layout_vars) == {EnvVar.CELL_WIDTH, EnvVar.CELL_HEIGHT}

    @pytest.mark.unit
    def test_unknown_category_empty(self):
        """Unknown category yields nothing."""
        assert list_environment_variables("nope") == []


class TestGetOutputPath:
    """Tests for output path resolution."""

    @pytest.mark.unit
    def test_default(self, monkeypatch):
        """Falls back to output.drawio."""
        monkeypatch.delenv("PACKET2DRAWIO_OUTPUT", raising=False)
        assert get_output_path() == Path("output.drawio")

    @pytest.mark.unit
    def test_override(self, monkeypatch):
        """Explicit override wins over the environment."""
        monkeypatch.setenv("PACKET2DRAWIO_OUTPUT", "env.drawio")
        assert get_output_path("cli.drawio") == Path("cli.drawio")
