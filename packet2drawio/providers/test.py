"""Unit tests for the providers module.

Tests for:
- LayoutProvider abstract base class
- Provider registry (register_provider, get_provider, list_providers)
"""

import pytest

from packet2drawio.providers import LayoutProvider, get_provider, list_providers
from packet2drawio.providers.drawio import DrawioProvider


class TestLayoutProviderContract:
    """Tests for LayoutProvider abstract base class contract."""

    @pytest.mark.unit
    def test_layout_provider_is_abstract(self):
        """LayoutProvider cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            LayoutProvider()  # type: ignore

    @pytest.mark.unit
    def test_concrete_provider_requires_transpile(self):
        """Concrete providers must implement transpile method."""

        class IncompleteProvider(LayoutProvider):
            @property
            def name(self) -> str:
                return "incomplete"

            @property
            def file_extension(self) -> str:
                return ".test"

        with pytest.raises(TypeError, match="abstract"):
            IncompleteProvider()


class TestProviderRegistry:
    """Tests for provider lookup."""

    @pytest.mark.unit
    def test_drawio_registered(self):
        """draw.io is available by name."""
        assert "drawio" in list_providers()

    @pytest.mark.unit
    def test_get_provider_returns_instance(self):
        """get_provider returns a fresh provider instance."""
        provider = get_provider("drawio")
        assert isinstance(provider, DrawioProvider)
        assert provider is not get_provider("drawio")

    @pytest.mark.unit
    def test_unknown_provider(self):
        """Unknown names raise KeyError listing what is available."""
        with pytest.raises(KeyError, match="Available: .*drawio"):
            get_provider("visio")
