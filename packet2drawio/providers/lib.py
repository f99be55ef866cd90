"""Provider abstraction for diagram markup generation.

This module defines the abstract base class for markup providers and
provides a registry/factory for accessing them by name.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from packet2drawio.ir import LayoutBlock


class LayoutProvider(ABC):
    """Abstract base class for diagram markup providers.

    Each provider serializes a sequence of LayoutBlocks into the document
    format of a specific diagramming tool.

    Subclasses must implement:
        - name: Provider identifier string
        - file_extension: Output file extension
        - transpile: LayoutBlocks to document text

    Example:
        >>> class MyProvider(LayoutProvider):
        ...     name = "my_format"
        ...     file_extension = ".txt"
        ...     def transpile(self, blocks) -> str:
        ...         return "\\n".join(b.label for b in blocks)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier string."""
        ...

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.drawio')."""
        ...

    @abstractmethod
    def transpile(self, blocks: Sequence[LayoutBlock]) -> str:
        """Serialize layout blocks into a complete document.

        Args:
            blocks: Blocks in draw order.

        Returns:
            str: Document text.
        """
        ...


# Provider registry - populated by provider modules on import
_registry: dict[str, type[LayoutProvider]] = {}


def register_provider(provider_cls: type[LayoutProvider]) -> type[LayoutProvider]:
    """Register a provider class in the registry.

    Uses a temporary instance to retrieve the provider name.

    Args:
        provider_cls: The provider class to register.

    Returns:
        The provider class (for decorator chaining).
    """
    _registry[provider_cls().name] = provider_cls
    return provider_cls


def get_provider(name: str) -> LayoutProvider:
    """Get a provider instance by name.

    Args:
        name: The provider identifier (e.g., "drawio").

    Returns:
        LayoutProvider: An instance of the requested provider.

    Raises:
        KeyError: If no provider with the given name is registered.

    Example:
        >>> provider = get_provider("drawio")
        >>> provider.transpile(blocks)
    """
    if name not in _registry:
        _import_providers()
        if name not in _registry:
            available = ", ".join(_registry.keys()) or "(none)"
            raise KeyError(f"Unknown provider '{name}'. Available: {available}")
    return _registry[name]()


def list_providers() -> list[str]:
    """List all registered provider names.

    Example:
        >>> list_providers()
        ['drawio']
    """
    _import_providers()
    return list(_registry.keys())


def _import_providers() -> None:
    """Import provider modules to trigger registration."""
    import importlib

    for module_name in ("drawio",):
        importlib.import_module(f"packet2drawio.providers.{module_name}")
