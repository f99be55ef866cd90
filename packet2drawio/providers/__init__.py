"""Markup provider abstraction and registry."""

from packet2drawio.providers.lib import (
    LayoutProvider,
    get_provider,
    list_providers,
    register_provider,
)

__all__ = [
    "LayoutProvider",
    "get_provider",
    "list_providers",
    "register_provider",
]
