"""Centralized configuration management for packet2drawio.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from packet2drawio.config import EnvVar, get_environment
    >>>
    >>> height = get_environment(EnvVar.CELL_HEIGHT)  # Returns int: 40
    >>> height = get_environment(EnvVar.CELL_HEIGHT, override=60)

Environment Variable Categories:
    layout: Pixel size of one bit and one row
    output: Default destination for generated diagrams
    logging: Console log level
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_output_path,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_output_path",
    # Introspection
    "list_environment_variables",
]
