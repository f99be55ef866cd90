"""Centralized environment configuration management for packet2drawio.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from packet2drawio.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> width = get_environment(EnvVar.CELL_WIDTH)  # Returns int
    >>> output = get_environment(EnvVar.OUTPUT_PATH)  # Returns Path
    >>>
    >>> # Override at runtime
    >>> width = get_environment(EnvVar.CELL_WIDTH, override=10)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "PACKET2DRAWIO_CELL_WIDTH").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by packet2drawio.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - layout: Pixel geometry of the diagram grid
        - output: Destination of generated diagrams
        - logging: Console verbosity
    """

    # -------------------------------------------------------------------------
    # Layout Geometry
    # -------------------------------------------------------------------------
    CELL_WIDTH = EnvConfig(
        name="PACKET2DRAWIO_CELL_WIDTH",
        default=20,
        var_type=int,
        description="Width of a single bit in pixels",
        category="layout",
    )
    CELL_HEIGHT = EnvConfig(
        name="PACKET2DRAWIO_CELL_HEIGHT",
        default=40,
        var_type=int,
        description="Height of a 32-bit row in pixels",
        category="layout",
    )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    OUTPUT_PATH = EnvConfig(
        name="PACKET2DRAWIO_OUTPUT",
        default=Path("output.drawio"),
        var_type=Path,
        description="Default output file when --output is not given",
        category="output",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="PACKET2DRAWIO_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Console log level (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None or value.strip() == "":
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is Path:
        return Path(value)

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, or Path).

    Example:
        >>> get_environment(EnvVar.CELL_WIDTH)
        20
        >>> get_environment(EnvVar.CELL_WIDTH, override=10)
        10
    """
    config: EnvConfig = env_var.value

    # Override takes highest priority
    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_output_path(override: Path | str | None = None) -> Path:
    """Get the output file path.

    Resolution: override > PACKET2DRAWIO_OUTPUT > output.drawio
    """
    if override is not None:
        return Path(override)
    return get_environment(EnvVar.OUTPUT_PATH)


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (layout, output, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


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
