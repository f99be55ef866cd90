"""Core logging implementation for packet2drawio."""

import logging
import sys
from typing import Optional, Union

__all__ = ["LOG_FORMAT", "get_logger", "parse_level", "setup_logging"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_level(name: str, default: int = logging.INFO) -> int:
    """Map a level name such as "debug" or "WARNING" to its logging constant.

    Unknown names fall back to ``default``.
    """
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: Union[int, str] = logging.INFO,
    stream=sys.stderr,
    verbose: bool = False,
) -> int:
    """Configure console logging for a CLI run.

    Args:
        level: Logging level, as a constant or a name (e.g. from
            PACKET2DRAWIO_LOG_LEVEL).
        stream: Output stream.
        verbose: Force DEBUG regardless of ``level``.

    Returns:
        The level applied.
    """
    if verbose:
        resolved = logging.DEBUG
    elif isinstance(level, str):
        resolved = parse_level(level)
    else:
        resolved = level

    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=stream)
    return resolved


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or "packet2drawio")
