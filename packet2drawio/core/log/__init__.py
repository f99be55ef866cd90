"""Logging micro API for packet2drawio."""

from .lib import LOG_FORMAT, get_logger, parse_level, setup_logging

__all__ = ["LOG_FORMAT", "get_logger", "parse_level", "setup_logging"]
