"""Core utilities shared across packet2drawio."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
