"""Common utilities for the publishing workflow."""

from .logger import setup_logger, get_logger
from .config import load_config, load_typed_config, PublishingConfig

__all__ = [
    "get_logger",
    "load_config",
    "load_typed_config",
    "PublishingConfig",
    "setup_logger",
]
