"""Common utilities for routeacl."""

from .logger import setup_logger, get_logger
from .config import load_config, load_typed_config, parse_config, RouteAclConfig

__all__ = [
    "RouteAclConfig",
    "get_logger",
    "load_config",
    "load_typed_config",
    "parse_config",
    "setup_logger",
]
