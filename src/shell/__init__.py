"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS API client (HTTP)
- Screen (display)
- Configuration loading (files)

Keep this layer thin and simple. All business logic should be in core.
"""

from src.shell.usgs_client import USGSClient, FetchResponse
from src.shell.screen import Screen, TerminalScreen
from src.shell.config_loader import load_config, load_strings

__all__ = [
    "USGSClient",
    "FetchResponse",
    "Screen",
    "TerminalScreen",
    "load_config",
    "load_strings",
]
