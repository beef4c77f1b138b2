"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Event parsing
- Display formatting
- Configuration models and validation

All functions here are deterministic and have no I/O.
"""

from src.core.event import Event, extract_feature_from_json
from src.core.formatter import (
    EventView,
    format_event_view,
    get_date_string,
    get_tsunami_alert_string,
)
from src.core.config import Config, DisplayStrings, validate_config

__all__ = [
    # Event
    "Event",
    "extract_feature_from_json",
    # Formatter
    "EventView",
    "format_event_view",
    "get_date_string",
    "get_tsunami_alert_string",
    # Config
    "Config",
    "DisplayStrings",
    "validate_config",
]
