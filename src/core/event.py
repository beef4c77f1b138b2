"""Event data model and parsing - Pure functions.

This module handles parsing the USGS GeoJSON response text into a typed
Event object. All functions are pure; the only side effect is logging.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Immutable earthquake event.

    Attributes:
        title: Human-readable description of the earthquake
        time: When it occurred (milliseconds since epoch)
        tsunami_alert: 0 = no alert, 1 = alert, anything else = unknown
    """
    title: str
    time: int
    tsunami_alert: int


def _is_int(value: Any) -> bool:
    """JSON integers only; booleans are rejected."""
    return isinstance(value, int) and not isinstance(value, bool)


def _is_representable_time(time_ms: int) -> bool:
    """Whether the epoch milliseconds fit in a datetime."""
    try:
        datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return False
    return True


def parse_event(feature: Any) -> Event | None:
    """Parse a single GeoJSON feature into an Event.

    Pure function: all three fields are required, so a missing or
    mistyped field yields None rather than a partial Event.

    Args:
        feature: GeoJSON feature dict from USGS API

    Returns:
        Event object or None if parsing fails
    """
    if not isinstance(feature, dict):
        return None

    props = feature.get("properties")
    if not isinstance(props, dict):
        return None

    title = props.get("title")
    time_ms = props.get("time")
    tsunami = props.get("tsunami")

    if not isinstance(title, str):
        return None
    if not _is_int(time_ms) or not _is_int(tsunami):
        return None
    if not _is_representable_time(time_ms):
        return None

    return Event(title=title, time=time_ms, tsunami_alert=tsunami)


def extract_feature_from_json(earthquake_json: str | None) -> Event | None:
    """Return an Event for the first earthquake in the response text.

    Only the first element of the features array is consulted.
    Never raises; empty or malformed input yields None.

    Args:
        earthquake_json: Raw response body from USGS

    Returns:
        Event for features[0], or None
    """
    if not earthquake_json:
        return None

    try:
        data = json.loads(earthquake_json)
    except (ValueError, RecursionError):
        logger.error("Problem parsing the earthquake JSON results", exc_info=True)
        return None

    if not isinstance(data, dict):
        logger.error("Problem parsing the earthquake JSON results: not an object")
        return None

    features = data.get("features")
    if not isinstance(features, list):
        logger.error("Problem parsing the earthquake JSON results: no features array")
        return None

    if not features:
        logger.info("Response contained no earthquakes")
        return None

    event = parse_event(features[0])
    if event is None:
        logger.error("Problem parsing the earthquake JSON results: invalid first feature")

    return event
