"""Display formatting - Pure functions.

Turns an Event into the three strings shown on screen.
"""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from src.core.config import DisplayStrings
from src.core.event import Event


@dataclass(frozen=True)
class EventView:
    """The rendered text for each screen region.

    Attributes:
        title: Event title, verbatim
        date: Formatted date and time
        tsunami_alert: Tsunami alert label
    """
    title: str
    date: str
    tsunami_alert: str


def get_date_string(time_ms: int, tz: tzinfo | None = None) -> str:
    """Format epoch milliseconds as e.g. "Sat, 1 Mar 2014 at 00:00:00 UTC".

    Weekday and month names follow the process locale.

    Args:
        time_ms: Milliseconds since epoch
        tz: Timezone to render in (None for the local timezone)

    Returns:
        Formatted date string
    """
    moment = datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc).astimezone(tz)
    return (
        f"{moment:%a}, {moment.day} {moment:%b %Y} "
        f"at {moment:%H:%M:%S} {moment.tzname()}"
    )


def get_tsunami_alert_string(
    tsunami_alert: int,
    strings: DisplayStrings | None = None,
) -> str:
    """Map the tsunami alert tri-state to its label.

    Args:
        tsunami_alert: 0, 1, or any other (unknown) code
        strings: Labels to use (defaults if None)

    Returns:
        Display label
    """
    strings = strings or DisplayStrings()

    if tsunami_alert == 0:
        return strings.alert_no
    if tsunami_alert == 1:
        return strings.alert_yes
    return strings.alert_not_available


def format_event_view(
    event: Event,
    strings: DisplayStrings | None = None,
    tz: tzinfo | None = None,
) -> EventView:
    """Render all three display strings for an event."""
    return EventView(
        title=event.title,
        date=get_date_string(event.time, tz),
        tsunami_alert=get_tsunami_alert_string(event.tsunami_alert, strings),
    )
