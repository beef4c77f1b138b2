"""Display surface - Imperative Shell.

The screen has three text regions: title, date and tsunami alert.
Rendering to a terminal stands in for the device display.
"""

import logging
import sys
from typing import TextIO

from src.core.formatter import EventView


logger = logging.getLogger(__name__)


class TextRegion:
    """A single named text output region."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text


class Screen:
    """The single application screen.

    Once destroyed, updates are ignored.
    """

    def __init__(self) -> None:
        self.title = TextRegion("title")
        self.date = TextRegion("date")
        self.tsunami_alert = TextRegion("tsunami_alert")
        self.is_destroyed = False
        self.update_count = 0

    @property
    def regions(self) -> tuple[TextRegion, TextRegion, TextRegion]:
        return (self.title, self.date, self.tsunami_alert)

    def show(self, view: EventView) -> bool:
        """Write the view into the three regions.

        Args:
            view: Rendered event strings

        Returns:
            True if the screen was updated, False if it was destroyed
        """
        if self.is_destroyed:
            logger.info("Screen destroyed, dropping update")
            return False

        self.title.set_text(view.title)
        self.date.set_text(view.date)
        self.tsunami_alert.set_text(view.tsunami_alert)
        self.update_count += 1
        return True

    def render(self) -> list[str]:
        """Return the current text of each region, top to bottom."""
        return [region.text for region in self.regions]

    def destroy(self) -> None:
        self.is_destroyed = True


class TerminalScreen(Screen):
    """Screen that prints itself to a text stream after each update."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.stream = stream or sys.stdout

    def show(self, view: EventView) -> bool:
        updated = super().show(view)
        if updated:
            for line in self.render():
                print(line, file=self.stream)
        return updated
