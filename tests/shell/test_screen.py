"""Tests for the display surface."""

import io

from src.core.formatter import EventView
from src.shell.screen import Screen, TerminalScreen, TextRegion


SAMPLE_VIEW = EventView(
    title="M 7.0 - offshore",
    date="Sat, 1 Mar 2014 at 00:00:00 UTC",
    tsunami_alert="yes",
)


class TestTextRegion:
    """Tests for TextRegion."""

    def test_starts_empty(self):
        assert TextRegion("title").text == ""

    def test_set_text(self):
        region = TextRegion("title")
        region.set_text("hello")

        assert region.text == "hello"


class TestScreen:
    """Tests for Screen."""

    def test_starts_blank(self):
        """Nothing is displayed before the first update."""
        screen = Screen()

        assert screen.render() == ["", "", ""]
        assert screen.update_count == 0

    def test_show_writes_all_regions(self):
        screen = Screen()

        assert screen.show(SAMPLE_VIEW) is True
        assert screen.title.text == "M 7.0 - offshore"
        assert screen.date.text == "Sat, 1 Mar 2014 at 00:00:00 UTC"
        assert screen.tsunami_alert.text == "yes"
        assert screen.update_count == 1

    def test_render_order(self):
        """Title, date, alert from top to bottom."""
        screen = Screen()
        screen.show(SAMPLE_VIEW)

        assert screen.render() == [
            "M 7.0 - offshore",
            "Sat, 1 Mar 2014 at 00:00:00 UTC",
            "yes",
        ]

    def test_show_on_destroyed_screen_is_noop(self):
        """A destroyed screen ignores updates without raising."""
        screen = Screen()
        screen.destroy()

        assert screen.show(SAMPLE_VIEW) is False
        assert screen.render() == ["", "", ""]
        assert screen.update_count == 0


class TestTerminalScreen:
    """Tests for TerminalScreen."""

    def test_prints_regions_on_update(self):
        stream = io.StringIO()
        screen = TerminalScreen(stream)

        screen.show(SAMPLE_VIEW)

        assert stream.getvalue().splitlines() == [
            "M 7.0 - offshore",
            "Sat, 1 Mar 2014 at 00:00:00 UTC",
            "yes",
        ]

    def test_prints_nothing_when_destroyed(self):
        stream = io.StringIO()
        screen = TerminalScreen(stream)
        screen.destroy()

        screen.show(SAMPLE_VIEW)

        assert stream.getvalue() == ""
