"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components. The fetch and parse run
on a background worker; the screen update happens back on the event
loop thread, which owns the screen.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import tzinfo
from enum import Enum

from src.core.config import Config
from src.core.event import Event, extract_feature_from_json
from src.core.formatter import format_event_view
from src.shell.screen import Screen
from src.shell.usgs_client import FetchResponse, USGSClient, USGS_REQUEST_URL, create_url


logger = logging.getLogger(__name__)


class LoadOutcome(Enum):
    """How a background load ended."""
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class LoadResult:
    """Result of one fetch-and-parse cycle.

    Attributes:
        event: The first earthquake, or None
        outcome: SUCCESS with an event, EMPTY if the response held no
            usable event, ERROR if no response body was read
        response: The fetch response the event was read from
    """
    event: Event | None
    outcome: LoadOutcome
    response: FetchResponse | None = None

    @property
    def error(self) -> str | None:
        """Error message if the fetch failed."""
        return self.response.error if self.response is not None else None

    @property
    def success(self) -> bool:
        return self.outcome is LoadOutcome.SUCCESS

    @property
    def summary(self) -> str:
        """Human-readable summary of the load result."""
        if self.event is not None:
            return f"Loaded earthquake: {self.event.title}"
        if self.outcome is LoadOutcome.EMPTY:
            return "No earthquake in response"
        return f"Fetch failed: {self.error}"


class Orchestrator:
    """Coordinates loading the first earthquake and showing it.

    This class wires together:
    - USGS client (fetches the response text)
    - Core functions (parsing, formatting)
    - Screen (displays the result)
    """

    def __init__(
        self,
        config: Config | None = None,
        usgs_client: USGSClient | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration (defaults if not provided)
            usgs_client: USGS client (created if not provided)
            tz: Timezone for the date display (local if None)
        """
        self.config = config or Config()
        self.usgs_client = usgs_client or USGSClient(
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )
        self.tz = tz

    def load_event(self) -> LoadResult:
        """Fetch and parse the first earthquake.

        Blocking; runs on the background worker. Never raises for
        network or data errors.
        """
        response = self.usgs_client.make_http_request(create_url(USGS_REQUEST_URL))

        if not response.success:
            return LoadResult(
                event=None,
                outcome=LoadOutcome.ERROR,
                response=response,
            )

        event = extract_feature_from_json(response.body)
        outcome = LoadOutcome.SUCCESS if event is not None else LoadOutcome.EMPTY

        return LoadResult(event=event, outcome=outcome, response=response)

    def update_ui(self, screen: Screen, event: Event | None) -> bool:
        """Show the event on the screen.

        With no event the screen is left as it was.

        Returns:
            True if the screen was updated
        """
        if event is None:
            return False

        try:
            view = format_event_view(event, self.config.strings, self.tz)
        except (ValueError, OverflowError, OSError):
            logger.error("Problem formatting earthquake time %d", event.time, exc_info=True)
            return False

        return screen.show(view)

    async def launch(self, screen: Screen) -> LoadResult:
        """Load on a background worker, then update the screen once."""
        loop = asyncio.get_running_loop()

        # No wait on shutdown: a cancelled launch must not block the loop.
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="usgs")
        try:
            result = await loop.run_in_executor(executor, self.load_event)
        finally:
            executor.shutdown(wait=False)

        logger.info("Load finished: %s", result.summary)

        self.update_ui(screen, result.event)
        return result


class Session:
    """One launch of the screen, from start to teardown.

    Closing before the load completes discards the pending result.
    """

    def __init__(self, orchestrator: Orchestrator, screen: Screen) -> None:
        self.orchestrator = orchestrator
        self.screen = screen
        self._task: asyncio.Task[LoadResult] | None = None

    def start(self) -> "asyncio.Task[LoadResult]":
        """Schedule the one-shot load. Must be called on the loop thread."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(
                self.orchestrator.launch(self.screen)
            )
        return self._task

    async def wait(self) -> LoadResult | None:
        """Wait for the load; None if it was cancelled or never started."""
        if self._task is None:
            return None
        try:
            return await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
            return None

    def close(self) -> None:
        """Tear down the screen, cancelling any pending load."""
        if self._task is not None and not self._task.done():
            logger.info("Screen closed before load completed, discarding result")
            self._task.cancel()
        self.screen.destroy()
