"""Application Entry Point.

Thin wrapper that configures logging, loads the display strings and
runs one launch of the earthquake screen.
"""

import asyncio
import locale
import logging
import os

from src.orchestrator import LoadResult, Orchestrator, Session
from src.shell.config_loader import load_config
from src.shell.screen import Screen, TerminalScreen


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def show_earthquake(
    screen: Screen,
    orchestrator: Orchestrator | None = None,
) -> LoadResult | None:
    """Launch the screen and wait for its single update.

    Args:
        screen: Display surface to update
        orchestrator: Orchestrator (created from the loaded config if not provided)

    Returns:
        The load result, or None if the launch was cancelled
    """
    orchestrator = orchestrator or Orchestrator(load_config())
    session = Session(orchestrator, screen)

    session.start()
    try:
        return await session.wait()
    finally:
        session.close()


def use_system_locale() -> None:
    """Use the user's locale for weekday and month names."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning("Could not set locale, using default: %s", e)


def run() -> int:
    """Run the application once, rendering to the terminal."""
    use_system_locale()
    logger.info("Starting earthquake screen")

    result = asyncio.run(show_earthquake(TerminalScreen()))

    if result is not None:
        logger.info("Completed: %s", result.summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
