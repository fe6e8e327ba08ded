"""Main entry point for the SNCF departures application."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.sncf_api import SncfDepartureRepository
from sncf_departures.adapters.web import PyViewWebAdapter
from sncf_departures.application.services import DepartureLoadingService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load configuration, exiting with status 1 when it is invalid."""
    try:
        config = AppConfig()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    if not config.sncf_api_key:
        logger.warning("SNCF_API_KEY is not set; the API will most likely reject the request.")
    logger.info(
        f"Station: stop_area:{config.stop_area_id}, query datetime: {config.query_datetime}"
    )
    return config


async def main() -> None:
    """Main application entry point."""
    config = load_config()

    # The session stays open for the lifetime of the server
    async with aiohttp.ClientSession() as session:
        departure_repo = SncfDepartureRepository(session=session, config=config)
        loading_service = DepartureLoadingService(departure_repo)
        display_adapter = PyViewWebAdapter(loading_service, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Synchronous entry point for the web display."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
