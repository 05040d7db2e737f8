"""Main entry point for the RER departures web application."""

import asyncio
import logging
import sys

import aiohttp

from rer_departures.adapters.config import AppConfig
from rer_departures.adapters.web import WebServer
from rer_departures.bootstrap import build_schedule_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    try:
        line_config = config.to_line_configuration()
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid line configuration: {e}")
        sys.exit(1)

    logger.info(
        f"Following {line_config.network} {line_config.line_code} "
        f"in {line_config.timezone}, default route "
        f"{line_config.default_origin_id} -> {line_config.default_destination_id}"
    )
    if not config.navitia_api_key:
        logger.warning("No Navitia API key configured; API routes will answer 503")

    async with aiohttp.ClientSession() as session:
        schedule_service = build_schedule_service(config, session)
        server = WebServer(schedule_service, config)

        try:
            await server.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await server.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
