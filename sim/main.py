"""Process entrypoint."""

import sys

from sim.app import main_app
from sim.config import settings
from sim.core.logging import get_logger, setup_logging
from sim.core.time import GameSpeed

logger = get_logger(__name__)


def main() -> int:
    setup_logging(settings.LOG_LEVEL)

    logger.info("Initializing simulation app...")
    app = main_app()
    logger.info(
        f"Simulation app initialized "
        f"(resources={app.resource_count}, game_speed={app.resource(GameSpeed).value})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
