"""Command-line interface."""
import logging
import sys

from heartcurve.config import APP_VERSION, RenderConfig
from heartcurve.logging_config import setup_logging
from heartcurve.render import render

logger = logging.getLogger("heartcurve")


def main() -> int:
    # Logs go to stderr; raise to logging.DEBUG to trace generation and writing
    setup_logging(level=logging.WARNING)
    logger.info(f"heartcurve {APP_VERSION}")

    try:
        render(sys.stdout, RenderConfig())
        sys.stdout.flush()
    except (ValueError, OSError) as e:
        logger.error(f"Rendering failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
