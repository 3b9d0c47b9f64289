"""Process-wide logging configuration."""

import logging
import sys


def config_configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service process.

    Args:
        level: Logging level name.
    """

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
