"""
Logging for marathon-discovery.

Every component logs under the ``marathon_discovery`` logger. Lookups are
traced at DEBUG, Marathon failures are reported at ERROR.
"""

import logging
import sys

logger = logging.getLogger("marathon_discovery")

_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"


def configure_logging(
    level: int = logging.INFO,
    handler: logging.Handler | None = None,
    format_timestamps: bool = True,
) -> logging.Logger:
    """
    Attach a handler to the marathon-discovery logger.

    Args:
        level: Threshold for the logger and its handler.
        handler: Destination. Defaults to stderr.
        format_timestamps: Prefix records with a timestamp.

    Returns:
        The ``marathon_discovery`` logger.

    Example:
        configure_logging(level=logging.DEBUG)
        await discovery.resolve("orders")

        # DEBUG    | marathon_discovery.discovery.marathon | No application with id [/orders]
        # DEBUG    | marathon_discovery.discovery.marathon | Discovered 2 services with ids that contain [orders]
        # DEBUG    | marathon_discovery.discovery.marathon | Discovered service [/orders-v1]
        # DEBUG    | marathon_discovery.discovery.marathon | Discovered service [/orders-v2]
        # DEBUG    | marathon_discovery.discovery.marathon | Discovered 2 service instances for service id [orders]
    """
    logger.setLevel(level)
    logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    if format_timestamps:
        formatter = logging.Formatter("%(asctime)s | " + _FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(_FORMAT)

    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the ``marathon_discovery`` logger, e.g. ``get_logger("marathon.client")``."""
    return logger.getChild(name)
