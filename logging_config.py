"""Logging setup for the project manager."""

import logging
import sys

_LOGGING_CONFIGURED = False


def configure_logging(level_name='INFO'):
    """Attach a stream handler to the ``projects`` logger, once per process."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, str(level_name).upper(), logging.INFO)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))

    app_logger = logging.getLogger('projects')
    app_logger.addHandler(handler)
    app_logger.setLevel(level)
    _LOGGING_CONFIGURED = True

    app_logger.info("Logging configured. level=%s", logging.getLevelName(level))
