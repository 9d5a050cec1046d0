"""
Logging configuration utilities.

This module provides functions for setting up and configuring logging.
"""
import logging


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        debug: Whether to enable debug logging
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(levelname)s - %(message)s'
    )

    logger = logging.getLogger('disk-mgr')
    logger.setLevel(level)
