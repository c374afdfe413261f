"""
Logging configuration for the AI server.
"""

import logging
import os
import sys


def setup_logging(name: str = "ai_server") -> logging.Logger:
    """Setup logging with proper format and handlers."""

    level = logging.INFO if os.getenv("NODE_ENV") == "production" else logging.DEBUG

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        '[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


# Global logger instance
logger = setup_logging()
