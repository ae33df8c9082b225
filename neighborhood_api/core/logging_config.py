"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger once; later
calls (tests, repeated ``create_app``) are no-ops.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    ``level`` is a logging level name (``"DEBUG"``, ``"INFO"``...), case
    insensitive; unknown names fall back to INFO.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
