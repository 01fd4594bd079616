"""Minimal logging utilities for Solace.

Example:
    >>> from solace.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexing %s", "main.solace")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "solace.".

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'solace.mymodule'
    """
    if not (name == "solace" or name.startswith("solace.")):
        name = f"solace.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Set up root logging for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s:%(name)s:%(message)s",
    )
