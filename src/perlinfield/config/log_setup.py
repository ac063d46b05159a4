"""Logging setup driven by LoggingConfig."""

import logging

from .schema import LoggingConfig

LOG_FORMATS = {
    "plain": "%(message)s",
    "structured": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
}


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger; safe to call more than once."""
    logging.basicConfig(
        level=getattr(logging, config.level),
        format=LOG_FORMATS[config.format],
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
