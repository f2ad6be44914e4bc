import logging

from .consts import LOG_FORMAT


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger for command line runs"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
