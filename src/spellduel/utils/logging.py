import logging
import os
import sys

LOG_LEVEL_ENV = "SPELLDUEL_LOG_LEVEL"


def _level_from_env(default: int) -> int:
    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        logging.getLogger(__name__).warning("Ignoring unknown %s=%r", LOG_LEVEL_ENV, level_name)
        return default
    return level


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the root logger with a single stdout handler.

    Respects the SPELLDUEL_LOG_LEVEL env var if it names a logging level.
    """
    level = _level_from_env(level)

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
