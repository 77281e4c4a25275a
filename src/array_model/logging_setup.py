import logging
import os
from typing import Optional

from array_model.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: Optional[str] = None) -> int:
    """
    Pick the numeric log level.
    - Explicit `level` first, then LOG_LEVEL env, then settings.log_level.
    - Unknown names fall back to INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or get_settings().log_level).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        return logging.INFO
    return level_value


def setup_logging(level: Optional[str] = None) -> None:
    """
    Minimal logging setup for applications using array models.
    The library itself only emits DEBUG records and never adds handlers.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
