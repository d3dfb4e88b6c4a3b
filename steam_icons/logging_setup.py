import logging
import os

LOG_LEVEL_ENV = "STEAM_ICONS_LOG_LEVEL"


def resolve_level(default: int = logging.INFO) -> int:
    """Level named by STEAM_ICONS_LOG_LEVEL (e.g. DEBUG), else default."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logging(level: int | None = None) -> None:
    """Sets up logging configuration for the application."""
    logging.basicConfig(
        level=resolve_level() if level is None else level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
