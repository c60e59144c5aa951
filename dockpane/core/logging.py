"""
Loguru configuration for dockpane hosts.

The library itself only emits through `loguru.logger`; applications call
`setup_logging` once at startup (or `setup_logging_from_config` with a loaded
AppConfig) to decide where the records go.
"""
import os
import sys
from typing import Optional, TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .config import AppConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = "logs") -> None:
    """
    Configures Loguru logger.

    Args:
        debug_mode: DEBUG on the console when True, INFO otherwise
        log_dir: Directory for the rotating log file; None disables file logging
    """
    logger.remove()

    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            os.path.join(log_dir, "dockpane_{time}.log"),
            rotation="10 MB",
            retention="1 week",
            level="DEBUG",
        )

    logger.info(f"Logging initialized (level={level}, log_dir={log_dir})")


def setup_logging_from_config(config: "AppConfig") -> None:
    """Configure logging from the `general` section of an AppConfig."""
    general = config.general
    setup_logging(
        debug_mode=general.debug_mode,
        log_dir=general.log_dir if general.file_logging else None,
    )
