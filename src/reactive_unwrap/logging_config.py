"""
Loguru setup for reactive-unwrap.

Logs go to stderr unless machine mode is on, so diffs and JSON on stdout
stay clean. A rotating log file can be switched on for batch runs.

Environment:
    REACTIVE_UNWRAP_MACHINE_MODE  silence the stderr sink
    REACTIVE_UNWRAP_FILE_LOGGING  also write to a log file
    REACTIVE_UNWRAP_LOG_DIR       directory of that file
"""

import os
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
DEFAULT_LOG_DIR = ".reactive_unwrap/logs"

_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None, force=False):
    """
    Replace the loguru sinks with the ones this tool uses.

    Args:
        level: Threshold for the stderr sink
        suppress_console: Drop the stderr sink; defaults to machine mode
        enable_file_logging: Add the file sink; defaults to the env flag
        force: Rebuild the sinks even if already configured
    """
    global _configured

    if _configured and not force:
        return
    _configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = _env_flag("REACTIVE_UNWRAP_MACHINE_MODE")
    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging is None:
        enable_file_logging = _env_flag("REACTIVE_UNWRAP_FILE_LOGGING")
    if enable_file_logging:
        log_dir = Path(os.getenv("REACTIVE_UNWRAP_LOG_DIR", DEFAULT_LOG_DIR))
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "reactive_unwrap.log",
            level="INFO",
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
        )


setup_logging()
