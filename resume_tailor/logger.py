"""
Logging setup for resume_tailor.

The package logs through loguru but stays silent until an application calls
:func:`setup_logger`. Modules obtain a context-bound logger with
:func:`get_logger`, which prefixes each message with ``[context]``.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PACKAGE_NAME = "resume_tailor"

CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | "
    "[{extra[context]}] <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | [{extra[context]}] {message}"

logger.disable(PACKAGE_NAME)


def get_logger(context: str):
    """Return the shared loguru logger bound to a ``[context]`` label."""
    return logger.bind(context=context)


def setup_logger(level: str = "INFO", log_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Configure loguru sinks and enable package logging.

    Console output goes to stderr at ``level``. When ``log_dir`` is given, a
    ``resume_tailor.log`` file there captures everything from DEBUG up.

    Args:
        level: Minimum console level, e.g. "INFO" or "DEBUG"
        log_dir: Optional directory for the log file

    Returns:
        Path to the log file, or None when only the console is configured
    """
    logger.remove()
    # Sink formats read extra[context]; unbound records fall back to "core".
    logger.configure(extra={"context": "core"})
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        log_file = log_dir / f"{PACKAGE_NAME}.log"
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    logger.enable(PACKAGE_NAME)
    get_logger("setup").debug(f"Logging configured at {level.upper()}")
    return log_file
