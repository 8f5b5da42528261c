"""
Logging setup for the catalog browser.

The terminal UI owns the screen, so by default logs only go to a file.
Headless runs may also log to the console.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    names: Iterable[str],
    log_file: Optional[Path] = None,
    level=logging.INFO,
    console: bool = False,
) -> List[logging.Logger]:
    """
    Setup loggers for the application.

    One set of handlers is shared by every named logger, so all packages
    write to the same log file.

    Args:
        names: Logger names (package namespaces to configure)
        log_file: Path to log file (no file logging if None)
        level: Logging level
        console: Also log to stderr

    Returns:
        Configured loggers, in the order given
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    loggers = []
    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Clear any existing handlers
        logger.handlers = list(handlers)
        loggers.append(logger)

    return loggers
