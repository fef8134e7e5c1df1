"""Logging configuration for the translatable package."""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Log levels for different components
LOGGING_CONFIG = {
    "translatable": logging.INFO,
    "translatable.core": logging.INFO,
    "translatable.infra": logging.WARNING,

    # Reduce noise from libraries
    "sqlalchemy": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "asyncio": logging.ERROR,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that tints the level name by severity."""

    LEVEL_COLORS = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Tint a copy so file handlers still see the plain level name
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"\033[{color}m{record.levelname}\033[0m"
        return super().format(tinted)


def setup_logging(
    log_file: bool = False,
    debug: bool = False,
    level: Optional[str] = None,
    log_dir: Path = Path("logs"),
) -> None:
    """Configure root logging with a colored console and an optional rotating file."""
    if debug:
        root_level = logging.DEBUG
    else:
        root_level = logging.getLevelName((level or "INFO").upper())
        if not isinstance(root_level, int):
            root_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(root_level)
    console_formatter = ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_filename = log_dir / f"translatable_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, component_level in LOGGING_CONFIG.items():
        logger = logging.getLogger(logger_name)
        # Debug mode opens up our own components only
        if debug and logger_name.startswith("translatable"):
            logger.setLevel(logging.DEBUG)
        else:
            logger.setLevel(component_level)

    logging.getLogger(__name__).info(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(root_level),
        "ENABLED" if log_file else "DISABLED",
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
