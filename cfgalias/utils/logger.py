"""
Logging for cfgalias.

One process-wide AliasLogger wraps the stdlib "cfgalias" logger:
- console records go to stderr (stdout is reserved for signal lines)
- ANSI colours only when stderr is a terminal
- optional daily log file under LOG_DIR, never coloured

Usage:
    logger = get_logger()
    logger.alias("wasm", True, index=0)
    logger.failure("bad", "ExprSyntaxError", "Syntax error at position 8: ...")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "cfgalias"

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
FILE_DATEFMT = "%Y-%m-%dT%H:%M:%S"


class Colors:
    """ANSI escape sequences for console levels."""
    RESET = "\033[0m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    MAGENTA = "\033[35m"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name and message."""

    LEVEL_STYLES = {
        logging.DEBUG: Colors.DIM,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.MAGENTA,
    }

    def format(self, record):
        style = self.LEVEL_STYLES.get(record.levelno)
        if style is None:
            return super().format(record)
        # Colour a copy so the file handler sees the plain record
        painted = logging.makeLogRecord(record.__dict__)
        painted.levelname = f"{style}{record.levelname}{Colors.RESET}"
        painted.msg = f"{style}{record.getMessage()}{Colors.RESET}"
        painted.args = None
        return super().format(painted)


class AliasLogger:
    """
    Process-wide logger for alias runs.

    Adds two structured records on top of plain messages:
    - alias(): one line per evaluated alias, INFO
    - failure(): one line per alias that failed to parse or resolve, ERROR
    """

    _instance: Optional['AliasLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "WARNING"):
        if AliasLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        self._logger = logging.getLogger(LOGGER_NAME)
        self._configure(log_level)

        AliasLogger._initialized = True

    def _configure(self, level: str) -> None:
        """Replace the handlers of the cfgalias logger."""
        self._logger.setLevel(getattr(logging, level.upper()))
        self._logger.handlers.clear()

        console = logging.StreamHandler(sys.stderr)
        formatter_cls = ColoredFormatter if sys.stderr.isatty() else logging.Formatter
        console.setFormatter(formatter_cls(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
        self._logger.addHandler(console)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            path = self.log_dir / f"cfgalias_{datetime.now():%Y%m%d}.log"
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
            self._logger.addHandler(file_handler)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, msg: str, *args, **kwargs):
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._logger.error(msg, *args, **kwargs)

    def alias(self, name: str, value: bool, **fields):
        """
        Log an alias evaluation result.

        Format: [ALIAS] | name=<name> | value=true|false | key=value ...

        Args:
            name: Alias name
            value: Evaluated boolean
            **fields: Extra fields appended in order (index, source, ...)
        """
        parts = ["[ALIAS]", f"name={name}", f"value={str(bool(value)).lower()}"]
        parts.extend(f"{key}={val}" for key, val in fields.items())
        self._logger.info(" | ".join(parts))

    def failure(self, name: str, kind: str, reason: str):
        """
        Log an alias that failed to parse or resolve.

        Format: [ALIAS:<kind>] | name=<name> | <reason>
        """
        self._logger.error(f"[ALIAS:{kind}] | name={name} | {reason}")


_logger: Optional[AliasLogger] = None


def get_logger(log_dir: Optional[str] = None, log_level: str = "WARNING") -> AliasLogger:
    """Return the process logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = AliasLogger(log_dir, log_level)
    return _logger


def setup_logger(log_dir: Optional[str] = None, log_level: str = "WARNING") -> AliasLogger:
    """(Re)create the process logger with new settings."""
    global _logger
    AliasLogger._instance = None
    AliasLogger._initialized = False
    _logger = AliasLogger(log_dir, log_level)
    return _logger
