"""
Logging Configuration for PASSGAUGE

The library modules only create loggers (logging.getLogger(__name__));
handlers are installed by the application, e.g. the command line in main.py.

Features:
- Optional rotating file handler
- Colored console output
- Configurable log levels (LOG_LEVEL)

Passwords are never passed to a logger.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        original = record.levelname
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        try:
            return super().format(record)
        finally:
            record.levelname = original


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_LOG_LEVEL = "WARNING"
    DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
    DEFAULT_BACKUP_COUNT = 5

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_file: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
    ) -> None:
        """Install console and (optionally) rotating file handlers on the root logger"""
        if log_level is None:
            from core.config import get_log_level
            log_level = get_log_level()

        level = getattr(logging, str(log_level).upper(), None)
        if not isinstance(level, int):
            level = getattr(logging, LoggingConfig.DEFAULT_LOG_LEVEL)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console handler (stderr keeps stdout clean for reports / JSON)
        if enable_console and sys.stderr is not None:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            root_logger.addHandler(console_handler)

        # File handler
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(exist_ok=True, parents=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            root_logger.addHandler(file_handler)

        root_logger.debug("Logging initialized.")
