"""
Hybrid logging: one named logger with coloured console output and an optional
timestamped log file, handed out to classes as per-class ClassLogger wrappers.
"""

import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional


class ColoredFormatter(logging.Formatter):
    """
    Formatter producing "[HH:MM:SS.mmm] [level] [class] message".

    Millisecond timestamps keep debounce and repeat timing readable in the log.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        super().__init__(
            "[%(asctime)s.%(msecs)03d] [%(levelname)s] [%(class_name)s] %(message)s",
            datefmt="%H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            formatted = f"{color}{formatted}{self.COLORS['RESET']}"

        return formatted


class ClassLogger:
    """
    Per-class logger wrapper with its own level filter.

    Records are routed through the shared main logger with the class name
    attached, so one console/file pair serves every button and sampler.
    """

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def is_enabled_for(self, level: int) -> bool:
        """True if a message at this level would be emitted"""
        return level >= self.level and self.main_logger.isEnabledFor(level)

    def _log(self, level: int, message: str, exc_info: bool = False) -> None:
        if not self.is_enabled_for(level):
            return
        exc_info_tuple = sys.exc_info() if exc_info else None
        record = self.main_logger.makeRecord(
            self.main_logger.name, level, "", 0, message, (), exc_info_tuple
        )
        record.class_name = self.class_name
        self.main_logger.handle(record)

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[Exception] = None) -> None:
        """Log error message, appending location details when an exception is given"""
        if exception is not None:
            exc_type = type(exception).__name__
            tb = traceback.extract_tb(exception.__traceback__)
            filename, lineno, _, _ = tb[-1] if tb else ("unknown", 0, "unknown", "")
            message = f"{message} | Type: {exc_type} | File: {filename} | Line: {lineno}"
            self._log(logging.ERROR, message, exc_info=True)
        else:
            self._log(logging.ERROR, message)

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)


class HybridLogger:
    """
    Logger factory with per-class logging and coloured output.

    Example:
        main_logger = HybridLogger("buttons")
        logger = main_logger.get_class_logger("InputEventMachine", logging.DEBUG)
        logger.info("ready")

    Pass log_dir=None to log to the console only. class_levels sets per-class
    minimum levels up front, e.g. keeping per-button chatter one level below
    the event lines a polling loop prints itself:

        HybridLogger("monitor", class_levels={"Button": logging.WARNING})
    """

    def __init__(self, name: str = "button_events", log_dir: Optional[str] = "logs",
                 console: bool = True, class_levels: Optional[Dict[str, int]] = None):
        self.name = name
        self.log_dir = log_dir
        self.console = console
        self.class_levels: Dict[str, int] = dict(class_levels or {})
        self.log_file: Optional[Path] = None
        self.main_logger: Optional[logging.Logger] = None
        self.class_loggers: Dict[str, ClassLogger] = {}
        self._setup_main_logger()

    def _setup_main_logger(self) -> None:
        """Create main logger with console and (optionally) file handlers"""
        self.main_logger = logging.getLogger(self.name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.handlers.clear()

        if self.console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColoredFormatter(use_colors=sys.stdout.isatty()))
            self.main_logger.addHandler(console_handler)

        if self.log_dir is not None:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)
            stamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
            self.log_file = Path(self.log_dir) / f"{self.name}_{stamp}.log"
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setFormatter(ColoredFormatter(use_colors=False))
            self.main_logger.addHandler(file_handler)

    def get_class_logger(self, class_name: str, level: Optional[int] = None) -> ClassLogger:
        """
        Get (or create) the logger for a class.

        Args:
            class_name: Name shown in the [class] column
            level: Minimum level for this class (logging.DEBUG, INFO, ...);
                   defaults to class_levels[class_name], else INFO

        Returns:
            ClassLogger: shared instance per class name
        """
        if class_name not in self.class_loggers:
            if level is None:
                level = self.class_levels.get(class_name, logging.INFO)
            self.class_loggers[class_name] = ClassLogger(
                self.main_logger, class_name, level
            )
        return self.class_loggers[class_name]

    def get_main_logger(self, level: Optional[int] = None) -> ClassLogger:
        """Convenience accessor for the 'Main' class logger"""
        return self.get_class_logger("Main", level)

    def cleanup(self) -> None:
        """Flush and close all handlers"""
        if self.main_logger:
            for handler in self.main_logger.handlers:
                with suppress(OSError, ValueError):
                    handler.flush()
                    handler.close()
            self.main_logger.handlers.clear()
