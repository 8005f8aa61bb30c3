# chestsort/utils/logger.py
import datetime
import sys
import traceback
from typing import Optional, TextIO

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4
    SILENT = 5 # Suppresses everything

LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT",
}

class Logger:
    """Process-wide console logger. Lines look like `[TIME] [LEVEL] [Source] Message`."""
    _instance = None
    _level = LogLevel.INFO
    _stream: Optional[TextIO] = None # None means sys.stdout at write time

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_stream(cls, stream: Optional[TextIO]):
        """Redirects output (tests pass an io.StringIO). None restores stdout."""
        cls._stream = stream

    @classmethod
    def is_enabled_for(cls, level: int) -> bool:
        return level >= cls._level

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if not cls.is_enabled_for(level):
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = LEVEL_NAMES.get(level, "LOG")
        stream = cls._stream or sys.stdout
        print(f"[{timestamp}] [{level_name:<5}] [{source}] {message}", file=stream)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)

    @classmethod
    def exception(cls, source: str, message: str):
        """Logs at ERROR with the active exception's traceback appended."""
        if cls.is_enabled_for(LogLevel.ERROR):
            cls._log(LogLevel.ERROR, source, f"{message}\n{traceback.format_exc().rstrip()}")
