"""Standard logging setup for cgpattern with JSON and human-readable output."""

from typing import Dict, Optional
import logging
import logging.handlers
import json
import sys
from pathlib import Path

_STANDARD_FIELDS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for machine-readable logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": self.formatTime(record, self.default_time_format),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Fields passed through extra= land directly on the record
        for key, value in record.__dict__.items():
            if key not in _STANDARD_FIELDS:
                log_entry[key] = value

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


class LoggerSetup:
    """Centralized logging configuration with multiple output formats."""

    def __init__(
        self,
        log_dir: Optional[str] = None,
        log_level: str = "WARNING",
        enable_json: bool = False,
        enable_console: bool = True,
        max_bytes: int = 1024 * 1024,  # 1MB per file
        backup_count: int = 3,
        app_name: str = "cgpattern",
    ):
        """Initialize logger setup.

        Args:
            log_dir: Directory for log files. No files are written when None.
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            enable_json: Also write a JSON lines file (needs log_dir)
            enable_console: Log human-readable lines to stderr
            max_bytes: Max bytes per log file before rotation
            backup_count: Number of backup files to keep
            app_name: Application name for log file naming
        """
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_level = getattr(logging, log_level.upper(), logging.WARNING)
        self.enable_json = enable_json
        self.enable_console = enable_console
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.app_name = app_name

        self._handlers: list[logging.Handler] = []

        self.json_formatter = JSONFormatter()
        self.human_formatter = HumanReadableFormatter()

    def _build_handlers(self) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []

        if self.log_dir is not None:
            human_handler = logging.handlers.RotatingFileHandler(
                self.log_dir / f"{self.app_name}.log",
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            human_handler.setFormatter(self.human_formatter)
            handlers.append(human_handler)

            if self.enable_json:
                json_handler = logging.handlers.RotatingFileHandler(
                    self.log_dir / f"{self.app_name}.jsonl",
                    maxBytes=self.max_bytes,
                    backupCount=self.backup_count,
                    encoding='utf-8'
                )
                json_handler.setFormatter(self.json_formatter)
                handlers.append(json_handler)

        # stdout is reserved for command output
        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(self.human_formatter)
            handlers.append(console_handler)

        for handler in handlers:
            handler.setLevel(self.log_level)
        return handlers

    def configure(self) -> logging.Logger:
        """Attach handlers to the package logger and return it."""
        logger = logging.getLogger(self.app_name)
        logger.setLevel(self.log_level)

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

        self._handlers = self._build_handlers()
        for handler in self._handlers:
            logger.addHandler(handler)
        return logger

    def set_level(self, level: str) -> None:
        """Set logging level for the package logger and its handlers."""
        new_level = getattr(logging, level.upper(), logging.WARNING)
        self.log_level = new_level

        logger = logging.getLogger(self.app_name)
        logger.setLevel(new_level)
        for handler in self._handlers:
            handler.setLevel(new_level)

    def shutdown(self) -> None:
        """Detach and close all handlers.

        A handler whose stream was already closed elsewhere is still detached.
        """
        logger = logging.getLogger(self.app_name)
        try:
            for handler in self._handlers:
                logger.removeHandler(handler)
                try:
                    handler.flush()
                    handler.close()
                except (OSError, ValueError):
                    # Same policy as logging.shutdown()
                    pass
        finally:
            self._handlers.clear()

    def get_log_files(self) -> Dict[str, str]:
        """Get paths to current log files.

        Returns:
            Dict mapping log type to file path
        """
        files: Dict[str, str] = {}
        if self.log_dir is None:
            return files
        files["human"] = str(self.log_dir / f"{self.app_name}.log")
        if self.enable_json:
            files["json"] = str(self.log_dir / f"{self.app_name}.jsonl")
        return files


# Global logger setup instance
_logger_setup: Optional[LoggerSetup] = None


def get_logger_setup() -> LoggerSetup:
    """Get the global logger setup instance, creating it if needed."""
    global _logger_setup
    if _logger_setup is None:
        _logger_setup = LoggerSetup()
        _logger_setup.configure()
    return _logger_setup


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: str = "WARNING",
    enable_json: bool = False,
    enable_console: bool = True,
    app_name: str = "cgpattern",
) -> LoggerSetup:
    """Convenience function to setup logging globally.

    Replaces any setup made by an earlier call.

    Returns:
        LoggerSetup instance
    """
    global _logger_setup
    if _logger_setup is not None:
        _logger_setup.shutdown()
    _logger_setup = LoggerSetup(
        log_dir=log_dir,
        log_level=log_level,
        enable_json=enable_json,
        enable_console=enable_console,
        app_name=app_name,
    )
    _logger_setup.configure()
    return _logger_setup


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the configured package logger."""
    setup = get_logger_setup()
    if name == setup.app_name or name.startswith(setup.app_name + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{setup.app_name}.{name}")


def shutdown_logging() -> None:
    """Shutdown the global logger setup and close all file handles."""
    global _logger_setup
    if _logger_setup is not None:
        try:
            _logger_setup.shutdown()
        finally:
            _logger_setup = None
