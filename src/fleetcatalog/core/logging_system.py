"""Logging system for the fleet catalog.

This module wraps the standard library logging package with YAML
configuration, cached named loggers, an optional combined log file
placed in a platform-aware directory, and startup-based rotation.

Console output goes to stderr so that fleet reports printed on stdout
stay clean.

Platform-specific log locations (used when a log file is enabled and no
directory is configured):
    - macOS: ~/Library/Logs/FleetCatalog/fleetcatalog.log
    - Linux: ~/.fleetcatalog/logs/fleetcatalog.log
    - Windows: %AppData%/FleetCatalog/Logs/fleetcatalog.log

Typical usage example:
    from fleetcatalog.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Built fleet with %d aircraft", len(fleet))
"""

import logging
import os
import platform
import sys
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_console_handler: logging.Handler | None = None
_installed_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory.

    Examples:
        >>> get_platform_log_dir()
        PosixPath('/home/user/.fleetcatalog/logs')
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "FleetCatalog"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "FleetCatalog" / "Logs"
    else:
        return Path.home() / ".fleetcatalog" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "fleetcatalog.log", keep_count: int = 3) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to ``<name>.1``, shifts older logs up by one
    and deletes the log that falls beyond ``keep_count``.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename
    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": None,
        "file": {
            "enabled": False,
            "filename": "fleetcatalog.log",
            "backup_count": 3,
        },
        "loggers": {},
    }


def initialize_logging(config_path: str | Path | None = None, log_dir: str | Path | None = None) -> None:
    """Initialize the logging system from YAML configuration.

    Values found in the YAML file override the built-in defaults key by key.

    Args:
        config_path: Path to a logging configuration YAML file.
            If None, the default configuration is used.
        log_dir: Directory for the log file. Overrides ``log_dir`` from the
            configuration; the platform directory is used when both are unset.

    Raises:
        LoggingError: If the configuration file cannot be read.

    Examples:
        >>> initialize_logging("config/logging.yaml")
    """
    global _logging_config, _initialized

    config = _get_default_config()

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        if not isinstance(loaded, dict):
            raise LoggingError(f"Logging config must be a mapping: {config_path}")

        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value

    if log_dir is not None:
        config["log_dir"] = str(log_dir)

    _logging_config = config
    _configure_root_logger()
    _initialized = True

    for logger in _loggers_cache.values():
        _apply_logger_config(logger)


class ConsoleHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``.

    The stream is looked up on every emit and flush, so a replaced or
    closed stderr from an earlier run is never touched again.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        # Assignments from StreamHandler are ignored; stderr is resolved lazily.
        pass


def _remove_installed_handlers() -> None:
    """Detach and close the handlers this module added to the root logger."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.flush()
        handler.close()


def _configure_root_logger() -> None:
    """Configure the root logger with console and optional file handlers."""
    global _console_handler

    console_level = _parse_level(_logging_config.get("level", "WARNING"))

    _remove_installed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    _console_handler = ConsoleHandler()
    _console_handler.setLevel(console_level)
    _console_handler.setFormatter(_get_formatter())
    root_logger.addHandler(_console_handler)
    _installed_handlers.append(_console_handler)

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir") or get_platform_log_dir())
        log_dir.mkdir(parents=True, exist_ok=True)
        filename = file_config.get("filename", "fleetcatalog.log")
        rotate_logs(log_dir, filename, file_config.get("backup_count", 3))

        file_handler = logging.FileHandler(log_dir / filename, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise LoggingError(f"Unknown log level: {level}")
    return value


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return logging.Formatter(fmt, datefmt)


def set_console_level(level: str | int) -> None:
    """Change the console handler threshold after initialization.

    Args:
        level: Level name (e.g., "DEBUG") or numeric level.
    """
    if not _initialized:
        initialize_logging()
    if _console_handler is not None:
        _console_handler.setLevel(_parse_level(level))


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached and reused. Each logger can be tuned from the
    ``loggers`` section of the logging YAML with ``level`` and ``enabled``.

    Args:
        name: Logger name (typically the module ``__name__``).

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_logger_config(logger)

    _loggers_cache[name] = logger
    return logger


def _apply_logger_config(logger: logging.Logger) -> None:
    """Apply the ``loggers`` section entry for this logger, or clear old overrides."""
    logger_config = (_logging_config.get("loggers") or {}).get(logger.name) or {}

    logger.disabled = not logger_config.get("enabled", True)
    logger.setLevel(_parse_level(logger_config.get("level", logging.NOTSET)))


def shutdown_logging() -> None:
    """Flush and close the installed handlers.

    Cached loggers are kept so the next initialization can configure them
    again; their per-logger overrides are cleared.
    """
    global _initialized, _console_handler, _logging_config

    _remove_installed_handlers()
    _logging_config = _get_default_config()
    for logger in _loggers_cache.values():
        _apply_logger_config(logger)
    _console_handler = None
    _initialized = False
