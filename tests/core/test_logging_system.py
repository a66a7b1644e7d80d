"""Unit tests for the logging system with platform-aware paths and rotation."""

import io
import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from fleetcatalog.core import logging_system
from fleetcatalog.core.logging_system import (
    ConsoleHandler,
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    rotate_logs,
    set_console_level,
    shutdown_logging,
)
from fleetcatalog.fleet import builder, factory


@pytest.fixture(autouse=True)
def restore_default_logging():
    """Return to default logging configuration after each test."""
    yield
    shutdown_logging()
    initialize_logging()


def _installed_console_handler() -> logging.Handler:
    return next(h for h in logging.getLogger().handlers if isinstance(h, ConsoleHandler))


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        """Test macOS log directory path."""
        with patch("platform.system", return_value="Darwin"):
            assert get_platform_log_dir() == Path.home() / "Library" / "Logs" / "FleetCatalog"

    def test_linux_log_dir(self) -> None:
        """Test Linux log directory path."""
        with patch("platform.system", return_value="Linux"):
            assert get_platform_log_dir() == Path.home() / ".fleetcatalog" / "logs"

    def test_windows_log_dir(self) -> None:
        """Test Windows log directory path."""
        with patch("platform.system", return_value="Windows"):
            with patch.dict("os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}):
                log_dir = get_platform_log_dir()
                assert log_dir == Path("C:/Users/Test/AppData/Roaming") / "FleetCatalog" / "Logs"

    def test_unknown_platform_defaults_to_home_dir(self) -> None:
        """Test unknown platform uses the Unix-style path."""
        with patch("platform.system", return_value="FreeBSD"):
            assert get_platform_log_dir() == Path.home() / ".fleetcatalog" / "logs"


class TestLogRotation:
    """Tests for log rotation functionality."""

    def test_rotate_logs_no_existing_log(self, tmp_path: Path) -> None:
        """Test rotation does nothing when no log exists."""
        rotate_logs(tmp_path, "test.log", 3)

        assert list(tmp_path.iterdir()) == []

    def test_rotate_logs_shifts_files(self, tmp_path: Path) -> None:
        """Test current and numbered logs shift up by one."""
        (tmp_path / "test.log").write_text("current")
        (tmp_path / "test.log.1").write_text("previous-1")

        rotate_logs(tmp_path, "test.log", 3)

        assert not (tmp_path / "test.log").exists()
        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "previous-1"

    def test_rotate_logs_deletes_oldest(self, tmp_path: Path) -> None:
        """Test the log beyond keep_count is dropped."""
        (tmp_path / "test.log").write_text("current")
        for i in range(1, 4):
            (tmp_path / f"test.log.{i}").write_text(f"old-{i}")

        rotate_logs(tmp_path, "test.log", keep_count=3)

        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.3").read_text() == "old-2"
        assert not (tmp_path / "test.log.4").exists()


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_default_console_level_is_warning(self) -> None:
        """Test default configuration keeps the console quiet."""
        initialize_logging()

        assert _installed_console_handler().level == logging.WARNING

    def test_missing_config_raises(self, tmp_path: Path) -> None:
        """Test missing configuration file raises LoggingError."""
        with pytest.raises(LoggingError, match="not found"):
            initialize_logging(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test malformed YAML raises LoggingError."""
        config = tmp_path / "logging.yaml"
        config.write_text("level: [unclosed\n")

        with pytest.raises(LoggingError, match="Failed to load"):
            initialize_logging(config)

    def test_unknown_level_raises(self, tmp_path: Path) -> None:
        """Test unknown level names raise LoggingError."""
        config = tmp_path / "logging.yaml"
        config.write_text("level: LOUD\n")

        with pytest.raises(LoggingError, match="Unknown log level"):
            initialize_logging(config)

    def test_yaml_overrides_defaults(self, tmp_path: Path) -> None:
        """Test YAML values override defaults."""
        config = tmp_path / "logging.yaml"
        config.write_text("level: DEBUG\n")

        initialize_logging(config)

        assert _installed_console_handler().level == logging.DEBUG

    def test_file_logging(self, tmp_path: Path) -> None:
        """Test file handler writes into the given log directory."""
        config = tmp_path / "logging.yaml"
        config.write_text("file:\n  enabled: true\n  filename: run.log\n")
        log_dir = tmp_path / "logs"

        initialize_logging(config, log_dir=log_dir)
        get_logger("fleetcatalog.test_file").info("hello file")
        shutdown_logging()

        assert "hello file" in (log_dir / "run.log").read_text(encoding="utf-8")

    def test_file_logging_rotates_previous_run(self, tmp_path: Path) -> None:
        """Test a previous log is rotated on startup."""
        config = tmp_path / "logging.yaml"
        config.write_text("file:\n  enabled: true\n  filename: run.log\n")
        (tmp_path / "run.log").write_text("previous run")

        initialize_logging(config, log_dir=tmp_path)
        shutdown_logging()

        assert (tmp_path / "run.log.1").read_text() == "previous run"

    def test_reinitialize_replaces_handlers(self) -> None:
        """Test repeated initialization does not stack console handlers."""
        initialize_logging()
        initialize_logging()

        consoles = [h for h in logging.getLogger().handlers if isinstance(h, ConsoleHandler)]
        assert len(consoles) == 1


class TestGetLogger:
    """Tests for logger retrieval."""

    def test_logger_cached(self) -> None:
        """Test loggers are reused."""
        assert get_logger("fleetcatalog.cached") is get_logger("fleetcatalog.cached")

    def test_overrides_reach_module_loggers(self, tmp_path: Path) -> None:
        """Test loggers section applies to loggers fetched at import time."""
        config = tmp_path / "logging.yaml"
        config.write_text(
            "loggers:\n"
            "  fleetcatalog.fleet.factory:\n    level: ERROR\n"
            "  fleetcatalog.fleet.builder:\n    enabled: false\n"
        )

        initialize_logging(config)

        assert factory.logger.level == logging.ERROR
        assert builder.logger.disabled is True

    def test_overrides_cleared_on_reinitialize(self, tmp_path: Path) -> None:
        """Test loggers without an entry return to defaults on re-initialization."""
        config = tmp_path / "logging.yaml"
        config.write_text(
            "loggers:\n"
            "  fleetcatalog.fleet.factory:\n    level: ERROR\n"
            "  fleetcatalog.fleet.builder:\n    enabled: false\n"
        )
        initialize_logging(config)

        initialize_logging()

        assert factory.logger.level == logging.NOTSET
        assert builder.logger.disabled is False

    def test_overrides_for_loggers_fetched_later(self, tmp_path: Path) -> None:
        """Test a logger first requested after initialization is configured too."""
        config = tmp_path / "logging.yaml"
        config.write_text("loggers:\n  fleetcatalog.tuned:\n    level: ERROR\n")

        initialize_logging(config)

        assert get_logger("fleetcatalog.tuned").level == logging.ERROR

    def test_auto_initializes(self) -> None:
        """Test get_logger initializes logging when needed."""
        shutdown_logging()

        get_logger("fleetcatalog.auto")

        assert logging_system._initialized is True


class TestConsoleLevel:
    """Tests for console level changes."""

    def test_set_console_level(self) -> None:
        """Test console threshold can be lowered after initialization."""
        initialize_logging()

        set_console_level("DEBUG")

        assert _installed_console_handler().level == logging.DEBUG

    def test_console_writes_to_current_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test console output follows the active stderr stream."""
        initialize_logging()

        get_logger("fleetcatalog.console").warning("visible warning")

        assert "visible warning" in capsys.readouterr().err

    def test_closed_stderr_does_not_break_reinitialization(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a stderr that was used and later closed is not flushed again."""
        initialize_logging()
        stale = io.StringIO()
        monkeypatch.setattr(sys, "stderr", stale)
        get_logger("fleetcatalog.console").warning("written to a stream that goes away")
        monkeypatch.undo()
        stale.close()

        shutdown_logging()
        initialize_logging()
        get_logger("fleetcatalog.console").warning("still logging")
