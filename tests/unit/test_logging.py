"""
Unit tests for the logger implementations and service bootstrap.
"""

from pathlib import Path

import pytest

from filedigest.core.bootstrap import bootstrap, is_initialized
from filedigest.core.container import ServiceContainer, get_container
from filedigest.core.di import resolve_or_default, try_resolve
from filedigest.core.interfaces.logger import ILogger
from filedigest.core.interfaces.services import HashingService
from filedigest.core.models.config import LoggingConfig
from filedigest.services.hashing import DefaultHashingService
from filedigest.services.logging import FiledigestLogger, NullLogger


class TestFiledigestLogger:
    """Tests for the stdlib-backed logger."""

    def test_file_output(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "test.log"
        logger = FiledigestLogger(name="filedigest.test.file", level="debug", file_enabled=True, log_file=log_file)
        logger.debug("opening %s", "data.bin")
        logger.close()
        assert "[DEBUG] filedigest.test.file" in log_file.read_text()
        assert "opening data.bin" in log_file.read_text()

    def test_level_filters_messages(self, tmp_path: Path):
        log_file = tmp_path / "filtered.log"
        logger = FiledigestLogger(name="filedigest.test.level", level="warning", file_enabled=True, log_file=log_file)
        logger.info("hidden")
        logger.warning("shown")
        logger.set_level("error")
        logger.warning("hidden too")
        logger.close()
        text = log_file.read_text()
        assert "shown" in text
        assert "hidden" not in text

    def test_default_log_location(self):
        """File logging defaults to ~/.filedigest/filedigest.log (patched in tests)."""
        logger = FiledigestLogger(name="filedigest.test.default", file_enabled=True)
        logger.error("failure")
        logger.close()
        assert FiledigestLogger.LOG_FILE_PATH.exists()

    def test_no_handlers_by_default(self):
        logger = FiledigestLogger(name="filedigest.test.quiet")
        logger.error("nowhere")
        assert not FiledigestLogger.LOG_FILE_PATH.exists()

    def test_from_config(self, tmp_path: Path):
        log_file = tmp_path / "configured.log"
        config = LoggingConfig(level="info", file=True)
        logger = FiledigestLogger.from_config(config, name="filedigest.test.config", log_file=log_file)
        assert logger.level == "info"
        assert logger.has_outputs
        logger.info("hashing started")
        logger.debug("not written")
        logger.close()
        text = log_file.read_text()
        assert "hashing started" in text
        assert "not written" not in text

    def test_records_name_thread(self, tmp_path: Path):
        log_file = tmp_path / "threads.log"
        logger = FiledigestLogger(name="filedigest.test.thread", file_enabled=True, log_file=log_file)
        logger.warning("unit failed")
        logger.close()
        assert "(MainThread): unit failed" in log_file.read_text()

    def test_set_level_updates_level_name(self):
        logger = FiledigestLogger(name="filedigest.test.setlevel")
        assert logger.level == "warning"
        assert not logger.has_outputs
        logger.set_level("DEBUG")
        assert logger.level == "debug"

    def test_null_logger_accepts_everything(self):
        logger = NullLogger()
        logger.debug("x")
        logger.info("x")
        logger.warning("x %s", 1)
        logger.error("x")
        logger.set_level("debug")


class TestBootstrap:
    """Tests for container registration."""

    def test_unbootstrapped_falls_back_to_default(self):
        assert try_resolve(ILogger) is None
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)

    def test_bootstrap_registers_services(self):
        container = bootstrap()
        assert is_initialized()
        assert container is get_container()
        assert isinstance(container.resolve(ILogger), FiledigestLogger)
        assert isinstance(container.resolve(HashingService), DefaultHashingService)

    def test_bootstrap_is_idempotent(self):
        first = bootstrap()
        logger = first.resolve(ILogger)
        assert bootstrap().resolve(ILogger) is logger

    def test_resolve_unregistered_raises(self):
        with pytest.raises(KeyError):
            get_container().resolve(ILogger)

    def test_register_instance(self):
        container = ServiceContainer()
        logger = NullLogger()
        container.register_singleton(ILogger, logger)
        assert container.resolve(ILogger) is logger
        assert container.try_resolve(HashingService) is None

    def test_register_requires_instance_or_factory(self):
        with pytest.raises(ValueError):
            ServiceContainer().register_singleton(ILogger)

    def test_bootstrap_logger_follows_config(self, tmp_path: Path):
        config_dir = tmp_path / ".filedigest"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[logging]\nlevel = "debug"\n')
        logger = bootstrap().resolve(ILogger)
        assert logger.level == "debug"

    def test_registered_service_satisfies_protocol(self):
        assert isinstance(DefaultHashingService(), HashingService)
