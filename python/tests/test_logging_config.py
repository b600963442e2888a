"""
Tests for logging setup.
"""

import logging
import sys


class TestSetupLogging:
    """Test file/console handler installation."""

    def test_creates_daily_log_file(self, tmp_path, clean_numerus_logger):
        from numerus.logging_config import FlushingHandler, setup_logging

        logger = setup_logging(log_dir=tmp_path / "logs")

        assert logger.name == "numerus"
        assert any(isinstance(h, FlushingHandler) for h in logger.handlers)

        log_files = list((tmp_path / "logs").glob("numerus-*.log"))
        assert len(log_files) == 1
        assert "logging initialized" in log_files[0].read_text(encoding="utf-8")

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path, clean_numerus_logger):
        from numerus.logging_config import setup_logging

        setup_logging(log_dir=tmp_path)
        logger = setup_logging(log_dir=tmp_path)

        assert len(logger.handlers) == 1

    def test_console_handler_uses_stderr(self, tmp_path, clean_numerus_logger):
        from numerus.logging_config import setup_logging

        logger = setup_logging(log_dir=tmp_path, console=True)

        streams = [h.stream for h in logger.handlers if type(h) is logging.StreamHandler]
        assert streams == [sys.stderr]

    def test_log_dir_from_environment(self, tmp_path, monkeypatch, clean_numerus_logger):
        from numerus.logging_config import setup_logging

        monkeypatch.setenv("NUMERUS_LOG_DIR", str(tmp_path / "env_logs"))
        setup_logging()

        assert list((tmp_path / "env_logs").glob("numerus-*.log"))

    def test_level_from_name_and_environment(self, tmp_path, monkeypatch, clean_numerus_logger):
        from numerus.logging_config import setup_logging

        assert setup_logging(log_dir=tmp_path, level="debug").level == logging.DEBUG

        monkeypatch.setenv("NUMERUS_LOG_LEVEL", "WARNING")
        assert setup_logging(log_dir=tmp_path).level == logging.WARNING

    def test_unknown_level_name_falls_back_to_info(self, tmp_path, clean_numerus_logger):
        from numerus.logging_config import setup_logging

        assert setup_logging(log_dir=tmp_path, level="chatty").level == logging.INFO


class TestGetLogger:
    def test_module_loggers_are_children(self):
        from numerus.logging_config import get_logger

        assert get_logger().name == "numerus"
        assert get_logger("numerus.inflection.core").parent.name == "numerus"
