"""Tests for logging setup."""

import logging

import pytest

from job_board.utils.logging_config import resolve_level, setup_logging


@pytest.fixture(autouse=True)
def reset_loggers():
    yield
    for name in ("job_board", "sqlalchemy.engine"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


class TestResolveLevel:
    def test_names_and_numbers(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="chatty"):
            resolve_level("chatty")


class TestSetupLogging:
    def test_writes_log_file(self, tmp_path):
        logger = setup_logging(str(tmp_path / "logs"), "DEBUG")
        logging.getLogger("job_board.resume").debug("resume written for %s", 7)
        for handler in logger.handlers:
            handler.flush()
        text = (tmp_path / "logs" / "job_board.log").read_text(encoding="utf-8")
        assert "[DEBUG] job_board.resume: resume written for 7" in text

    def test_reinit_does_not_stack_handlers(self, tmp_path):
        setup_logging(str(tmp_path))
        logger = setup_logging(str(tmp_path))
        assert len(logger.handlers) == 2

    def test_console_uses_stderr(self, tmp_path, capsys):
        setup_logging(str(tmp_path))
        logging.getLogger("job_board").info("ready")
        captured = capsys.readouterr()
        assert "ready" not in captured.out

    def test_sql_echo_shares_handlers(self, tmp_path):
        logger = setup_logging(str(tmp_path), sql_echo=True)
        engine_logger = logging.getLogger("sqlalchemy.engine")
        assert engine_logger.level == logging.INFO
        assert engine_logger.handlers == logger.handlers

        setup_logging(str(tmp_path))
        assert engine_logger.handlers == []
