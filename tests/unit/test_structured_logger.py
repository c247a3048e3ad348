"""
구조화된 로깅 설정 테스트
"""

import json
import logging

import pytest
import structlog

from tmpltree.infrastructure.logging import configure_structlog, get_logger


def _flush_handlers():
    for handler in logging.getLogger().handlers:
        handler.flush()


@pytest.mark.unit
class TestConfigureStructlog:
    """configure_structlog 테스트"""

    def test_creates_log_files(self, tmp_path):
        log_dir = tmp_path / "logs"

        configure_structlog(log_dir=str(log_dir), log_level="INFO")

        assert (log_dir / "tmpltree.log").exists()
        assert (log_dir / "tmpltree-error.log").exists()
        assert not (log_dir / "tmpltree-debug.log").exists()

    def test_debug_level_adds_debug_file(self, tmp_path):
        configure_structlog(log_dir=str(tmp_path), log_level="DEBUG")

        assert (tmp_path / "tmpltree-debug.log").exists()

    def test_json_log_line(self, tmp_path):
        configure_structlog(log_dir=str(tmp_path), log_level="INFO", enable_json=True)
        logger = get_logger("tmpltree.test", component="Test")

        logger.info("Template rendered", template_path="pages/index")
        _flush_handlers()

        lines = (tmp_path / "tmpltree.log").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["event"] == "Template rendered"
        assert record["component"] == "Test"
        assert record["template_path"] == "pages/index"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_error_file_only_receives_errors(self, tmp_path):
        configure_structlog(log_dir=str(tmp_path), log_level="INFO")
        logger = get_logger("tmpltree.test")

        logger.info("just info")
        logger.error("something failed")
        _flush_handlers()

        error_log = (tmp_path / "tmpltree-error.log").read_text(encoding="utf-8")
        assert "something failed" in error_log
        assert "just info" not in error_log

    def test_level_filters_main_log(self, tmp_path):
        configure_structlog(log_dir=str(tmp_path), log_level="WARNING")
        logger = get_logger("tmpltree.test")

        logger.info("hidden")
        logger.warning("shown")
        _flush_handlers()

        main_log = (tmp_path / "tmpltree.log").read_text(encoding="utf-8")
        assert "shown" in main_log
        assert "hidden" not in main_log


@pytest.mark.unit
class TestDefaultLogging:
    """configure_structlog() 호출 전 기본 동작 테스트"""

    def test_unconfigured_logs_stay_off_stdout(self, capsys):
        structlog.reset_defaults()
        logger = get_logger("tmpltree.test", component="Test")

        logger.info("Template rendered", template_path="pages/index")
        logger.debug("Template tree built")

        assert capsys.readouterr().out == ""

    def test_logger_follows_later_configuration(self, tmp_path):
        """configure_structlog() 이전에 만든 로거도 이후 설정을 따름"""
        structlog.reset_defaults()
        logger = get_logger("tmpltree.test", component="Early")

        configure_structlog(log_dir=str(tmp_path), log_level="INFO")
        logger.info("after configure")
        _flush_handlers()

        record = json.loads((tmp_path / "tmpltree.log").read_text(encoding="utf-8").splitlines()[-1])
        assert record["event"] == "after configure"
        assert record["component"] == "Early"
        assert "timestamp" in record
