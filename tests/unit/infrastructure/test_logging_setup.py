"""Tests for structured logging setup."""
import json
import logging

from solid_showcase.config.schemas import LoggingConfig
from solid_showcase.infrastructure.logging.logger import get_logger, reset_logging, setup_logging


class TestSetupLogging:
    def teardown_method(self):
        reset_logging()

    def test_sets_root_level(self):
        setup_logging(LoggingConfig(level="debug"))
        assert logging.getLogger().level == logging.DEBUG

    def test_console_output_goes_to_stderr(self, capsys):
        setup_logging(LoggingConfig(level="INFO"))
        get_logger("tests.console").info("demo finished", principle="srp")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "demo finished" in captured.err
        assert "principle=srp" in captured.err

    def test_json_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(LoggingConfig(level="INFO", destination="file", format="json", file_path=str(log_file)))
        get_logger("tests.file").warning("written to file", attempt=1)
        reset_logging()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        record = next(r for r in records if r["event"] == "written to file")
        assert record["level"] == "warning"
        assert record["attempt"] == 1
        assert record["logger"] == "tests.file"

    def test_repeated_setup_replaces_handlers(self):
        root = logging.getLogger()
        setup_logging(LoggingConfig())
        before = len(root.handlers)
        setup_logging(LoggingConfig())
        assert len(root.handlers) == before

    def test_reset_restores_default_handler(self, tmp_path):
        root = logging.getLogger()
        before = len(root.handlers)
        setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "app.log")))
        reset_logging()
        assert len(root.handlers) == before

    def test_level_filters_messages(self, capsys):
        setup_logging(LoggingConfig(level="ERROR"))
        get_logger("tests.filter").warning("should not appear")
        assert "should not appear" not in capsys.readouterr().err


class TestLoggingBeforeSetup:
    def test_errors_are_rendered_not_dumped(self, capsys):
        reset_logging()
        get_logger("tests.early").error("config failed", path="app.json")
        err = capsys.readouterr().err
        assert "config failed" in err
        assert "path=app.json" in err
        assert "{'event'" not in err

    def test_info_is_filtered(self, capsys):
        reset_logging()
        get_logger("tests.early").info("not shown")
        assert "not shown" not in capsys.readouterr().err
