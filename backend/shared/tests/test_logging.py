import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from party.logic.enums import Category, SessionMode
from shared.logging import _serialize_enums, setup_logging


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    """Close and remove all handlers from the root logger after each test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


@pytest.fixture(autouse=True)
def _allow_file_logging():
    """Disable the _is_test guard so logging tests can create real file handlers."""
    with patch("shared.logging._is_test", return_value=False):
        yield


class TestSetupLogging:
    def test_configures_stdout_handler(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        setup_logging()
        root = logging.getLogger()

        assert root.level == logging.INFO
        assert len(root.handlers) == 1

        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

    def test_configures_file_handler_in_log_dir(self, tmp_path):
        log_dir = tmp_path / "party"
        setup_logging(log_dir=log_dir)
        root = logging.getLogger()

        assert len(root.handlers) == 2
        file_handler = root.handlers[1]
        assert isinstance(file_handler, logging.FileHandler)
        assert Path(file_handler.baseFilename).parent == log_dir

    def test_log_file_has_datetime_in_name(self, tmp_path):
        fixed_time = datetime(2026, 5, 2, 9, 15, 0, tzinfo=UTC)
        with patch("shared.logging.datetime") as mock_dt:
            mock_dt.now.return_value = fixed_time
            log_path = setup_logging(log_dir=tmp_path / "party")

        assert log_path is not None
        assert log_path.name == "2026-05-02_09-15-00.log"

    def test_returns_none_without_log_dir(self):
        assert setup_logging() is None

    def test_skips_file_handler_under_pytest(self, tmp_path):
        with patch("shared.logging._is_test", return_value=True):
            result = setup_logging(log_dir=tmp_path / "party")

        assert result is None
        assert not (tmp_path / "party").exists()

    def test_writes_to_file(self, tmp_path):
        log_path = setup_logging(log_dir=tmp_path / "nested" / "party")

        structlog.get_logger("test.writes_to_file").info("round completed")

        assert log_path is not None
        assert "round completed" in log_path.read_text()

    def test_clears_existing_handlers_on_repeated_calls(self):
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_custom_log_level(self):
        setup_logging(level=logging.DEBUG)

        assert logging.getLogger().level == logging.DEBUG

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_invalid_log_level_raises(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")
        with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
            setup_logging()

    def test_json_mode_renders_enums_and_context(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        log_path = setup_logging(log_dir=tmp_path / "party")

        structlog.contextvars.bind_contextvars(session_id="abc123")
        structlog.get_logger("test.json").info(
            "session started",
            mode=SessionMode.DIAGNOSIS,
            totals={Category.REFLEX: 10},
        )
        structlog.contextvars.clear_contextvars()

        assert log_path is not None
        parsed = json.loads(log_path.read_text().strip().splitlines()[0])
        assert parsed["event"] == "session started"
        assert parsed["session_id"] == "abc123"
        assert parsed["mode"] == "diagnosis"
        assert parsed["totals"] == {"reflex": 10}

    def test_invalid_log_format_raises(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="Invalid LOG_FORMAT"):
            setup_logging()


class TestSerializeEnums:
    def test_replaces_enum_with_value(self):
        result = _serialize_enums(None, "", {"category": Category.MASH, "msg": "hello"})
        assert result == {"category": "mash", "msg": "hello"}

    def test_replaces_enum_keys_and_values_inside_dict(self):
        result = _serialize_enums(None, "", {"totals": {Category.HOLD: 7, "mode": SessionMode.FREE_PLAY}})
        assert result["totals"] == {"hold": 7, "mode": "free_play"}

    def test_replaces_enums_inside_list(self):
        result = _serialize_enums(None, "", {"categories": [Category.REFLEX, Category.HOLD]})
        assert result["categories"] == ["reflex", "hold"]

    def test_leaves_non_enum_values_unchanged(self):
        result = _serialize_enums(None, "", {"count": 42, "name": "test"})
        assert result == {"count": 42, "name": "test"}
