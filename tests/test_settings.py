"""Tests for settings loading, logging setup and the shared context."""

from __future__ import annotations

import json
import logging

import pytest

import pomodoro.log as log_module
from pomodoro.context import AppContext
from pomodoro.log import configure_logging
from pomodoro.settings import Settings, load_settings
from pomodoro.timer.engine import TimerEngine

from helpers import SignalCollector


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("POMODORO_QUOTE_URL", "POMODORO_DATE_URL", "POMODORO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.work_duration == 1500
        assert s.quote_url == "http://127.0.0.1:5000/api/quote"
        assert s.date_url == "http://localhost:8081/date"
        assert s.log_level == "INFO"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == Settings()

    def test_file_values_are_used(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "quote_url": "http://quotes.test/api/quote",
            "work_duration": 900,
        }))
        s = load_settings(path)
        assert s.quote_url == "http://quotes.test/api/quote"
        assert s.work_duration == 900
        assert s.date_url == Settings().date_url

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"theme": "dark", "window_width": 700}))
        s = load_settings(path)
        assert s.window_width == 700

    @pytest.mark.parametrize("body", ["{not json", "[1, 2]"])
    def test_bad_file_falls_back_to_defaults(self, tmp_path, caplog, body):
        path = tmp_path / "settings.json"
        path.write_text(body)
        with caplog.at_level(logging.WARNING, logger="pomodoro.settings"):
            s = load_settings(path)
        assert s == Settings()
        assert "Ignoring unreadable settings file" in caplog.text

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"date_url": "http://file.test/date"}))
        monkeypatch.setenv("POMODORO_DATE_URL", "http://env.test/date")
        monkeypatch.setenv("POMODORO_LOG_LEVEL", "DEBUG")
        s = load_settings(path)
        assert s.date_url == "http://env.test/date"
        assert s.log_level == "DEBUG"

    @pytest.mark.parametrize("key, value", [
        ("work_duration", "30"),
        ("work_duration", True),
        ("window_width", 700.5),
        ("quote_url", 5000),
        ("log_level", None),
    ])
    def test_mistyped_value_keeps_default(self, tmp_path, caplog, key, value):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({key: value, "date_url": "http://file.test/date"}))
        with caplog.at_level(logging.WARNING, logger="pomodoro.settings"):
            s = load_settings(path)
        assert getattr(s, key) == getattr(Settings(), key)
        assert s.date_url == "http://file.test/date"
        assert f"Ignoring setting {key}" in caplog.text

    def test_mistyped_duration_still_builds_engine(self, tmp_path, qapp):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"work_duration": "30"}))
        engine = TimerEngine(duration=load_settings(path).work_duration)
        assert engine.remaining == 1500


# ═══════════════════════════════════════════════════════════════════════
#  LOGGING
# ═══════════════════════════════════════════════════════════════════════


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self, monkeypatch):
        logger = logging.getLogger("pomodoro")
        handlers = list(logger.handlers)
        level, propagate = logger.level, logger.propagate
        monkeypatch.setattr(log_module, "_configured", False)
        yield
        for h in logger.handlers:
            if h not in handlers:
                h.close()
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate

    def test_writes_to_rotating_file(self, tmp_path):
        logger = configure_logging("DEBUG", log_dir=tmp_path)
        logging.getLogger("pomodoro.timer.engine").debug("hello from the engine")
        for h in logger.handlers:
            h.flush()
        text = (tmp_path / "pomodoro.log").read_text(encoding="utf-8")
        assert "hello from the engine" in text
        assert "[pomodoro.timer.engine]" in text

    def test_second_call_adds_no_handlers(self, tmp_path):
        logger = configure_logging("INFO", log_dir=tmp_path)
        count = len(logger.handlers)
        configure_logging("WARNING", log_dir=tmp_path)
        assert len(logger.handlers) == count
        assert logger.level == logging.WARNING

    @pytest.mark.parametrize("level", ["verbose", "", None])
    def test_unknown_level_falls_back_to_info(self, tmp_path, level):
        logger = configure_logging(level, log_dir=tmp_path)
        assert logger.level == logging.INFO
        for h in logger.handlers:
            h.flush()
        text = (tmp_path / "pomodoro.log").read_text(encoding="utf-8")
        assert "Unknown log level" in text

    def test_unknown_level_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("POMODORO_LOG_LEVEL", "verbose")
        settings = load_settings(tmp_path / "missing.json")
        logger = configure_logging(settings.log_level, log_dir=tmp_path)
        assert logger.level == logging.INFO


# ═══════════════════════════════════════════════════════════════════════
#  CONTEXT
# ═══════════════════════════════════════════════════════════════════════


class TestAppContext:
    def test_counter_starts_at_zero(self, context):
        assert context.total_sessions == 0

    def test_increment_emits_total(self, context):
        c = SignalCollector()
        context.session_count_changed.connect(c)
        context.increment_session_count()
        context.increment_session_count()
        assert context.total_sessions == 2
        assert c.items == [1, 2]

    def test_contexts_are_independent(self, qapp):
        a, b = AppContext(), AppContext()
        a.increment_session_count()
        assert b.total_sessions == 0
