"""Tests for structured logging helpers."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from fieldrules import __version__
from fieldrules import logging as fieldrules_logging
from fieldrules.config import Settings
from fieldrules.logging import (
    LoggerRegistry,
    _add_library_info,
    _censor_sensitive_keys,
    bind_context,
    clear_context,
    configure_logging,
    unbind_context,
)
from fieldrules.messages import MessageCatalog
from fieldrules.validation import min_length, validate_form, required


class TestProcessors:

    def test_censor_sensitive_keys(self):
        event = {"event": "x", "password": "hunter2", "nested": {"Token": "abc", "field": "email"},
                 "items": [{"value": 3}]}
        censored = _censor_sensitive_keys(None, "info", event)

        assert censored["password"] == "[REDACTED]"
        assert censored["nested"] == {"Token": "[REDACTED]", "field": "email"}
        assert censored["items"] == [{"value": "[REDACTED]"}]
        assert censored["event"] == "x"

    def test_library_info(self):
        event = _add_library_info(None, "info", {"event": "x"})
        assert event["library"] == "fieldrules"
        assert event["version"] == __version__


class TestEvents:

    def test_rejected_configuration_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(ValueError):
                min_length(0)

        assert logs == [{
            "event": "rule_configuration_rejected",
            "log_level": "warning",
            "rule": "min_length",
            "reason": "length must be a positive integer",
        }]

    def test_form_validation_is_logged(self):
        with capture_logs() as logs:
            validate_form({"name": required()}, {"name": ""})

        assert logs[-1]["event"] == "form_validated"
        assert logs[-1]["error_count"] == 1

    def test_rule_evaluation_does_not_log(self):
        rule = required() & min_length(2)
        with capture_logs() as logs:
            rule("")
            rule("abc")
        assert logs == []

    def test_locale_fallback_is_logged(self):
        with capture_logs() as logs:
            MessageCatalog.load("de-CH")
        assert {"event": "catalog_fallback", "log_level": "debug", "requested": "de_CH", "loaded": "de"} in logs

    def test_registry_reuses_loggers(self):
        assert LoggerRegistry.get("rules") is LoggerRegistry.get("rules")


class TestContext:

    def test_bind_and_unbind(self):
        clear_context()
        try:
            bind_context(request_id="r1", form="signup")
            assert structlog.contextvars.get_contextvars() == {"request_id": "r1", "form": "signup"}
            unbind_context("form")
            assert structlog.contextvars.get_contextvars() == {"request_id": "r1"}
        finally:
            clear_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestConfigure:

    @pytest.fixture(autouse=True)
    def restore_structlog(self):
        library_logger = logging.getLogger("fieldrules")
        saved = (library_logger.handlers[:], library_logger.level, library_logger.propagate)
        yield
        structlog.reset_defaults()
        library_logger.handlers, library_logger.level, library_logger.propagate = saved

    @pytest.mark.parametrize("json_logs", [False, True])
    def test_installs_library_handler(self, json_logs):
        configure_logging("debug", json_logs=json_logs)

        library_logger = logging.getLogger("fieldrules")
        assert library_logger.level == logging.DEBUG
        assert library_logger.propagate is False
        assert len(library_logger.handlers) == 1
        assert isinstance(library_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_defaults_come_from_settings(self, monkeypatch):
        monkeypatch.setenv("FIELDRULES_LOG_JSON", "true")
        monkeypatch.setenv("FIELDRULES_LOG_LEVEL", "warning")
        monkeypatch.setattr(fieldrules_logging, "settings", Settings(_env_file=None))
        configure_logging()

        library_logger = logging.getLogger("fieldrules")
        assert library_logger.level == logging.WARNING
        assert isinstance(library_logger.handlers[0].formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_arguments_override_settings(self, monkeypatch):
        monkeypatch.setattr(fieldrules_logging.settings, "LOG_JSON", True)
        configure_logging("error", json_logs=False)

        library_logger = logging.getLogger("fieldrules")
        assert library_logger.level == logging.ERROR
        assert isinstance(library_logger.handlers[0].formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger("fieldrules").level == logging.INFO

    def test_json_output(self, capsys):
        configure_logging("INFO", json_logs=True)
        structlog.get_logger("fieldrules.test").info("hello", password="secret")

        out = capsys.readouterr().out
        assert '"event": "hello"' in out
        assert '"password": "[REDACTED]"' in out
