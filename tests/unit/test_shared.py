"""
Unit tests for the shared/ utility modules.

Covers:
- shared.datetime_utils  (fixed_offset, format_in_zone, utc_now)
- utils.logging_config   (redact_sensitive_fields, import-time defaults)
- dependencies           (configure_logging)
"""

from __future__ import annotations

import importlib
import json
import logging
import sys
import time
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from config import AppSettings, LoggingSettings
from dependencies import configure_logging
from shared.datetime_utils import UTC8, fixed_offset, format_in_zone, utc_now
from shared.logging import get_logger, setup_logging
from utils import logging_config
from utils.logging_config import redact_sensitive_fields


class TestFixedOffset:
    def test_utc8(self):
        assert UTC8.utcoffset(None) == timedelta(hours=8)

    def test_negative_offset(self):
        assert fixed_offset(-5).utcoffset(None) == timedelta(hours=-5)

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            fixed_offset(24)


class TestFormatInZone:
    def test_converts_to_utc8_across_midnight(self):
        moment = datetime(2024, 12, 31, 20, 0, 0, tzinfo=timezone.utc)
        assert format_in_zone(moment, UTC8) == "2025-01-01 04:00:00"

    def test_drops_sub_second_precision(self):
        moment = datetime(2024, 1, 1, 0, 0, 0, 999999, tzinfo=timezone.utc)
        assert format_in_zone(moment, UTC8) == "2024-01-01 08:00:00"

    def test_naive_is_treated_as_utc(self):
        assert format_in_zone(datetime(2024, 1, 1, 0, 0, 0), UTC8) == "2024-01-01 08:00:00"

    def test_does_not_touch_process_timezone(self):
        before = time.tzname
        format_in_zone(utc_now(), fixed_offset(-3))
        assert time.tzname == before


class TestUtcNow:
    def test_is_aware_utc(self):
        assert utc_now().utcoffset() == timedelta(0)


class TestRedactSensitiveFields:
    def test_redacts_webhook_url_and_keys(self):
        event = {
            "event": "wecom_alert_sent",
            "webhook_url": "https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=abc",
            "api_key": "abc",
            "group": "infra",
        }
        out = redact_sensitive_fields(None, "info", event)
        assert out["webhook_url"] == "***REDACTED***"
        assert out["api_key"] == "***REDACTED***"
        assert out["group"] == "infra"
        assert out["event"] == "wecom_alert_sent"

    def test_keeps_webhook_host(self):
        out = redact_sensitive_fields(None, "info", {"webhook_host": "qyapi.weixin.qq.com"})
        assert out["webhook_host"] == "qyapi.weixin.qq.com"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_logging(self):
        yield
        with patch.object(sys, "stdout", sys.__stdout__):
            setup_logging()

    def test_applies_level_from_settings(self):
        configure_logging(AppSettings(logging=LoggingSettings(log_level="ERROR")))
        assert logging.getLogger().level == logging.ERROR

    def test_level_can_be_changed_twice(self):
        configure_logging(AppSettings(logging=LoggingSettings(log_level="ERROR")))
        configure_logging(AppSettings(logging=LoggingSettings(log_level="DEBUG")))
        assert logging.getLogger().level == logging.DEBUG

    def test_format_switch_reaches_existing_module_logger(self, capsys):
        log = get_logger("tests.format_switch")
        configure_logging(AppSettings(logging=LoggingSettings(log_format="console")))
        log.info("before_switch")
        capsys.readouterr()

        configure_logging(
            AppSettings(logging=LoggingSettings(log_level="INFO", log_format="json"))
        )
        log.info("after_switch", group="infra")
        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        record = json.loads(lines[-1])
        assert record["event"] == "after_switch"
        assert record["group"] == "infra"

    def test_import_time_defaults_match_settings(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        reloaded = importlib.reload(logging_config)
        assert reloaded.LOG_LEVEL == LoggingSettings().log_level == "INFO"
        assert reloaded.LOG_FORMAT == LoggingSettings().log_format
        assert logging.getLogger().level == logging.INFO
