from __future__ import annotations

import json
import logging
import time

from stackblitz_zip.cancellation import CancellationToken, Deadline
from stackblitz_zip.config import _env_number, project_url
from stackblitz_zip.logging import JsonFormatter, diag_level


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.makeLogRecord(
        {"name": "stackblitz_zip", "levelname": "INFO", "msg": "Adding file: %s", "args": ("a",)}
    )
    record.bytes = 12
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "Adding file: a"
    assert payload["level"] == "INFO"
    assert payload["bytes"] == 12
    assert "args" not in payload and "ts" in payload


def test_diag_level_follows_verbose_flag() -> None:
    assert diag_level(True) == logging.INFO
    assert diag_level(False) == logging.DEBUG


def test_env_number_falls_back_on_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("SBZ_TEST_LIMIT", "2048")
    assert _env_number("SBZ_TEST_LIMIT", 1) == 2048
    monkeypatch.setenv("SBZ_TEST_LIMIT", "lots")
    assert _env_number("SBZ_TEST_LIMIT", 1) == 1
    monkeypatch.setenv("SBZ_TEST_LIMIT", "-5")
    assert _env_number("SBZ_TEST_LIMIT", 1) == 1
    monkeypatch.delenv("SBZ_TEST_LIMIT")
    assert _env_number("SBZ_TEST_LIMIT", 2.5, float) == 2.5


def test_project_url_template() -> None:
    assert project_url("abc") == "https://stackblitz.com/api/projects/abc?include_files=true"


def test_deadline_fires_and_disarms() -> None:
    with Deadline(0.05) as deadline:
        assert not deadline.expired()
        time.sleep(0.2)
        assert deadline.expired()
        assert deadline.token.is_cancelled()
        assert deadline.remaining() == 0.0

    token = CancellationToken()
    with Deadline(5.0, token) as deadline:
        assert deadline.remaining() > 4.0
    time.sleep(0.05)
    assert not token.is_cancelled()
