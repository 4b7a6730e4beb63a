"""
Unit tests for logging setup.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import logging

import pytest

from src.common import logging as logging_module
from src.common import settings as settings_module


def test_configure_logging_runs_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_module, "_LOGGING_CONFIGURED", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    settings_module.get_settings.cache_clear()

    logging_module.configure_logging()
    logging_module.configure_logging()

    assert len(calls) == 1
    assert calls[0]["level"] == logging.WARNING
    assert "%(levelname)s" in str(calls[0]["format"])
    settings_module.get_settings.cache_clear()
