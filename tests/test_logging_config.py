"""Tests for mars_rover.logging_config."""

from __future__ import annotations

import logging

from mars_rover.logging_config import configure_logging


def test_configure_logging_quiets_werkzeug(monkeypatch) -> None:
    werkzeug = logging.getLogger("werkzeug")
    monkeypatch.setattr(werkzeug, "level", logging.NOTSET)
    configure_logging("debug")
    assert werkzeug.level == logging.WARNING
