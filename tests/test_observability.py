from __future__ import annotations

import logging

from configgen import observability


def test_configure_logging_sets_level_once(monkeypatch):
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(observability, "_LOG_CONFIGURED", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    observability.configure_logging("debug")

    assert calls[0]["level"] == logging.DEBUG
    assert "%(levelname)s" in calls[0]["format"]
    assert observability._LOG_CONFIGURED is True


def test_configure_logging_updates_root_level(monkeypatch):
    monkeypatch.setattr(observability, "_LOG_CONFIGURED", True)
    root = logging.getLogger()
    previous = root.level
    try:
        observability.configure_logging("warning")
        assert root.level == logging.WARNING

        observability.configure_logging("bogus")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
