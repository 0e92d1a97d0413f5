"""Tests for randbk.utils.logs: syslog with stderr fallback."""

import logging
from pathlib import Path
from typing import Any

import pytest
from randbk.utils import logs


class TestConfigureLogging:
    def test_missing_socket_uses_stderr(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(logs.logging, "basicConfig", lambda **kw: calls.append(kw))
        logs.configure_logging(str(tmp_path / "no-such-socket"))
        assert calls == [{"level": logging.DEBUG, "format": logs.LOG_FORMAT}]

    def test_no_handler_for_missing_socket(self, tmp_path: Path) -> None:
        assert logs._syslog_handler(str(tmp_path / "no-such-socket")) is None

    def test_syslog_handler_installed(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        socket_path = tmp_path / "log"
        socket_path.touch()
        handler = logging.NullHandler()
        monkeypatch.setattr(logs, "_syslog_handler", lambda _path: handler)
        root = logging.getLogger()
        monkeypatch.setattr(root, "level", root.level)
        try:
            logs.configure_logging(str(socket_path))
            assert handler in root.handlers
            assert root.level == logging.DEBUG
        finally:
            root.removeHandler(handler)
