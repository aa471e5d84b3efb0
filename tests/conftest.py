"""Shared test fixtures."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import sys
from typing import Any, Callable

import httpx
import pytest


SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from core.config import AppSettings  # noqa: E402


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings(monkeypatch, tmp_path) -> AppSettings:
    """Settings isolated from any .env on the machine."""

    for key in list(os.environ):
        if key.upper().startswith("PKGSEARCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return AppSettings(_env_file=None)


@pytest.fixture
def json_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with the same JSON body."""

    def _factory(payload: Any = None, status_code: int = 200) -> RecordingTransport:
        body = {"ok": True} if payload is None else payload
        return RecordingTransport(lambda request: httpx.Response(status_code, json=body))

    return _factory


@pytest.fixture
def failing_transport() -> RecordingTransport:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return RecordingTransport(_fail)


@pytest.fixture
def pkgsearch_caplog(caplog, monkeypatch):
    """caplog that also sees records from the non-propagating `pkgsearch` logger."""

    monkeypatch.setattr(logging.getLogger("pkgsearch"), "propagate", True)
    caplog.set_level(logging.DEBUG, logger="pkgsearch")
    return caplog
