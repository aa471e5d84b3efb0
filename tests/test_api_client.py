"""Unit tests for ApiClient / ApiClientBuilder."""

from __future__ import annotations

import logging

import httpx
import pytest

from adapters.api_client import ApiClient, ApiClientBuilder
from core.errors import InvalidResponseError, SourceRequestError
from tests.conftest import RecordingTransport


def test_builder_chains_and_last_write_wins():
    client = (
        ApiClientBuilder("https://example.test/api/", "agent/1.0")
        .set_param("page", 1)
        .set_param("q", "serde")
        .set_param("page", 3)
        .build()
    )

    assert isinstance(client, ApiClient)
    assert client.params == {"page": "3", "q": "serde"}
    assert client.user_agent == "agent/1.0"


def test_builder_does_not_share_params_with_built_client():
    builder = ApiClientBuilder("https://example.test/", "ua").set_param("a", "1")
    client = builder.build()
    builder.set_param("b", "2")

    assert client.params == {"a": "1"}


def test_url_for_is_plain_concatenation():
    assert ApiClient("https://crates.io/api/v1/", "ua").url_for("crates") == "https://crates.io/api/v1/crates"
    assert ApiClient("https://index.docker.io/v1/search", "ua").url_for("") == "https://index.docker.io/v1/search"


@pytest.mark.asyncio
async def test_get_sends_params_and_user_agent(settings, json_transport):
    transport = json_transport({"crates": []})
    client = ApiClient("https://example.test/api/", "my_crawler (help@my_crawler.com)")
    client.set_param("q", "tokio").set_param("per_page", 5)

    data = await client.get("crates", settings=settings, transport=transport)

    assert data == {"crates": []}
    request = transport.last
    assert request.method == "GET"
    assert request.url.path == "/api/crates"
    assert request.url.params["q"] == "tokio"
    assert request.url.params["per_page"] == "5"
    assert request.headers["User-Agent"] == "my_crawler (help@my_crawler.com)"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [404, 302, 503])
async def test_get_returns_json_error_bodies_unchanged(settings, json_transport, pkgsearch_caplog, status_code):
    transport = json_transport({"errors": [{"detail": "Not Found"}]}, status_code=status_code)

    data = await ApiClient("https://example.test/", "ua").get("missing", settings=settings, transport=transport)

    assert data == {"errors": [{"detail": "Not Found"}]}
    warnings = [
        r for r in pkgsearch_caplog.records
        if r.name == "pkgsearch.adapters.api_client" and r.levelno == logging.WARNING
    ]
    assert len(warnings) == 1
    assert f"HTTP {status_code}" in warnings[0].getMessage()


@pytest.mark.asyncio
async def test_get_success_logs_no_warning(settings, json_transport, pkgsearch_caplog):
    await ApiClient("https://example.test/", "ua").get("ok", settings=settings, transport=json_transport())

    assert not [r for r in pkgsearch_caplog.records if r.levelno >= logging.WARNING]


@pytest.mark.asyncio
async def test_fetch_returns_raw_response(settings, json_transport):
    transport = json_transport({"ok": False}, status_code=500)

    response = await ApiClient("https://example.test/", "ua").fetch("x", settings=settings, transport=transport)

    assert response.status_code == 500
    assert response.json() == {"ok": False}


@pytest.mark.asyncio
async def test_get_rejects_non_json_body(settings):
    transport = RecordingTransport(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))

    with pytest.raises(InvalidResponseError) as excinfo:
        await ApiClient("https://example.test/", "ua").get("x", settings=settings, transport=transport)

    assert excinfo.value.status_code == 502
    assert "https://example.test/x" in str(excinfo.value)


@pytest.mark.asyncio
async def test_get_wraps_transport_errors(settings, failing_transport):
    with pytest.raises(SourceRequestError) as excinfo:
        await ApiClient("https://example.test/", "ua").get("x", settings=settings, transport=failing_transport)

    assert excinfo.value.source_url == "https://example.test/x"
    assert "connection refused" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
