"""Tests for the server reachability check."""

import httpx
import pytest

from couchdoc.config import AppConfig, CouchConfig, Settings
from couchdoc.health import check_server


def _settings(url: str) -> Settings:
    return Settings(
        couch=CouchConfig(url=url, database="db", username="", password="", timeout=1.0),
        app=AppConfig(env="test", log_level="INFO"),
    )


@pytest.mark.unit
async def test_reachable_server():
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json={"couchdb": "Welcome"})

    ok = await check_server(
        _settings("http://couch.local:5984/some/db"), transport=httpx.MockTransport(handler)
    )

    assert ok is True
    assert paths == ["/"]


@pytest.mark.unit
async def test_missing_url():
    assert await check_server(_settings("")) is False


@pytest.mark.unit
async def test_connection_refused(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    ok = await check_server(
        _settings("http://couch.local:5984"), transport=httpx.MockTransport(handler)
    )

    assert ok is False
    assert "not reachable" in caplog.text


@pytest.mark.unit
@pytest.mark.parametrize("error_class", [httpx.ConnectTimeout, httpx.ReadTimeout])
async def test_timeouts_report_unreachable(error_class, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error_class("timed out", request=request)

    ok = await check_server(
        _settings("http://couch.local:5984"), transport=httpx.MockTransport(handler)
    )

    assert ok is False
    assert "not reachable" in caplog.text


@pytest.mark.unit
async def test_error_status():
    ok = await check_server(
        _settings("http://couch.local:5984"),
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )

    assert ok is False
