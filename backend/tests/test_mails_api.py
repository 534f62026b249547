"""Tests for mails API: pagination, validation errors, response shape."""

import logging
import re

import pytest
from httpx import AsyncClient
from prometheus_client import REGISTRY

from inbox_api.config import settings
from inbox_api.core.errors import InvalidRangeError, SourceUnavailableError
from inbox_api.db.mail_source import get_mail_source
from inbox_api.main import app

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _ids(resp) -> list[int]:
    return [m["id"] for m in resp.json()["mails"]]


@pytest.mark.asyncio
async def test_list_mails_default_params(client: AsyncClient):
    resp = await client.get("/mails")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    data = resp.json()
    assert set(data) == {"mails", "totalCount"}
    assert data["totalCount"] == 20
    assert _ids(resp) == list(range(1, 11))


@pytest.mark.asyncio
async def test_list_mails_take_and_skip(client: AsyncClient):
    resp = await client.get("/mails?take=3&skip=5")
    assert resp.status_code == 200
    assert _ids(resp) == [6, 7, 8]
    assert resp.json()["totalCount"] == 20


@pytest.mark.asyncio
async def test_list_mails_large_skip(client: AsyncClient):
    resp = await client.get("/mails?skip=1000")
    assert resp.status_code == 200
    assert resp.json() == {"mails": [], "totalCount": 20}


@pytest.mark.asyncio
async def test_list_mails_large_take(client: AsyncClient):
    resp = await client.get("/mails?take=10000")
    assert resp.status_code == 200
    assert len(resp.json()["mails"]) == 20


@pytest.mark.asyncio
async def test_total_count_is_constant(client: AsyncClient):
    r1 = await client.get("/mails?take=5&skip=0")
    r2 = await client.get("/mails?take=10&skip=5")
    assert r1.json()["totalCount"] == r2.json()["totalCount"]


@pytest.mark.asyncio
async def test_mail_structure(client: AsyncClient):
    resp = await client.get("/mails?take=20")
    assert resp.status_code == 200
    mails = resp.json()["mails"]
    assert len({m["id"] for m in mails}) == len(mails)
    for mail in mails:
        assert {"id", "from", "subject", "body", "date"} <= set(mail)
        assert isinstance(mail["id"], int)
        assert isinstance(mail["from"]["name"], str)
        assert EMAIL_RE.match(mail["from"]["email"])
        if "unread" in mail:
            assert mail["unread"] is True
        if "avatar" in mail["from"]:
            assert mail["from"]["avatar"]["src"].startswith("https://")


@pytest.mark.asyncio
async def test_optional_fields_omitted_when_absent(fake_client: AsyncClient):
    resp = await fake_client.get("/mails")
    mails = resp.json()["mails"]
    assert "unread" not in mails[0]
    assert mails[1]["unread"] is True
    assert "avatar" not in mails[2]["from"]
    assert mails[0]["from"]["avatar"] == {"src": "https://example.com/avatar1.jpg"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "query,expected_ids",
    [
        ("take=10&skip=0", [1, 2, 3]),
        ("", [1, 2, 3]),
        ("take=2&skip=1", [2, 3]),
        ("take=10&skip=5", []),
        ("take=2.5&skip=1.7", [2, 3]),
        ("take=1", [1]),
        ("skip=0", [1, 2, 3]),
        ("unknown=value&take=2", [1, 2]),
    ],
)
async def test_fake_source_pagination(fake_client: AsyncClient, query, expected_ids):
    resp = await fake_client.get(f"/mails?{query}")
    assert resp.status_code == 200
    assert _ids(resp) == expected_ids
    assert resp.json()["totalCount"] == 3


@pytest.mark.asyncio
async def test_invalid_take(client: AsyncClient):
    resp = await client.get("/mails?take=invalid")
    assert resp.status_code == 400
    assert resp.json() == {
        "statusCode": 400,
        "message": ["take must be a valid number"],
        "error": "Bad Request",
    }


@pytest.mark.asyncio
async def test_invalid_skip(client: AsyncClient):
    resp = await client.get("/mails?skip=invalid")
    assert resp.status_code == 400
    assert "skip must be a valid number" in resp.json()["message"]


@pytest.mark.asyncio
async def test_invalid_take_and_skip(client: AsyncClient):
    resp = await client.get("/mails?take=invalid&skip=invalid")
    assert resp.status_code == 400
    assert resp.json()["message"] == ["take must be a valid number", "skip must be a valid number"]


@pytest.mark.asyncio
async def test_empty_take_is_invalid(client: AsyncClient):
    resp = await client.get("/mails?take=")
    assert resp.status_code == 400
    assert resp.json()["message"] == ["take must be a valid number"]


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["take=0", "take=-1", "skip=-1", "take=.5"])
async def test_out_of_range_params(client: AsyncClient, query):
    resp = await client.get(f"/mails?{query}")
    assert resp.status_code == 400
    assert resp.json() == {"statusCode": 400, "message": "Invalid take, skip", "error": "Bad Request"}


@pytest.mark.asyncio
async def test_source_unavailable_returns_500(client: AsyncClient):
    class BrokenSource:
        def fetch_all(self):
            raise SourceUnavailableError()

        def count(self):
            raise SourceUnavailableError()

    app.dependency_overrides[get_mail_source] = lambda: BrokenSource()
    try:
        resp = await client.get("/mails")
    finally:
        app.dependency_overrides.pop(get_mail_source, None)
    assert resp.status_code == 500
    assert resp.json()["message"] == "Error getting mails from database"


@pytest.mark.asyncio
async def test_source_error_in_dependency_returns_500(client: AsyncClient):
    def failing_source():
        raise SourceUnavailableError()

    app.dependency_overrides[get_mail_source] = failing_source
    try:
        resp = await client.get("/mails")
    finally:
        app.dependency_overrides.pop(get_mail_source, None)
    assert resp.status_code == 500
    assert resp.json() == {
        "statusCode": 500,
        "message": "Error getting mails from database",
        "error": "Internal Server Error",
    }


@pytest.mark.asyncio
async def test_head_mails(client: AsyncClient):
    resp = await client.head("/mails")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_security_headers(client: AsyncClient):
    resp = await client.get("/mails?take=1")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def _page_requests(outcome: str) -> float:
    return REGISTRY.get_sample_value("inbox_mail_page_requests_total", {"outcome": outcome}) or 0.0


@pytest.mark.asyncio
async def test_metrics_count_mail_pages(client: AsyncClient):
    before = {o: _page_requests(o) for o in ("ok", "client_error", "server_error")}
    await client.get("/mails?take=1")
    await client.get("/mails?take=invalid")

    def failing_source():
        raise SourceUnavailableError()

    app.dependency_overrides[get_mail_source] = failing_source
    try:
        await client.get("/mails")
    finally:
        app.dependency_overrides.pop(get_mail_source, None)

    assert _page_requests("ok") - before["ok"] == 1
    assert _page_requests("client_error") - before["client_error"] == 1
    assert _page_requests("server_error") - before["server_error"] == 1

    resp = await client.get("/metrics/")
    assert resp.status_code == 200
    assert 'inbox_mail_page_requests_total{outcome="server_error"}' in resp.text


@pytest.mark.asyncio
async def test_client_error_from_dependency_is_logged(client: AsyncClient, caplog):
    def rejecting_source():
        raise InvalidRangeError("take must be a positive number (minimum 1)")

    app.dependency_overrides[get_mail_source] = rejecting_source
    try:
        with caplog.at_level(logging.WARNING, logger="inbox_api"):
            resp = await client.get("/mails")
    finally:
        app.dependency_overrides.pop(get_mail_source, None)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid take, skip"
    assert any(r.levelno == logging.WARNING and "rejected" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "query,expected_ids",
    [("take=1" + "0" * 5000, [1, 2, 3]), ("skip=1" + "0" * 5000, [])],
)
async def test_huge_numeric_params(fake_client: AsyncClient, query, expected_ids):
    resp = await fake_client.get(f"/mails?{query}")
    assert resp.status_code == 200
    assert _ids(resp) == expected_ids
    assert resp.json()["totalCount"] == 3


def test_app_debug_follows_settings():
    assert app.debug is settings.debug
