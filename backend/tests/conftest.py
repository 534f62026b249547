"""Pytest configuration and shared fixtures for API tests."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set env before app imports so config picks it up
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("MAILS_SOURCE_PATH", "")

from inbox_api.db.mail_source import StaticMailSource, get_mail_source
from inbox_api.main import app
from inbox_api.schemas.mail import Mail


def make_mail(mail_id: int, **overrides) -> Mail:
    data = {
        "id": mail_id,
        "from": {
            "name": f"Test User {mail_id}",
            "email": f"test{mail_id}@example.com",
            "avatar": {"src": f"https://example.com/avatar{mail_id}.jpg"},
        },
        "subject": f"Test Subject {mail_id}",
        "body": f"Test Body {mail_id}",
        "date": f"2024-01-0{mail_id}T00:00:00.000Z",
    }
    data.update(overrides)
    return Mail.model_validate(data)


@pytest.fixture
def three_mails() -> tuple[Mail, ...]:
    """Mails 1..3: #2 unread, #3 without avatar."""
    return (
        make_mail(1),
        make_mail(2, unread=True),
        make_mail(3, **{"from": {"name": "Test User 3", "email": "test3@example.com"}}),
    )


@pytest.fixture
def fake_source(three_mails) -> StaticMailSource:
    return StaticMailSource(three_mails)


@pytest_asyncio.fixture
async def client():
    """AsyncClient against the app with its built-in mail source."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def fake_client(fake_source):
    """AsyncClient with the mail source replaced by the three-mail fake."""
    app.dependency_overrides[get_mail_source] = lambda: fake_source
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_mail_source, None)
