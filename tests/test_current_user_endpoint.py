try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import copy
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from notify_utils.main import app
from notify_utils.models.records import RecordType


@pytest.fixture()
def auth_overrides(record_store):
    from notify_utils import dependencies
    from notify_utils.core.config import get_settings

    settings = copy.deepcopy(get_settings())
    settings.access_token.cookie_name = "cookie-token"
    settings.access_token.header_name = "header-token"
    settings.access_token.max_age = 3600
    settings.access_token.origin = "http://foo.com"

    now = datetime.now(timezone.utc)
    record_store.add(RecordType.USERS, {"id": "a0", "name": "luca"})
    record_store.add(
        RecordType.TOKENS,
        {
            "id": "1",
            "value": "abc123",
            "created": (now - timedelta(minutes=5)).isoformat(),
            "origin": "http://foo.com",
            "user": "a0",
        },
    )
    record_store.add(
        RecordType.TOKENS,
        {
            "id": "2",
            "value": "expired",
            "created": (now - timedelta(hours=2)).isoformat(),
            "origin": "http://foo.com",
            "user": "a0",
        },
    )

    overrides = {
        dependencies.get_record_store: lambda: record_store,
        dependencies.get_app_settings: lambda: settings,
    }
    app.dependency_overrides.update(overrides)

    yield record_store

    app.dependency_overrides.clear()


async def _get_me(**kwargs) -> httpx.Response:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        return await client.get("/api/me", **kwargs)


@pytest.mark.anyio
async def test_health_does_not_require_token() -> None:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_me_resolves_user_from_cookie(auth_overrides):
    response = await _get_me(headers={"cookie": "cookie-token=abc123"})

    assert response.status_code == 200
    assert response.json() == {"id": "a0", "name": "luca"}


@pytest.mark.anyio
async def test_me_resolves_user_from_header(auth_overrides):
    response = await _get_me(headers={"header-token": "abc123"})

    assert response.status_code == 200
    assert response.json()["id"] == "a0"


@pytest.mark.anyio
async def test_me_without_token_is_unauthorized(auth_overrides):
    response = await _get_me()

    assert response.status_code == 401
    assert auth_overrides.find_calls == []


@pytest.mark.anyio
async def test_me_with_unknown_token_is_unauthorized(auth_overrides):
    response = await _get_me(headers={"header-token": "unknown"})

    assert response.status_code == 401
    assert auth_overrides.delete_calls == []


@pytest.mark.anyio
async def test_me_with_expired_token_removes_it(auth_overrides):
    response = await _get_me(headers={"cookie": "cookie-token=expired"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Not authenticated."}
    assert auth_overrides.delete_calls == [(RecordType.TOKENS, "2")]


@pytest.mark.anyio
async def test_me_resolves_user_with_integer_ids(auth_overrides):
    auth_overrides.add(RecordType.USERS, {"id": 7, "name": "maria"})
    auth_overrides.add(
        RecordType.TOKENS,
        {
            "id": 3,
            "value": "numeric",
            "created": datetime.now(timezone.utc).isoformat(),
            "origin": "http://foo.com",
            "user": 7,
        },
    )

    response = await _get_me(headers={"header-token": "numeric"})

    assert response.status_code == 200
    assert response.json() == {"id": 7, "name": "maria"}


@pytest.mark.anyio
async def test_me_with_malformed_token_record_is_unauthorized(auth_overrides):
    auth_overrides.add(
        RecordType.TOKENS, {"id": "4", "value": "broken", "user": "a0"}
    )

    response = await _get_me(headers={"header-token": "broken"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Not authenticated."}
    assert auth_overrides.delete_calls == []
