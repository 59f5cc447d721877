"""Exception handlers and the error envelope."""

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from incident_tracking.exceptions import DomainError, InvalidPageSizeError
from incident_tracking.main import app

FAILING_PREFIX = "/failing"


@pytest.fixture
def failing_routes() -> Iterator[None]:
    """Mount routes that raise, and remove them after the test."""

    async def invalid_page_size() -> None:
        raise InvalidPageSizeError(0)

    async def rule_violation() -> None:
        raise DomainError("incident already closed")

    async def crash() -> None:
        raise RuntimeError("password=hunter2 rejected by db01.internal")

    app.add_api_route(f"{FAILING_PREFIX}/page-size", invalid_page_size)
    app.add_api_route(f"{FAILING_PREFIX}/domain", rule_violation)
    app.add_api_route(f"{FAILING_PREFIX}/crash", crash)
    yield
    app.router.routes[:] = [
        route
        for route in app.router.routes
        if not getattr(route, "path", "").startswith(FAILING_PREFIX)
    ]


@pytest_asyncio.fixture
async def raw_client(failing_routes: None) -> AsyncIterator[AsyncClient]:
    """Client that returns 500 responses instead of re-raising the app's exception."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client


@pytest.mark.asyncio
async def test_invalid_page_size_returns_400(raw_client: AsyncClient) -> None:
    resp = await raw_client.get(f"{FAILING_PREFIX}/page-size")
    assert resp.status_code == 400
    assert resp.json() == {
        "error": {"code": "invalid_page_size", "message": "page size must be at least 1, got 0"}
    }


@pytest.mark.asyncio
async def test_domain_error_returns_400(raw_client: AsyncClient) -> None:
    resp = await raw_client.get(f"{FAILING_PREFIX}/domain")
    assert resp.status_code == 400
    assert resp.json() == {"error": {"code": "domain_error", "message": "incident already closed"}}


@pytest.mark.asyncio
async def test_unhandled_exception_returns_generic_500(raw_client: AsyncClient) -> None:
    resp = await raw_client.get(f"{FAILING_PREFIX}/crash")
    assert resp.status_code == 500
    assert resp.json() == {"error": {"code": "internal_error", "message": "Internal server error"}}
    assert "hunter2" not in resp.text
    assert "db01" not in resp.text
