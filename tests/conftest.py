"""Shared test fixtures."""

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from zcredits.config import settings
from zcredits.core.app_factory import create_app
from zcredits.database.db.session import get_async_db, init_models
from zcredits.services.admin.password_reset import PasswordResetService
from zcredits.services.conversion.rate_cache import RateCache

ADMIN_API_KEY = "test-admin-key"


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubRateFetcher:
    """Returns (or raises) the queued results in order, repeating the last one."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    async def __call__(self) -> float:
        self.calls += 1
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, BaseException):
            raise result
        return result


class RecordingTransport(httpx.AsyncBaseTransport):
    """Answers every request with ``response`` and keeps the requests."""

    def __init__(self, response: httpx.Response | Exception | None = None):
        self.response = response if response is not None else httpx.Response(200, json={"success": True})
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_fetcher():
    return StubRateFetcher(90.0)


@pytest.fixture
def rate_cache(rate_fetcher, clock):
    return RateCache(fetch_rate=rate_fetcher, clock=clock)


@pytest.fixture
def reset_transport():
    return RecordingTransport()


@pytest.fixture
def password_reset_service(reset_transport):
    return PasswordResetService(
        functions_url="https://functions.example.com/v1",
        function_name="admin-reset-password",
        service_key="service-key",
        transport=reset_transport,
    )


@pytest.fixture
async def db_engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(rate_cache, password_reset_service, session_factory):
    app = create_app(rate_cache=rate_cache, password_reset_service=password_reset_service)

    async def override_get_async_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    return app


@pytest.fixture
async def client(app):
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def admin_headers(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_API_KEY", ADMIN_API_KEY)
    return {"X-API-Key": ADMIN_API_KEY}
