from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi_problem.handler import new_exception_handler, add_exception_handler

from zcredits.api.api_v1.api import api_v1_router
from zcredits.config import settings
from zcredits.core.logger import logger, setup_logging
from zcredits.database.db.session import AsyncSessionLocal
from zcredits.services.admin.password_reset import PasswordResetService
from zcredits.services.conversion.rate_cache import RateCache
from zcredits.services.conversion.rate_source import database_rate_fetcher


def setup_middleware_and_handlers(app: FastAPI):
    eh = new_exception_handler()
    add_exception_handler(app, eh)


def setup_routers(app: FastAPI):
    app.include_router(api_v1_router)


def default_rate_cache() -> RateCache:
    return RateCache(
        fetch_rate=database_rate_fetcher(AsyncSessionLocal),
        ttl_seconds=settings.RATE_CACHE_TTL_SECONDS,
        fallback_rate=settings.FALLBACK_CONVERSION_RATE,
    )


def default_password_reset_service() -> PasswordResetService:
    return PasswordResetService(
        functions_url=settings.FUNCTIONS_URL,
        function_name=settings.PASSWORD_RESET_FUNCTION,
        service_key=settings.FUNCTIONS_SERVICE_KEY,
        timeout=settings.FUNCTIONS_TIMEOUT,
    )


def create_app(
        rate_cache: Optional[RateCache] = None,
        password_reset_service: Optional[PasswordResetService] = None,
        lifespan_override: Optional[Callable] = None
) -> FastAPI:
    @asynccontextmanager
    async def default_lifespan(app: FastAPI):
        setup_logging()
        app.state.rate_cache = rate_cache or default_rate_cache()
        app.state.password_reset_service = password_reset_service or default_password_reset_service()
        logger.info(f"{settings.APP_NAME} started!")
        yield
        logger.info(f"{settings.APP_NAME} stopped")

    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title="Z-Credits service",
        description="Conversion rate, PKR/Z-Credits conversion and formatting",
        version="0.0.1",
        root_path=settings.ROOT_PATH,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        lifespan=lifespan_override or default_lifespan
    )

    setup_middleware_and_handlers(app)
    setup_routers(app)

    return app
