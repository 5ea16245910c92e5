import secrets

from fastapi import Header
from rfc9457 import ForbiddenProblem

from zcredits.config import settings


async def require_admin_api_key(x_api_key: str | None = Header(None)) -> None:
    if not settings.ADMIN_API_KEY or not x_api_key \
            or not secrets.compare_digest(x_api_key, settings.ADMIN_API_KEY):
        raise ForbiddenProblem(detail="A valid admin API key is required")
