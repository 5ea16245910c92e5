from fastapi import APIRouter, Body, Depends
from rfc9457 import BadRequestProblem, ForbiddenProblem, NotFoundProblem, ServerProblem

from zcredits.core.dependencies import get_password_reset_service
from zcredits.schemas.admin import PasswordResetIn
from zcredits.services.admin.exceptions import PasswordResetError
from zcredits.services.admin.password_reset import PasswordResetResult, PasswordResetService

password_reset_router = APIRouter(prefix='/admin', tags=["admin"])


def _problem_for(error: PasswordResetError):
    status_code = error.status_code
    if status_code in (401, 403):
        return ForbiddenProblem(detail=error.message)
    if status_code == 404:
        return NotFoundProblem(detail=error.message)
    if status_code is not None and 400 <= status_code < 500:
        return BadRequestProblem(detail=error.message)
    return ServerProblem(detail=error.message)


@password_reset_router.post("/password-reset", response_model=PasswordResetResult)
async def reset_password(data: PasswordResetIn = Body(...),
                         service: PasswordResetService = Depends(get_password_reset_service)):
    try:
        return await service.reset_password(data.user_id, data.new_password)
    except PasswordResetError as e:
        raise _problem_for(e) from e
