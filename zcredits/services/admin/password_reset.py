from uuid import UUID

import httpx
from pydantic import BaseModel

from zcredits.core.logger import logger
from zcredits.services.admin.exceptions import PasswordResetError


class PasswordResetResult(BaseModel):
    user_id: UUID
    success: bool = True
    message: str = "Password has been changed successfully"


class PasswordResetService:
    """Invokes the remote admin password-reset function for a single user."""

    def __init__(self,
                 functions_url: str,
                 function_name: str,
                 service_key: str | None = None,
                 timeout: float = 10.0,
                 transport: httpx.AsyncBaseTransport | None = None):
        self.url = f"{functions_url.rstrip('/')}/{function_name}"
        self.service_key = service_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.service_key:
            headers["Authorization"] = f"Bearer {self.service_key}"
        return headers

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return "Failed to reset password"
        if isinstance(body, dict):
            return body.get("error") or body.get("message") or "Failed to reset password"
        return "Failed to reset password"

    async def reset_password(self, user_id: UUID, new_password: str) -> PasswordResetResult:
        logger.info("Password reset requested", extra={'user_id': str(user_id)})
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.url,
                    json={"user_id": str(user_id), "new_password": new_password},
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logger.error('Password reset function is unreachable', exc_info=e,
                         extra={'user_id': str(user_id)})
            raise PasswordResetError() from e

        if response.is_error:
            message = self._error_message(response)
            logger.error(f'Password reset failed: {message}',
                         extra={'user_id': str(user_id), 'status_code': response.status_code})
            raise PasswordResetError(message, status_code=response.status_code)

        logger.info("Password reset completed", extra={'user_id': str(user_id)})
        return PasswordResetResult(user_id=user_id)
