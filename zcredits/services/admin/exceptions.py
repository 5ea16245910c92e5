class AdminError(Exception):
    pass


class PasswordResetError(AdminError):
    def __init__(self, message="Failed to reset password", status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)
