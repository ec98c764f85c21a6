"""
Password Recovery Domain Errors

Every business-rule rejection is a distinct exception carrying an Error
value (code + message), so calling layers can map each one to its own
user-facing message or status.
"""

from typing import Optional

from pydantic import BaseModel


class Error(BaseModel):
    """Machine-readable error code with a human-readable message"""

    code: str
    message: str


class PasswordRecoveryError(Exception):
    """Base class for password recovery business-rule failures"""

    code = "PASSWORD_RECOVERY_ERROR"
    default_message = "Password recovery failed"

    def __init__(self, message: Optional[str] = None):
        self.error = Error(code=self.code, message=message or self.default_message)
        super().__init__(self.error.message)


class UserNotFoundError(PasswordRecoveryError):
    """No user is registered with the given email or id"""

    code = "USER_NOT_FOUND"
    default_message = "User not found"


class InvalidEmailStateError(PasswordRecoveryError):
    """The user already has a pending password recovery request"""

    code = "INVALID_EMAIL_STATE"
    default_message = "A password recovery request is already pending for this email"


class InvalidTokenError(PasswordRecoveryError):
    """Token is unknown or was already consumed"""

    code = "INVALID_TOKEN"
    default_message = "Invalid password recovery token"


class TokenExpiredError(PasswordRecoveryError):
    """Token was found but its expiry date has passed"""

    code = "TOKEN_EXPIRED"
    default_message = "Password recovery token has expired"
