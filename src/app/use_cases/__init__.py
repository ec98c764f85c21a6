"""
Use Cases

Organized into domain folders:
- password_recovery/: Recovery token lifecycle and password change handling
"""

from .password_recovery import (
    PasswordRecoveryService,
    UpdatePasswordHandler,
)

__all__ = [
    "PasswordRecoveryService",
    "UpdatePasswordHandler",
]
