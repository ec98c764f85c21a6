"""
Password Recovery Use Cases

Recovery token lifecycle and the password change it authorizes.
"""

from .dtos import PASSWORD_RECOVERY_ROUTING_KEY, PasswordRecoveryConfig
from .password_recovery_service import PasswordRecoveryService
from .update_password_handler import UpdatePasswordHandler

__all__ = [
    # Use Cases
    "PasswordRecoveryService",
    "UpdatePasswordHandler",
    # DTOs
    "PasswordRecoveryConfig",
    "PASSWORD_RECOVERY_ROUTING_KEY",
]
