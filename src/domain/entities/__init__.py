"""
Password Recovery Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import UserStatus

# Export all entities
from .user import User
from .restore_password_email import RestorePasswordEmail

__all__ = [
    # Enums
    "UserStatus",
    # Entities
    "User",
    "RestorePasswordEmail",
]
