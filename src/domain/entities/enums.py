"""
Password Recovery Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """User account status"""

    created = "created"
    activated = "activated"
    deactivated = "deactivated"
    blocked = "blocked"
