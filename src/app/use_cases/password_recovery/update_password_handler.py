"""
Update Password Handler

Subscriber for UpdatePasswordEvent that actually replaces the password.
"""

import logging

import bcrypt

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import UserNotFoundError
from src.domain.events import UpdatePasswordEvent

logger = logging.getLogger(__name__)


class UpdatePasswordHandler:
    """
    Applies an authorized password change.

    Business Rules:
    - Password is hashed with bcrypt (cost factor 12)
    - Only UpdatePasswordEvent is handled; other events are ignored
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def __call__(self, event) -> None:
        if not isinstance(event, UpdatePasswordEvent):
            return

        async with self.uow:
            user = await self.uow.users.get_by_id(event.user_id)
            if user is None:
                raise UserNotFoundError(f"User {event.user_id} not found")

            password_hash = bcrypt.hashpw(event.new_password.encode(), bcrypt.gensalt(12))
            user.password_hash = password_hash.decode()
            await self.uow.users.update(user)
            await self.uow.commit()

        logger.info(f"Password updated for user {user.id} (requested by {event.source})")
