"""
Password Recovery Service

Owns the recovery token lifecycle: issuing a token and notifying the user,
consuming a token to authorize a password change, and purging expired tokens.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from src.app.services.event_publisher import IEventPublisher
from src.app.services.message_sender import IMessageSender
from src.app.services.token_generator import ITokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import RestorePasswordEmail
from src.domain.errors import (
    InvalidEmailStateError,
    InvalidTokenError,
    TokenExpiredError,
    UserNotFoundError,
)
from src.domain.events import UpdatePasswordEvent
from src.domain.messages import PasswordRecoveryMessage
from .dtos import PASSWORD_RECOVERY_ROUTING_KEY, PasswordRecoveryConfig

logger = logging.getLogger(__name__)


class PasswordRecoveryService:
    """
    Password recovery workflow.

    Business Rules:
    - At most one pending recovery request per user
    - Token expires after config.token_expiration_hours
    - Expiry is exclusive: a request expiring exactly now is still valid
    - Single-use: the request is deleted when its token is consumed
    - The password itself is changed by the UpdatePasswordEvent subscriber
    - No writes, messages or events happen when a rule rejects the call

    The service keeps no state of its own; every call runs in its own
    unit of work.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_generator: ITokenGenerator,
        message_sender: IMessageSender,
        event_publisher: IEventPublisher,
        config: Optional[PasswordRecoveryConfig] = None,
    ):
        self.uow = uow
        self.token_generator = token_generator
        self.message_sender = message_sender
        self.event_publisher = event_publisher
        self.config = config or PasswordRecoveryConfig()

    async def send_password_recovery_email_to(self, email: str, language: str) -> None:
        """
        Issue a recovery token for the user and send the recovery email.

        Args:
            email: Registered email address
            language: Language code the email is rendered in

        Raises:
            UserNotFoundError: No user has this email
            InvalidEmailStateError: A recovery request is already pending
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                logger.warning("Password recovery requested for unknown email")
                raise UserNotFoundError(f"User with email {email} not found")

            if user.restore_password_email is not None:
                logger.warning(f"Password recovery already pending for user {user.id}")
                raise InvalidEmailStateError()

            token = self.token_generator.generate_token_key()
            expiry_date = datetime.utcnow() + timedelta(
                hours=self.config.token_expiration_hours
            )
            await self.uow.restore_password_emails.create(
                RestorePasswordEmail(user_id=user.id, token=token, expiry_date=expiry_date)
            )

            # Sent before commit so a broker failure rolls the request back
            await self.message_sender.send(
                self.config.email_topic,
                PASSWORD_RECOVERY_ROUTING_KEY,
                PasswordRecoveryMessage(
                    user_id=user.id,
                    user_name=user.name,
                    email=user.email,
                    token=token,
                    language=language,
                ),
            )

            await self.uow.commit()

        logger.info(f"Password recovery email requested for user {user.id}")

    async def update_password_using_token(self, token: str, new_password: str) -> None:
        """
        Consume a recovery token and announce the password change.

        Args:
            token: Token received in the recovery email
            new_password: Plain text password to set

        Raises:
            InvalidTokenError: Token unknown or already consumed
            TokenExpiredError: Token expiry date has passed
        """
        async with self.uow:
            request = await self.uow.restore_password_emails.get_by_token(token)
            if request is None:
                logger.warning("Password update attempted with unknown token")
                raise InvalidTokenError()

            if request.is_expired(datetime.utcnow()):
                logger.warning(f"Expired recovery token used for user {request.user_id}")
                raise TokenExpiredError()

            user_id = request.user_id
            await self.uow.restore_password_emails.delete(request)
            await self.uow.commit()

        await self.event_publisher.publish(
            UpdatePasswordEvent(
                source=type(self).__name__,
                new_password=new_password,
                user_id=user_id,
            )
        )
        logger.info(f"Recovery token consumed for user {user_id}")

    async def delete_all_expired_password_reset_tokens(self) -> int:
        """Purge expired recovery requests. Returns how many were removed."""
        async with self.uow:
            deleted = await self.uow.restore_password_emails.delete_all_expired_password_reset_tokens()
            await self.uow.commit()

        logger.info(f"Deleted {deleted} expired password recovery requests")
        return deleted
