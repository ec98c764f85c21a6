from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.restore_password_email_repository import IRestorePasswordEmailRepository
from src.domain.entities import RestorePasswordEmail
from src.domain.errors import InvalidEmailStateError, InvalidTokenError


class RestorePasswordEmailRepository(IRestorePasswordEmailRepository):
    """RestorePasswordEmail repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[RestorePasswordEmail]:
        """Get pending recovery request by token"""
        stmt = select(RestorePasswordEmail).where(RestorePasswordEmail.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, request: RestorePasswordEmail) -> RestorePasswordEmail:
        """
        Create a new recovery request.

        The unique user_id constraint rejects a second request raced in by a
        concurrent send for the same user.
        """
        self.session.add(request)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise InvalidEmailStateError() from e
        await self.session.refresh(request)
        return request

    async def delete(self, request: RestorePasswordEmail) -> None:
        """
        Delete a consumed recovery request.

        Deletes by id and checks the row count, so of two concurrent
        consumers of the same token only one succeeds.
        """
        stmt = (
            delete(RestorePasswordEmail)
            .where(RestorePasswordEmail.id == request.id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            raise InvalidTokenError()

    async def delete_all_expired_password_reset_tokens(self, now: Optional[datetime] = None) -> int:
        """Delete every recovery request whose expiry date is strictly before now"""
        now = now or datetime.utcnow()
        stmt = (
            delete(RestorePasswordEmail)
            .where(RestorePasswordEmail.expiry_date < now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
