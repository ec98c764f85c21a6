"""
RestorePasswordEmail Entity

A pending password recovery request.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .user import User


class RestorePasswordEmail(SQLModel, table=True):
    """
    RestorePasswordEmail entity - one outstanding password recovery request.

    Business Rules:
    - At most one per user (unique user_id)
    - Expires after the configured number of hours (default 24)
    - Single-use: deleted once the token is consumed
    - Expired rows are removed by the periodic sweep
    """

    __tablename__ = "restore_password_emails"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", unique=True)
    token: str = Field(unique=True, index=True, max_length=255)

    # Timestamps
    expiry_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )

    # Relationships
    user: Optional["User"] = Relationship(back_populates="restore_password_email")

    __table_args__ = (Index("idx_restore_password_email_expiry_date", "expiry_date"),)

    def is_expired(self, now: datetime) -> bool:
        """A request expiring exactly at `now` is still valid."""
        return self.expiry_date < now
