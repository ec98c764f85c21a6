"""
User Entity

Represents a registered person who may request password recovery.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from .enums import UserStatus

if TYPE_CHECKING:
    from .restore_password_email import RestorePasswordEmail


class User(SQLModel, table=True):
    """
    User entity - owner of at most one pending password recovery request.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - restore_password_email is set while a recovery request is pending
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(default="", max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(default="", max_length=60)  # Bcrypt output is 60 chars

    status: UserStatus = Field(default=UserStatus.created)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    restore_password_email: Optional["RestorePasswordEmail"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"uselist": False, "lazy": "selectin"},
    )
