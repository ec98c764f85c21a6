"""
Password Recovery Domain Events

Events published on the in-process event bus once a business operation
has been committed.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UpdatePasswordEvent(BaseModel):
    """
    Emitted after a recovery token is consumed.

    Authorizes the change only; the password itself is replaced by
    whichever handler subscribes to this event.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    new_password: str = Field(repr=False)
    user_id: UUID
    timestamp: datetime = Field(default_factory=datetime.utcnow)
