"""
Outbound Broker Messages

Payloads handed to the message broker for delivery by other services.
"""

from uuid import UUID

from pydantic import BaseModel


class PasswordRecoveryMessage(BaseModel):
    """Asks the mailing service to send a password recovery email"""

    user_id: UUID
    user_name: str
    email: str
    token: str
    language: str
