"""
Password Recovery DTOs

Configuration struct passed to PasswordRecoveryService at construction.
"""

from pydantic import BaseModel, Field

PASSWORD_RECOVERY_ROUTING_KEY = "password.recovery"


class PasswordRecoveryConfig(BaseModel):
    """Settings for token issuance and notification routing"""

    token_expiration_hours: int = Field(default=24, gt=0)
    email_topic: str = Field(default="email", min_length=1)

    @classmethod
    def from_application_config(cls, config) -> "PasswordRecoveryConfig":
        return cls(
            token_expiration_hours=config.PASSWORD_RECOVERY_TOKEN_EXPIRATION_HOURS,
            email_topic=config.EMAIL_TOPIC,
        )
