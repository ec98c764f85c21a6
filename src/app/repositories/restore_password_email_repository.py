from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import RestorePasswordEmail


class IRestorePasswordEmailRepository(ABC):
    """RestorePasswordEmail repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[RestorePasswordEmail]:
        """Get pending recovery request by token"""
        pass

    @abstractmethod
    async def create(self, request: RestorePasswordEmail) -> RestorePasswordEmail:
        """Create a new recovery request (raises InvalidEmailStateError on duplicate user)"""
        pass

    @abstractmethod
    async def delete(self, request: RestorePasswordEmail) -> None:
        """Delete a consumed recovery request (raises InvalidTokenError if already gone)"""
        pass

    @abstractmethod
    async def delete_all_expired_password_reset_tokens(self, now: Optional[datetime] = None) -> int:
        """Delete every recovery request whose expiry date is strictly before now (default: utcnow)"""
        pass
