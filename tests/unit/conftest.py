import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.update = AsyncMock()

    uow.restore_password_emails = MagicMock()
    uow.restore_password_emails.get_by_token = AsyncMock()
    uow.restore_password_emails.create = AsyncMock()
    uow.restore_password_emails.delete = AsyncMock()
    uow.restore_password_emails.delete_all_expired_password_reset_tokens = AsyncMock(
        return_value=0
    )
    return uow
