"""
Unit tests for UpdatePasswordHandler
"""
from uuid import uuid4

import bcrypt
import pytest

from src.app.use_cases.password_recovery import UpdatePasswordHandler
from src.domain.entities import User
from src.domain.errors import UserNotFoundError
from src.domain.events import UpdatePasswordEvent


@pytest.mark.asyncio
async def test_password_is_hashed_with_bcrypt(mock_uow):
    user = User(id=uuid4(), email="foo@bar.com", password_hash="old_hash")
    mock_uow.users.get_by_id.return_value = user
    event = UpdatePasswordEvent(source="PasswordRecoveryService", new_password="NewPass123!", user_id=user.id)

    await UpdatePasswordHandler(mock_uow)(event)

    mock_uow.users.get_by_id.assert_awaited_once_with(user.id)
    mock_uow.users.update.assert_awaited_once_with(user)
    mock_uow.commit.assert_awaited_once()

    assert user.password_hash.startswith("$2b$12$")
    assert bcrypt.checkpw(b"NewPass123!", user.password_hash.encode())


@pytest.mark.asyncio
async def test_unknown_user(mock_uow):
    mock_uow.users.get_by_id.return_value = None
    event = UpdatePasswordEvent(source="PasswordRecoveryService", new_password="x", user_id=uuid4())

    with pytest.raises(UserNotFoundError):
        await UpdatePasswordHandler(mock_uow)(event)

    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_other_events_are_ignored(mock_uow):
    await UpdatePasswordHandler(mock_uow)(object())

    mock_uow.users.get_by_id.assert_not_called()
