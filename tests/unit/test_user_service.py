"""单元测试: services/user_service.py — 用户查询与写入"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from mentor_lists.models import User, UserRole
from mentor_lists.services.user_service import UserService


def _db_returning(value):
    mock_db = AsyncMock()
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = value
    mock_db.execute.return_value = mock_result
    return mock_db


class TestFind:
    """按外部ID / 内部ID查询"""

    @pytest.mark.asyncio
    async def test_find_by_external_id(self):
        user = User(id="u-1", external_id="auth0|1", name="A", roles=["member"])
        mock_db = _db_returning(user)

        assert await UserService.find_by_external_id(mock_db, "auth0|1") is user
        mock_db.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self):
        mock_db = _db_returning(None)
        assert await UserService.find_by_id(mock_db, "u-404") is None


class TestCreateUser:
    """创建用户"""

    @pytest.mark.asyncio
    async def test_creates_with_normalized_roles(self):
        mock_db = _db_returning(None)

        user = await UserService.create_user(
            mock_db, external_id="auth0|2", name="Sarah Doe",
            roles=[UserRole.MEMBER, "mentor"],
        )
        assert user.external_id == "auth0|2"
        assert user.roles == ["member", "mentor"]
        assert user.has_role(UserRole.MENTOR)
        assert len(user.id) == 36
        mock_db.add.assert_called_once_with(user)
        mock_db.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_external_id_raises(self):
        existing = User(id="u-1", external_id="auth0|2", name="A", roles=[])
        mock_db = _db_returning(existing)

        with pytest.raises(ValueError):
            await UserService.create_user(mock_db, external_id="auth0|2", name="B", roles=[])
        mock_db.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_role_raises(self):
        mock_db = _db_returning(None)
        with pytest.raises(ValueError):
            await UserService.create_user(mock_db, external_id="auth0|3", name="C", roles=["root"])


class TestUpdateUser:
    """更新用户"""

    @pytest.mark.asyncio
    async def test_updates_fields_and_roles(self):
        user = User(id="u-1", external_id="auth0|1", name="Old", roles=["member"])
        mock_db = _db_returning(user)

        updated = await UserService.update_user(
            mock_db, "u-1", name="New", roles=["member", "admin"], picture=None,
        )
        assert updated.name == "New"
        assert updated.roles == ["member", "admin"]
        assert updated.picture is None
        mock_db.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_user_raises(self):
        mock_db = _db_returning(None)
        with pytest.raises(ValueError):
            await UserService.update_user(mock_db, "u-404", name="X")
