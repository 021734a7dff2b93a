"""收藏导师接口测试"""

from unittest.mock import AsyncMock, patch

import pytest

from mentor_lists.core.exceptions import InvalidTargetError, UnauthorizedActionError
from mentor_lists.models import User
from mentor_lists.schemas.lists import FavoriteListData, MentorRef
from mentor_lists.services.favorites_service import FavoritesService
from mentor_lists.services.user_service import UserService

BASE = "/api/v1/lists/favorites"


class TestAuthentication:
    """Bearer token 校验"""

    @pytest.mark.asyncio
    async def test_missing_token_returns_401(self, client):
        r = await client.get(f"{BASE}/user-1")
        assert r.status_code == 401
        assert r.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_invalid_token_returns_401(self, client):
        r = await client.get(f"{BASE}/user-1", headers={"Authorization": "Bearer not.a.jwt"})
        assert r.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_caller_returns_401(self, client, auth_headers):
        """token 有效但调用方不在用户库中"""
        with patch.object(UserService, "find_by_external_id", AsyncMock(return_value=None)):
            r = await client.get(f"{BASE}/user-1", headers=auth_headers("auth0|ghost"))
        assert r.status_code == 401


class TestToggleEndpoint:
    """PUT/POST /lists/favorites/{user_id}/{mentor_id}"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["put", "post"])
    async def test_toggle_success(self, client, mock_db, auth_headers, method):
        toggle = AsyncMock(return_value={"success": True})
        with patch.object(FavoritesService, "toggle", toggle):
            r = await getattr(client, method)(f"{BASE}/user-1/mentor-1", headers=auth_headers())

        assert r.status_code == 200
        assert r.json() == {"success": True}
        toggle.assert_awaited_once_with(mock_db, "auth0|1234", "user-1", "mentor-1")

    @pytest.mark.asyncio
    async def test_non_mentor_returns_400(self, client, auth_headers):
        toggle = AsyncMock(side_effect=InvalidTargetError("Cannot favorite a non-mentor"))
        with patch.object(FavoritesService, "toggle", toggle):
            r = await client.put(f"{BASE}/user-1/user-2", headers=auth_headers())

        assert r.status_code == 400
        assert r.json()["detail"] == "Cannot favorite a non-mentor"

    @pytest.mark.asyncio
    async def test_other_user_returns_401(self, client, auth_headers):
        toggle = AsyncMock(side_effect=UnauthorizedActionError())
        with patch.object(FavoritesService, "toggle", toggle):
            r = await client.put(f"{BASE}/user-2/mentor-1", headers=auth_headers())

        assert r.status_code == 401


class TestListEndpoint:
    """GET /lists/favorites/{user_id}"""

    @pytest.mark.asyncio
    async def test_empty_favorites(self, client, mock_db, auth_headers):
        list_favorites = AsyncMock(return_value={"success": True, "data": {"mentors": []}})
        with patch.object(FavoritesService, "list_favorites", list_favorites):
            r = await client.get(f"{BASE}/user-1", headers=auth_headers())

        assert r.status_code == 200
        assert r.json() == {"success": True, "data": {"mentors": []}}
        list_favorites.assert_awaited_once_with(mock_db, "auth0|1234", "user-1")

    @pytest.mark.asyncio
    async def test_returns_list(self, client, auth_headers):
        data = FavoriteListData(
            id="list-1",
            name="Favorites",
            is_favorite=True,
            user_id="user-1",
            mentors=[MentorRef(id="m-1", name="Sarah Doe"), MentorRef(id="m-2", name="John Doe")],
        )
        list_favorites = AsyncMock(return_value={"success": True, "data": data})
        with patch.object(FavoritesService, "list_favorites", list_favorites):
            r = await client.get(f"{BASE}/user-1", headers=auth_headers())

        assert r.status_code == 200
        body = r.json()
        assert body["success"] is True
        assert body["data"]["id"] == "list-1"
        assert [m["id"] for m in body["data"]["mentors"]] == ["m-1", "m-2"]
        assert body["data"]["mentors"][0]["name"] == "Sarah Doe"

    @pytest.mark.asyncio
    async def test_missing_target_returns_400(self, client, auth_headers):
        """目标用户不存在（走真实 FavoritesService）"""
        caller = User(id="user-1", external_id="auth0|1234", name="Me", roles=["member"])
        with patch.object(UserService, "find_by_external_id", AsyncMock(return_value=caller)), \
                patch.object(UserService, "find_by_id", AsyncMock(return_value=None)):
            r = await client.get(f"{BASE}/nobody", headers=auth_headers())

        assert r.status_code == 400
        assert r.json()["detail"] == "User not found"
