"""测试配置 - pytest fixtures"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient, ASGITransport

from mentor_lists.core.security import create_access_token
from mentor_lists.db.session import get_db
from mentor_lists.main import app


@pytest.fixture
def mock_db():
    """替代真实 AsyncSession"""
    return AsyncMock()


@pytest.fixture
async def client(mock_db):
    """异步测试客户端（不触发 lifespan，不连接数据库）"""

    async def _override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """生成带 Bearer token 的请求头"""

    def _make(external_id: str = "auth0|1234") -> dict:
        token = create_access_token(data={"sub": external_id})
        return {"Authorization": f"Bearer {token}"}

    return _make
