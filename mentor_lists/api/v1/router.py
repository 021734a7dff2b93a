"""API v1 路由汇总"""

from fastapi import APIRouter

from mentor_lists.api.v1.endpoints import health, favorites

api_router = APIRouter()

# 健康检查 (无需认证)
api_router.include_router(health.router, tags=["健康检查"])

# 收藏导师
api_router.include_router(favorites.router, prefix="/lists/favorites", tags=["收藏"])
