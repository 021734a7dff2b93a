"""收藏导师接口 - Toggle / 列表"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mentor_lists.core.deps import CallerIdentity, get_current_identity
from mentor_lists.db.session import get_db
from mentor_lists.schemas.lists import FavoritesResponse, ToggleResponse
from mentor_lists.services.favorites_service import FavoritesService

router = APIRouter()


@router.put("/{user_id}/{mentor_id}", response_model=ToggleResponse)
@router.post("/{user_id}/{mentor_id}", response_model=ToggleResponse)
async def toggle_favorite(
    user_id: str,
    mentor_id: str,
    identity: CallerIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """收藏 Toggle：导师在列表中则移除，否则添加"""
    return await FavoritesService.toggle(db, identity.external_id, user_id, mentor_id)


@router.get("/{user_id}", response_model=FavoritesResponse)
async def list_favorites(
    user_id: str,
    identity: CallerIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """用户的收藏导师列表（本人或管理员）"""
    return await FavoritesService.list_favorites(db, identity.external_id, user_id)
