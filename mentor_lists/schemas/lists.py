"""收藏列表 Schema (Pydantic DTO)"""

from typing import Optional, Union
from pydantic import BaseModel


class MentorRef(BaseModel):
    """列表中的导师"""
    id: str
    name: Optional[str] = None
    picture: Optional[str] = None


class FavoriteListData(BaseModel):
    """收藏列表"""
    id: str
    name: str
    is_favorite: bool
    user_id: str
    mentors: list[MentorRef]


class EmptyFavoritesData(BaseModel):
    """尚未创建收藏列表时的默认返回"""
    mentors: list[MentorRef] = []


class ToggleResponse(BaseModel):
    """Toggle 响应"""
    success: bool


class FavoritesResponse(BaseModel):
    """收藏列表响应"""
    success: bool
    data: Union[FavoriteListData, EmptyFavoritesData]
