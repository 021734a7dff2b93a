"""
收藏服务
编排: 身份解析 → 目标校验 → 权限校验 → 查找/创建收藏列表 → Toggle → 保存
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from mentor_lists.core.config import settings
from mentor_lists.core.exceptions import (
    AuthenticationRequiredError,
    InvalidTargetError,
    UnauthorizedActionError,
)
from mentor_lists.domain.rules.favorites_rules import can_manage_favorites, toggle_mentor
from mentor_lists.models import MentorList, User, UserRole
from mentor_lists.schemas.lists import FavoriteListData, MentorRef
from mentor_lists.services.list_service import ListService
from mentor_lists.services.user_service import UserService

logger = logging.getLogger(__name__)


def _list_to_data(mentor_list: MentorList) -> FavoriteListData:
    """MentorList ORM → DTO"""
    return FavoriteListData(
        id=str(mentor_list.id),
        name=mentor_list.name,
        is_favorite=mentor_list.is_favorite,
        user_id=str(mentor_list.user_id),
        mentors=[
            MentorRef(
                id=str(ref.mentor_id),
                name=ref.mentor.name if ref.mentor else None,
                picture=ref.mentor.picture if ref.mentor else None,
            )
            for ref in mentor_list.mentors
        ],
    )


class FavoritesService:
    """收藏服务 — 业务编排层"""

    @staticmethod
    async def authorize(
        db: AsyncSession,
        external_id: str,
        user_id: str,
        mentor_id: Optional[str] = None,
    ) -> tuple[User, User, Optional[User]]:
        """
        解析调用方与目标用户并校验权限

        Returns:
            (caller, target, mentor)；mentor 仅在传入 mentor_id 时解析

        Raises:
            AuthenticationRequiredError: 调用方在用户库中不存在
            InvalidTargetError: 目标用户不存在 / 导师不存在或不是导师
            UnauthorizedActionError: 既不是本人也不是管理员
        """
        caller = await UserService.find_by_external_id(db, external_id)
        if caller is None:
            logger.warning(f"Unknown caller external_id={external_id}")
            raise AuthenticationRequiredError("Caller is not a registered user")

        target = await UserService.find_by_id(db, user_id)
        if target is None:
            logger.warning(f"Target user {user_id} not found (caller={caller.id})")
            raise InvalidTargetError("User not found")

        mentor = None
        if mentor_id is not None:
            mentor = await UserService.find_by_id(db, mentor_id)
            if mentor is None or not mentor.has_role(UserRole.MENTOR):
                logger.warning(f"User {mentor_id} is not a mentor (caller={caller.id})")
                raise InvalidTargetError("Cannot favorite a non-mentor")

        if not can_manage_favorites(caller, target):
            logger.warning(
                f"User {caller.id} (roles: {caller.roles}) "
                f"denied access to favorites of {target.id}"
            )
            raise UnauthorizedActionError()

        return caller, target, mentor

    @staticmethod
    async def toggle(
        db: AsyncSession,
        external_id: str,
        user_id: str,
        mentor_id: str,
    ) -> dict:
        """
        收藏 Toggle：
        - 无收藏列表 → 创建 "Favorites" 列表并放入该导师
        - 导师已在列表 → 移除
        - 导师不在列表 → 追加
        """
        _, target, mentor = await FavoritesService.authorize(
            db, external_id, user_id, mentor_id=mentor_id
        )

        favorite_list = await ListService.find_favorite_list(db, target)
        if favorite_list is None:
            await ListService.create_list(
                db,
                name=settings.FAVORITES_LIST_NAME,
                user=target,
                mentor_ids=[mentor.id],
                is_favorite=True,
            )
            logger.info(f"Favorite list created for user {target.id} with mentor {mentor.id}")
            return {"success": True}

        added = toggle_mentor(favorite_list, mentor.id)
        await ListService.update(db, favorite_list)
        logger.info(
            f"Mentor {mentor.id} {'added to' if added else 'removed from'} "
            f"favorites of user {target.id}"
        )
        return {"success": True}

    @staticmethod
    async def list_favorites(db: AsyncSession, external_id: str, user_id: str) -> dict:
        """收藏列表；未创建时返回空导师数组"""
        _, target, _ = await FavoritesService.authorize(db, external_id, user_id)

        favorite_list = await ListService.find_favorite_list(db, target)
        if favorite_list is None:
            return {"success": True, "data": {"mentors": []}}

        return {"success": True, "data": _list_to_data(favorite_list)}
