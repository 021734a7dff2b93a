"""导师列表持久化服务"""

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mentor_lists.models import ListMentor, MentorList, User


class ListService:
    """列表服务 - 应用层"""

    @staticmethod
    async def find_favorite_list(db: AsyncSession, user: User) -> Optional[MentorList]:
        """查询用户的收藏列表（含导师信息）"""
        result = await db.execute(
            select(MentorList)
            .options(selectinload(MentorList.mentors).selectinload(ListMentor.mentor))
            .where(MentorList.user_id == user.id, MentorList.is_favorite.is_(True))
            .order_by(MentorList.created_at)
            .limit(1)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def create_list(
        db: AsyncSession,
        name: str,
        user: User,
        mentor_ids: list[str],
        is_favorite: bool = False,
    ) -> MentorList:
        """创建列表并按顺序写入初始导师"""
        mentor_list = MentorList(
            id=str(uuid.uuid4()),
            name=name,
            is_favorite=is_favorite,
            user_id=user.id,
            mentors=[
                ListMentor(id=str(uuid.uuid4()), mentor_id=mentor_id, position=position)
                for position, mentor_id in enumerate(mentor_ids)
            ],
        )
        db.add(mentor_list)
        await db.flush()
        return mentor_list

    @staticmethod
    async def update(db: AsyncSession, mentor_list: MentorList) -> None:
        """保存列表（含导师增删）"""
        db.add(mentor_list)
        await db.flush()
