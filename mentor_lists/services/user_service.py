"""用户查询服务 - 用户记录由身份提供方同步，本服务只读"""

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mentor_lists.models import User, UserRole


class UserService:
    """用户服务 - 应用层"""

    @staticmethod
    async def find_by_external_id(db: AsyncSession, external_id: str) -> Optional[User]:
        """按身份提供方ID查询"""
        result = await db.execute(
            select(User).where(User.external_id == external_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def find_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
        """按内部ID查询"""
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def create_user(
        db: AsyncSession,
        external_id: str,
        name: str,
        roles: list[str],
        email: Optional[str] = None,
        picture: Optional[str] = None,
    ) -> User:
        """创建用户（同步脚本/初始化数据使用）"""
        existing = await UserService.find_by_external_id(db, external_id)
        if existing:
            raise ValueError(f"外部ID '{external_id}' 已存在")

        user = User(
            id=str(uuid.uuid4()),
            external_id=external_id,
            name=name,
            email=email,
            picture=picture,
            roles=[UserRole(r).value for r in roles],
        )
        db.add(user)
        await db.flush()
        return user

    @staticmethod
    async def update_user(db: AsyncSession, user_id: str, **kwargs) -> User:
        """更新用户信息"""
        user = await UserService.find_by_id(db, user_id)
        if not user:
            raise ValueError("用户不存在")

        for key, value in kwargs.items():
            if value is not None and hasattr(user, key):
                if key == "roles":
                    setattr(user, key, [UserRole(r).value for r in value])
                else:
                    setattr(user, key, value)

        await db.flush()
        return user
