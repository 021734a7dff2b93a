"""
数据库初始化脚本
创建 mentor_lists 数据库、所有表以及演示用户（管理员 / 导师 / 普通成员）
"""

import asyncio
import sys
from pathlib import Path

# 添加项目根目录到 Python 路径
sys.path.insert(0, str(Path(__file__).parent.parent))

import aiomysql
from sqlalchemy.engine import make_url


async def create_database():
    """创建 mentor_lists 数据库"""
    from mentor_lists.core.config import settings

    url = make_url(settings.DATABASE_URL)
    database = url.database or "mentor_lists"

    print(f"连接 MySQL: {url.host}:{url.port or 3306} (用户: {url.username})")

    # 连接 MySQL（不指定数据库）
    conn = await aiomysql.connect(
        host=url.host or "127.0.0.1",
        port=url.port or 3306,
        user=url.username,
        password=url.password or "",
    )

    async with conn.cursor() as cursor:
        await cursor.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        print(f"✓ 数据库 '{database}' 已创建或已存在")

    conn.close()
    return database


async def create_tables():
    """创建所有表"""
    from mentor_lists.db.session import engine, Base
    from mentor_lists.models import User, MentorList, ListMentor  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    print("✓ 所有表已创建")


async def create_default_data():
    """创建演示用户"""
    from sqlalchemy import select
    from mentor_lists.db.session import async_session_factory
    from mentor_lists.models import User, UserRole
    from mentor_lists.services.user_service import UserService

    async with async_session_factory() as session:
        # 检查是否已存在数据
        result = await session.execute(select(User).limit(1))
        if result.scalar_one_or_none():
            print("✓ 默认数据已存在，跳过")
            return

        await UserService.create_user(
            session,
            external_id="auth0|admin",
            name="Admin",
            email="admin@example.com",
            roles=[UserRole.MEMBER, UserRole.ADMIN],
        )
        await UserService.create_user(
            session,
            external_id="auth0|mentor",
            name="Sarah Doe",
            email="sarah@example.com",
            roles=[UserRole.MEMBER, UserRole.MENTOR],
        )
        await UserService.create_user(
            session,
            external_id="auth0|member",
            name="John Doe",
            email="john@example.com",
            roles=[UserRole.MEMBER],
        )

        await session.commit()
        print("✓ 默认数据已创建:")
        print("  - 管理员: auth0|admin")
        print("  - 导师: auth0|mentor")
        print("  - 普通成员: auth0|member")


async def main():
    print("=" * 50)
    print("mentor-lists 数据库初始化")
    print("=" * 50)

    # 1. 创建数据库
    await create_database()

    # 2. 创建表
    await create_tables()

    # 3. 创建默认数据
    await create_default_data()

    print("=" * 50)
    print("✓ 初始化完成!")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
