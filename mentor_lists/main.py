"""Mentor Lists API - FastAPI 主入口"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentor_lists.core.config import settings
from mentor_lists.api.v1.router import api_router

# 全局日志配置：确保应用层 logger.info() 可见
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    from mentor_lists.db.session import engine, Base

    logger = logging.getLogger(__name__)

    # ========== 自动创建数据库表 ==========
    try:
        from mentor_lists.models import User, MentorList, ListMentor  # noqa: F401
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("数据库表检查/创建完成")
    except Exception as e:
        logger.warning(f"数据库表创建失败: {e}")

    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="导师收藏列表服务",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
)

# CORS 中间件
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API 路由注册
app.include_router(api_router, prefix="/api/v1")
