"""健康检查接口"""

from fastapi import APIRouter

from mentor_lists.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """K8S liveness/readiness 探针"""
    return {
        "status": "healthy",
        "service": "mentor-lists-api",
        "version": settings.APP_VERSION,
    }
