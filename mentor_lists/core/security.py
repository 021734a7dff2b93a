"""JWT 生成与解析"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from mentor_lists.core.config import settings


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """生成 JWT（开发/测试用，生产环境由身份提供方签发）"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode["exp"] = expire
    if settings.JWT_AUDIENCE:
        to_encode.setdefault("aud", settings.JWT_AUDIENCE)
    if settings.JWT_ISSUER:
        to_encode.setdefault("iss", settings.JWT_ISSUER)
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """解析并校验 JWT，失败（签名/过期/audience/issuer）返回 None"""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE or None,
            issuer=settings.JWT_ISSUER or None,
            options={"verify_aud": bool(settings.JWT_AUDIENCE)},
        )
    except JWTError:
        return None
