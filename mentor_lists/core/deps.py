"""认证依赖项 - FastAPI Depends"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from mentor_lists.core.config import settings
from mentor_lists.core.exceptions import AuthenticationRequiredError
from mentor_lists.core.security import decode_token

logger = logging.getLogger(__name__)

# auto_error=False: 缺少 token 时统一抛 AuthenticationRequiredError
security_scheme = HTTPBearer(auto_error=False)


@dataclass
class CallerIdentity:
    """已验证的调用方身份（尚未解析为内部用户）"""
    external_id: str
    claims: dict = field(default_factory=dict)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> CallerIdentity:
    """从 Bearer token 中取出调用方的外部用户ID"""
    if credentials is None:
        raise AuthenticationRequiredError("Authentication required")

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise AuthenticationRequiredError("Invalid authentication credentials")

    external_id = payload.get(settings.JWT_SUBJECT_CLAIM)
    if not external_id:
        logger.warning(f"Token missing subject claim '{settings.JWT_SUBJECT_CLAIM}'")
        raise AuthenticationRequiredError("Invalid token")

    return CallerIdentity(external_id=str(external_id), claims=payload)
