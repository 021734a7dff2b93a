"""收藏相关业务异常 - 直接映射为 HTTP 状态码"""

from fastapi import HTTPException, status


class AuthenticationRequiredError(HTTPException):
    """调用方身份缺失或无法识别 → 401"""

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidTargetError(HTTPException):
    """目标用户不存在 / 目标不是导师 → 400"""

    def __init__(self, detail: str = "Invalid target user"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedActionError(HTTPException):
    """调用方既不是目标用户本人也不是管理员 → 401"""

    def __init__(self, detail: str = "Not allowed to manage this user's favorites"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
