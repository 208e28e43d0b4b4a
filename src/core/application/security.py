"""Application-level identity dependencies.

前端在本地生成并保存一个用户 ID，每次请求通过 X-User-Id 请求头携带。
"""

from fastapi import Header, HTTPException, status

from src.core.config import settings


async def get_current_user_id(
    user_id: str | None = Header(default=None, alias=settings.USER_ID_HEADER),
) -> str:
    """Get the current user ID from the request header."""
    if user_id is None or not user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {settings.USER_ID_HEADER} header",
        )
    return user_id.strip()
