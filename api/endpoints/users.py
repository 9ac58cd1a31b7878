# api/endpoints/users.py
from api.schemas.directory import UserListResponse
from src.core.directory import USER_LIST


async def list_users() -> UserListResponse:
    """List every user name, always in the same order."""
    return list(USER_LIST)
