# api/schemas/directory.py
from typing import List

from src.core.directory import HealthStatus

# Response body of GET /api/users: a flat JSON array of names
UserListResponse = List[str]

__all__ = ["HealthStatus", "UserListResponse"]
