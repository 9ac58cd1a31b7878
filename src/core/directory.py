# src/core/directory.py
"""Constant payloads served by the directory API.

Both values are built once at import time and never mutated afterwards.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class HealthStatus(BaseModel):
    """Service liveness reported by ``GET /api/health``."""
    model_config = ConfigDict(frozen=True)

    status: str


HEALTH_STATUS = HealthStatus(status="UP")

# Order matters: clients receive the names exactly as listed
USER_LIST: Tuple[str, ...] = ("alice", "bob", "charlie")
