# api/endpoints/health.py
from api.schemas.directory import HealthStatus
from src.core.directory import HEALTH_STATUS


async def health_check() -> HealthStatus:
    """Report that the service is up. Query string and body are ignored."""
    return HEALTH_STATUS
