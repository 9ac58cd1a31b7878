# api/api_router.py
from typing import Any, Callable, Dict, Tuple

from fastapi import APIRouter

from .endpoints.health import health_check
from .endpoints.users import list_users
from .schemas.directory import HealthStatus, UserListResponse

# (method, path) -> handler. Paths are relative to the "/api" prefix
# applied in api.main.
ROUTES: Dict[Tuple[str, str], Callable[..., Any]] = {
    ("GET", "/health"): health_check,
    ("GET", "/users"): list_users,
}

RESPONSE_MODELS: Dict[Tuple[str, str], Any] = {
    ("GET", "/health"): HealthStatus,
    ("GET", "/users"): UserListResponse,
}


def build_router(routes: Dict[Tuple[str, str], Callable[..., Any]] = ROUTES) -> APIRouter:
    router = APIRouter(redirect_slashes=False)
    for (method, path), handler in routes.items():
        router.add_api_route(
            path,
            handler,
            methods=[method],
            response_model=RESPONSE_MODELS.get((method, path)),
            tags=[path.strip("/").split("/")[0]],
        )
    return router


api_router = build_router()
