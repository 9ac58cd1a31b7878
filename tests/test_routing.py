from __future__ import annotations

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from api.api_router import ROUTES, api_router, build_router
from api.endpoints.health import health_check
from api.endpoints.users import list_users
from api.main import create_app
from config import Settings


def test_routing_table_maps_method_and_path_to_handler():
    assert ROUTES == {
        ("GET", "/health"): health_check,
        ("GET", "/users"): list_users,
    }


def test_router_registers_exactly_the_routing_table():
    registered = {
        (method, route.path): route.endpoint
        for route in api_router.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }
    assert registered == ROUTES


def test_app_serves_only_routes_under_api():
    app = create_app(Settings())
    paths = {getattr(route, "path", "") for route in app.routes}
    assert {"/docs", "/redoc", "/openapi.json"}.isdisjoint(paths)


def test_handler_failure_returns_500_without_details():
    def explode():
        raise RuntimeError("secret connection string")

    broken = create_app(Settings())
    broken.include_router(build_router({("GET", "/boom"): explode}), prefix="/api")

    client = TestClient(broken, raise_server_exceptions=False)
    resp = client.get("/api/boom")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal Server Error"}
    assert "secret" not in resp.text
