# api/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import Settings, settings
from .api_router import api_router

logger = logging.getLogger(__name__)


async def _unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    # Never echo the exception text back to the client
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    # Only the routing table is served: no docs pages, no slash redirects
    app = FastAPI(
        title=app_settings.APP_TITLE,
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.add_exception_handler(Exception, _unhandled_exception)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
