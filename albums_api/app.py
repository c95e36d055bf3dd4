import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from albums_api.core.config import Settings, get_settings
from albums_api.core.logging_config import setup_logging
from albums_api.core.responses import IndentedJSONResponse
from albums_api.routers import albums as albums_router
from albums_api.services.album_service import AlbumService

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("albums_api.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and latency."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        access_logger.info(
            "%s %s %s -> %d (%.1fms)",
            client,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


async def _invalid_album_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected body on %s %s: %d errors", request.method, request.url.path, len(exc.errors()))
    return IndentedJSONResponse({"message": "invalid album"}, status_code=status.HTTP_400_BAD_REQUEST)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the albums app and load the catalog before any request is served."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    logger.info("Starting albums API (env=%s, catalog=%s)", settings.app_env, settings.albums_path)

    title = "Albums API" if settings.app_env == "prod" else f"Albums API ({settings.app_env})"
    app = FastAPI(title=title, default_response_class=IndentedJSONResponse)
    app.add_middleware(AccessLogMiddleware)
    app.add_exception_handler(RequestValidationError, _invalid_album_handler)

    album_service = AlbumService(settings.albums_path)
    album_service.load()
    app.state.album_service = album_service
    app.state.settings = settings

    app.include_router(albums_router.router)
    return app
