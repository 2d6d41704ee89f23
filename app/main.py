"""FastAPI app entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, Response

from app.core.config import settings
from app.core.errors import ChannelDirectoryError
from app.db.session import create_store
from app.routers import admin, channels
from app.services.channel_store import ChannelStore

logger = logging.getLogger(__name__)


def _resolve_static(static_dir: Path, path: str) -> Path | None:
    """Return the file to serve for ``path``, falling back to ``index.html``."""

    root = static_dir.resolve()
    if path:
        try:
            candidate = (root / path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return candidate
        except (OSError, ValueError):
            logger.debug("Unservable static path %r", path[:200])

    index = root / "index.html"
    if index.is_file():
        return index
    return None


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ChannelDirectoryError)
    async def _directory_error(request: Request, exc: ChannelDirectoryError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Rejected malformed request to %s", request.url.path, extra={"errors": exc.errors()})
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid request body"})

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(store: ChannelStore | None = None, *, static_dir: Path | None = None) -> FastAPI:
    """Build FastAPI application.

    When ``store`` is omitted the channel directory is loaded from the configured
    data file on startup.
    """

    app = FastAPI(title="Channel Directory", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    if store is not None:
        app.state.channel_store = store

    app.include_router(channels.router)
    app.include_router(admin.router)

    frontend_dir = static_dir or settings.static_dir

    @app.on_event("startup")
    async def _startup() -> None:
        if getattr(app.state, "channel_store", None) is None:
            app.state.channel_store = create_store()

    @app.get("/healthz", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    # Single-page app: unknown paths get the front-end entry document
    @app.get("/{full_path:path}", include_in_schema=False)
    async def frontend(full_path: str) -> Response:
        target = _resolve_static(frontend_dir, full_path)
        if target is None:
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Front-end not found"})
        return FileResponse(target)

    return app


app = create_app()


def run() -> None:
    """Start the HTTP server on the configured host and port."""

    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting channel directory on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
