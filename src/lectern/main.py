"""Lectern FastAPI application."""

import logging
from functools import partial
from pathlib import Path
from typing import Any, Callable

import anyio
import anyio.to_thread
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

from lectern.config import Settings, settings
from lectern.core.errors import LecternError
from lectern.core.models import Directory, StaticFile
from lectern.core.pages import (
    render_directory,
    render_document,
    render_error_page,
    render_lectionary,
)
from lectern.core.paths import normalize_path, resolve_target

logger = logging.getLogger(__name__)

static_path = Path(__file__).parent / "static"


class NormalizePathMiddleware:
    """Strip trailing slashes from request paths before routing."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = normalize_path(scope["path"])
            if path != scope["path"]:
                scope = dict(scope, path=path)
                scope.pop("raw_path", None)
        await self.app(scope, receive, send)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create the application serving ``app_settings.content_dir``."""
    app_settings = app_settings or settings
    root = app_settings.root

    app = FastAPI(title=app_settings.site_title, debug=app_settings.debug)
    app.add_middleware(NormalizePathMiddleware)
    app.mount("/static", StaticFiles(directory=str(static_path)), name="static")

    def get_limiter(request: Request) -> anyio.CapacityLimiter:
        """Process-wide bound on worker threads, created on first use."""
        limiter = getattr(request.app.state, "limiter", None)
        if limiter is None:
            limiter = anyio.CapacityLimiter(app_settings.worker_threads)
            request.app.state.limiter = limiter
        return limiter

    async def run_blocking(request: Request, func: Callable[..., str], *args: Any) -> str:
        """Run filesystem and parsing work off the event loop."""
        return await anyio.to_thread.run_sync(partial(func, *args), limiter=get_limiter(request))

    async def error_response(request: Request, status_code: int) -> HTMLResponse:
        html = await run_blocking(request, render_error_page, root, app_settings.site_title)
        return HTMLResponse(html, status_code=status_code)

    @app.get("/lectionary", response_class=HTMLResponse)
    async def lectionary(request: Request):
        """Reading calendar for the current year."""
        try:
            html = await run_blocking(request, render_lectionary, app_settings)
        except LecternError as e:
            logger.error("Failed to render lectionary: %s", e)
            return await error_response(request, e.status_code)
        except Exception:
            logger.exception("Unexpected error rendering lectionary")
            return await error_response(request, 500)
        return HTMLResponse(html)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Content root."""
        return await serve_content(request, "")

    @app.get("/{path:path}")
    async def page(request: Request, path: str):
        """Directory listing, rendered markdown or a raw file."""
        return await serve_content(request, path)

    async def serve_content(request: Request, path: str) -> Response:
        try:
            target = resolve_target(root, path)
            if isinstance(target, StaticFile):
                logger.debug("Serving %s", target.rel_path)
                return FileResponse(target.fs_path)
            if isinstance(target, Directory):
                html = await run_blocking(request, render_directory, app_settings, target)
            else:
                html = await run_blocking(request, render_document, app_settings, target)
        except LecternError as e:
            logger.info("Could not serve /%s: %s", path, e)
            return await error_response(request, e.status_code)
        except Exception:
            logger.exception("Unexpected error serving /%s", path)
            return await error_response(request, 500)
        return HTMLResponse(html)

    return app


app = create_app()
