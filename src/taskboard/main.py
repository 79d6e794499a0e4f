import logging

import typer
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.config import LogLevel, ServerSettings, load_settings
from taskboard.errors import TaskboardError
from taskboard.routes import create_routes
from taskboard.store import TaskStore

logger = logging.getLogger(__name__)

cli = typer.Typer(help="In-memory task management HTTP API.")


def _error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        {"error": message}, status_code=status_code, headers=headers
    )


async def _handle_taskboard_error(
    request: Request, exc: TaskboardError
) -> JSONResponse:
    logger.debug(
        "Rejected %s %s: %s", request.method, request.url.path, exc.message
    )
    return _error_response(exc.status_code, exc.message)


async def _handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail), exc.headers)


async def _handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return _error_response(400, message)


def create_app(store: TaskStore | None = None) -> FastAPI:
    """Create the FastAPI app serving ``store`` (a fresh one by default)."""
    if store is None:
        store = TaskStore()

    app = FastAPI(title="taskboard")
    app.add_exception_handler(TaskboardError, _handle_taskboard_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(
        RequestValidationError, _handle_request_validation_error
    )
    app.include_router(create_routes(store))
    return app


@cli.callback()
def main() -> None:
    """In-memory task management HTTP API."""


@cli.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind to"),
    port: int | None = typer.Option(
        None, help="Port to bind to [default: $TASKBOARD_PORT or 3000]"
    ),
    log_level: LogLevel | None = typer.Option(
        None, "--log-level", help="Logging level"
    ),
) -> None:
    """Start the task API server."""
    overrides = {"host": host, "port": port, "log_level": log_level}
    try:
        settings = load_settings()
        settings = ServerSettings.model_validate(
            {
                **settings.model_dump(),
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    logging.basicConfig(
        level=settings.log_level.value.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server is listening on %d", settings.port)
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.value,
    )


# Lazy app for uvicorn: taskboard.main:app (no store built at import time).
_cached_app: FastAPI | None = None


def get_app() -> FastAPI:
    """Return the module-level FastAPI app, creating it on first use."""
    global _cached_app
    if _cached_app is None:
        _cached_app = create_app()
    return _cached_app


class _LazyASGI:
    """ASGI callable that delegates to get_app() on first request."""

    async def __call__(self, scope, receive, send):
        await get_app()(scope, receive, send)


app = _LazyASGI()

if __name__ == "__main__":
    cli()
