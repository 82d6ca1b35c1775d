"""FastAPI application factory and process-level wiring."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from src.phonebook.api.http.app_data import (
    ApplicationDependencies,
    build_application_dependencies,
)
from src.phonebook.api.http.middleware.metrics import MetricsMiddleware
from src.phonebook.api.http.routers.contacts import router as contacts_router
from src.phonebook.api.http.routers.health import router as health_router
from src.phonebook.api.http.routers.metrics import router as metrics_router
from src.phonebook.api.utils.app_startup import configure_logging
from src.phonebook.core.services import DbManageService
from src.phonebook.runtime.context import get_config

__all__ = ["app", "create_app"]

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
HSTS_HEADER = "max-age=31536000; includeSubDomains; preload"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if get_config().app.environment == "production":
            response.headers.setdefault("Strict-Transport-Security", HSTS_HEADER)
        return response


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """Tag every log line of a request with its id and turn crashes into a bare 500."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    started = time.perf_counter()

    def elapsed_ms() -> float:
        return round((time.perf_counter() - started) * 1000, 1)

    with logger.contextualize(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        client_ip=_client_ip(request),
    ):
        logger.info("request.start")
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.bind(
                status_code=500, duration_ms=elapsed_ms(), error_type=type(exc).__name__
            ).exception("request.error")
            # Internal details stay in the log
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        logger.bind(status_code=response.status_code, duration_ms=elapsed_ms()).info(
            "request.end"
        )
        response.headers.setdefault("X-Request-ID", request_id)
        return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and query strings are client errors (400)."""
    logger.warning("request.validation_error: {}", exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the API application.

    When ``dependencies`` is given it is installed immediately and startup
    does not build its own; tests use this to inject an in-memory store.
    """
    config = get_config()
    is_production = config.app.environment == "production"
    cors = config.app.cors

    if is_production and "*" in cors.origins:
        raise RuntimeError("Wildcard CORS origin is not allowed in production")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup(app)
        try:
            yield
        finally:
            await shutdown(app)

    app = FastAPI(
        title="Phonebook Contacts API",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    if dependencies is not None:
        app.state.app_dependencies = dependencies

    # Last added runs outermost. Metrics sits directly under log_requests so
    # CORS preflights are counted and a raising handler is counted before it
    # becomes a 500
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_router)
    app.include_router(contacts_router)
    app.include_router(metrics_router)

    return app


async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Phonebook API starting ({})", config.app.environment)

    if getattr(app.state, "app_dependencies", None) is None:
        app.state.app_dependencies = build_application_dependencies()

    deps: ApplicationDependencies = app.state.app_dependencies
    if config.database.create_tables:
        DbManageService(deps.database_service.engine).create_all()


async def shutdown(app: FastAPI) -> None:
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is None:
        return
    snapshot = deps.metrics_service.current_snapshot()
    logger.info(
        "Phonebook API stopping after {}s: {} requests, {} errors",
        snapshot.uptime_seconds,
        snapshot.total_requests,
        snapshot.total_errors,
    )
    deps.database_service.engine.dispose()


def run() -> None:
    """Serve the module-level app with uvicorn on the configured address."""
    import uvicorn

    config = get_config()
    # log_requests already records each request
    uvicorn.run(app, host=config.app.host, port=config.app.port, access_log=False)


configure_logging()
app = create_app()


if __name__ == "__main__":
    run()
