"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount HR endpoints under /v1 prefix and auth routes under /v1/auth
  - Expose health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - interfaces.api.http.router: business endpoints

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /healthz follows Kubernetes health check convention
  - In APP_ENV=test the DB pool is not opened (in-memory adapters)
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..container import get_account_repository, get_cache
from ..crosscutting.config import get_settings
from ..crosscutting.exceptions import CacheError
from ..crosscutting.logger import configure_logging, logger
from ..crosscutting.middleware import RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import router
from .auth_routes import router as auth_router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Initializes the DB pool outside tests."""
    settings = get_settings()
    use_pool = not settings.is_test()

    if use_pool:
        # Initialize DB pool (must happen before any repository usage)
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            statement_timeout_ms=settings.db_statement_timeout_ms,
        )

    try:
        logger.info(
            "HR System API starting up",
            extra={
                "app_env": settings.app_env,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
                "session_ttl_seconds": settings.jwt_access_ttl_seconds,
            },
        )
        yield
    finally:
        if use_pool:
            close_pool()
        logger.info("HR System API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, use_json=settings.log_json)

    fastapi_app = FastAPI(
        title="HR System API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "auth", "description": "Login / logout (single active session)"},
            {"name": "accounts", "description": "Account provisioning"},
            {"name": "employee", "description": "Employee self-service"},
            {"name": "hr", "description": "HR leave workflow and employment records"},
        ],
    )

    # R: Add request context middleware
    fastapi_app.add_middleware(RequestContextMiddleware)

    # R: Configure CORS with secure defaults
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
    )

    # R: Register API routes under /v1 prefix for versioning
    fastapi_app.include_router(router, prefix="/v1")
    fastapi_app.include_router(auth_router, prefix="/v1")

    # R: Register exception handlers for structured error responses
    register_exception_handlers(
        fastapi_app, expose_details=not settings.is_production()
    )

    @fastapi_app.get("/healthz", tags=["health"])
    def healthz(request: Request):
        """
        R: Health check that verifies DB and cache connectivity.

        Returns:
            ok: True if all checked systems operational
            db / cache: "connected" or "disconnected"
            request_id: Correlation ID for this request
        """
        db_status = "connected" if get_account_repository().ping() else "disconnected"

        cache_status = "disconnected"
        try:
            if get_cache().ping():
                cache_status = "connected"
        except CacheError as exc:
            logger.warning("Health check: cache unavailable", extra={"error": exc.message})

        return {
            "ok": db_status == "connected" and cache_status == "connected",
            "db": db_status,
            "cache": cache_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    return fastapi_app


app = create_app()
