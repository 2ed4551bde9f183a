# 📄 File: profilehub/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts ProfileHub, connects the user features together
# and turns errors like "user not found" into clear answers for whoever is calling
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: logging setup, composition of the user
# management module, request-context middleware, router registration and exception handlers
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - profilehub.shared.config.settings
# - profilehub.shared.utils.logging
# - profilehub.bootstrap (module composition)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - profilehub console script
# - API integration tests

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Callable, Dict, Optional
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from profilehub.api.health import health_router
from profilehub.bootstrap import UserManagementServices, build_user_management
from profilehub.modules.user_management.presentation.api.v1 import users_router
from profilehub.shared.config.settings import Settings, get_settings
from profilehub.shared.core.exceptions import ProfileHubException, ValidationError
from profilehub.shared.utils.logging import (
    get_logger,
    log_context,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Logs startup and shutdown; the in-memory collaborators need no
    explicit opening or closing.
    """
    settings: Settings = app.state.settings
    log_startup_event(
        settings.APP_NAME,
        settings.APP_VERSION,
        extra={"environment": settings.ENVIRONMENT, "analytics_backend": settings.ANALYTICS_BACKEND},
    )
    yield
    log_shutdown_event(settings.APP_NAME)


def _error_response(request: Request, exc: ProfileHubException) -> JSONResponse:
    """Render an exception through to_dict() plus request metadata."""
    content = exc.to_dict()
    content["error"]["timestamp"] = datetime.now(timezone.utc).isoformat()
    content["error"]["request_id"] = getattr(request.state, "request_id", None)
    return JSONResponse(status_code=exc.status_code, content=content)


def _notify_analytics(operation: str, call: Callable[..., None], *args: Any) -> None:
    """Run an analytics port call; sink failures are logged and dropped."""
    try:
        call(*args)
    except Exception as e:
        logger.warning(
            f"Analytics {operation} failed: {e}",
            extra={"analytics_operation": operation, "error_type": type(e).__name__}
        )


def create_application(
    services: Optional[UserManagementServices] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Application factory function.

    Args:
        services: Pre-composed user management services (tests inject these)
        settings: Settings override, defaults to get_settings()

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    services = services or build_user_management(settings)
    _notify_analytics("set_global_properties", services.analytics_service.set_global_properties, {
        "app_name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    })

    app.state.settings = settings
    app.state.user_management = services

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        user_id = request.headers.get("X-User-ID")
        request.state.request_id = request_id

        with log_context(request_id=request_id, user_id=user_id):
            if user_id:
                _notify_analytics("set_user_id", services.analytics_service.set_user_id, user_id)
            response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-API-Version"] = "v1"
        return response

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router, prefix=settings.API_PREFIX)
    app.include_router(users_router, prefix=settings.API_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(ProfileHubException)
    async def profilehub_exception_handler(request: Request, exc: ProfileHubException) -> JSONResponse:
        """Handle ProfileHub application exceptions."""
        logger.warning(
            f"Request failed: {exc.message}",
            extra={"error_code": exc.error_code, "status_code": exc.status_code, "path": request.url.path}
        )
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Render FastAPI request validation failures in the ProfileHub error envelope."""
        errors: Dict[str, str] = {}
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
            errors.setdefault(".".join(loc) or "__root__", error.get("msg", "Invalid value"))

        return _error_response(request, ValidationError(message="Request validation failed", errors=errors))

    @app.exception_handler(Exception)
    async def internal_server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected failures."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        details = {"error_type": type(exc).__name__} if settings.DEBUG else {}
        return _error_response(request, ProfileHubException(
            "An internal server error occurred",
            details=details,
            error_code="INTERNAL_SERVER_ERROR"
        ))

    return app


app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running with python -m profilehub.main or the
    profilehub console script.
    """
    settings = get_settings()
    uvicorn.run(
        "profilehub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development and settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
