"""
Main entrypoint for the Student Records API.

This module assembles the FastAPI application, sets up logging,
registers middleware and exception handlers and includes versioned
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn student_records_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import time

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import StudentError
from .core.logging_config import setup_logging
from .core.store import StudentStore, get_store

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}

MSG_PAGE_NOT_FOUND = "Page non trouvée."
MSG_INTERNAL_ERROR = "Une erreur interne est survenue. Veuillez réessayer."
MSG_INVALID_JSON = "Le corps de la requête n'est pas un JSON valide."
MSG_INVALID_BODY = "Le corps de la requête est invalide."
MSG_INVALID_FIELD = "Champ invalide : {field}"


def _error_response(status_code: int, kind: str, messages, headers=None) -> JSONResponse:
    # Responses built here can bypass the HTTP middleware (500s do),
    # so they carry the security headers themselves.
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": kind, "errors": list(messages)},
        headers={**(headers or {}), **SECURITY_HEADERS},
    )


def _describe_validation_error(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return MSG_INVALID_JSON
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return MSG_INVALID_FIELD.format(field=field) if field else MSG_INVALID_BODY


def register_exception_handlers(app: FastAPI) -> None:
    """Map service failures and unexpected faults onto JSON responses."""

    @app.exception_handler(StudentError)
    async def student_error_handler(request: Request, exc: StudentError) -> JSONResponse:
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.kind, exc)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _error_response(exc.status_code, "not_found", [MSG_PAGE_NOT_FOUND])
        return _error_response(exc.status_code, "http_error", [str(exc.detail)], getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = list(dict.fromkeys(_describe_validation_error(error) for error in exc.errors()))
        logger.info("%s %s rejected (validation_failure): %s", request.method, request.url.path, messages)
        return _error_response(status.HTTP_400_BAD_REQUEST, "validation_failure", messages or [MSG_INVALID_BODY])

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", [MSG_INTERNAL_ERROR])


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    @app.middleware("http")
    async def log_and_secure(request: Request, call_next):
        """Log each request with its latency and add security headers."""
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers.update(SECURITY_HEADERS)
        logger.info(
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/", tags=["root"])
    async def root() -> dict:
        """Service information and the list of student routes."""
        return {
            "service": settings.project_name,
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "list": "GET /api/v1/students/",
                "create": "POST /api/v1/students/",
                "detail": "GET /api/v1/students/{id}",
                "update": "PUT /api/v1/students/{id}",
                "delete": "DELETE /api/v1/students/{id}",
            },
        }

    @app.get("/health", tags=["health"])
    async def health_check(store: StudentStore = Depends(get_store)) -> dict:
        return {
            "status": "healthy",
            "service": settings.project_name,
            "version": settings.api_version,
            "students": len(store),
        }

    @app.on_event("startup")
    async def startup_event() -> None:
        store = get_store()
        logger.info("Server ready on http://%s:%s", settings.app_host, settings.app_port)
        logger.info("Environment: %s", settings.app_env)
        logger.info("%s students loaded", len(store))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
