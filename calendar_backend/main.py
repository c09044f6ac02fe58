"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn calendar_backend.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from calendar_backend.core.config import settings
from calendar_backend.core.logging import configure_logging
from calendar_backend.routers import auth, calendar
from calendar_backend.schemas.errors import ErrorResponse
from calendar_backend.services.errors import ServiceError


configure_logging(settings.LOG_LEVEL)

logger = logging.getLogger("calendar_backend.main")


app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The frontend is hosted on another origin and sends the session cookie,
# so credentials must be allowed and the origin must be explicit (no "*").
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


# ---------------------------------------------------------------------------
# ERROR HANDLING
# ---------------------------------------------------------------------------


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Convert service errors into the standard JSON error body."""
    logger.warning(
        f"{request.method} {request.url.path} failed: {exc.message}",
        extra={"status_code": exc.status_code, "error_type": type(exc).__name__},
    )
    body = ErrorResponse(
        message=exc.message,
        details=None if settings.is_production else exc.details,
        needs_reauth=True if getattr(exc, "needs_reauth", False) else None,
    )
    return JSONResponse(status_code=exc.status_code, content=body.to_content())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or wrongly typed fields are client errors (400)."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} rejected: {problems}")
    body = ErrorResponse(
        message="Invalid request body",
        details=None if settings.is_production else problems,
    )
    return JSONResponse(status_code=400, content=body.to_content())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort: log and return a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body = ErrorResponse(
        message="Internal server error",
        details=None if settings.is_production else str(exc),
    )
    return JSONResponse(status_code=500, content=body.to_content())


# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# auth.router: /api/auth/google, /api/auth/calendar/events, /api/auth/logout
# calendar.router: /api/calendar/events
app.include_router(auth.router)
app.include_router(calendar.router)


@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Does not call Google; it only shows that the process is serving.
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "calendar_backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=not settings.is_production,
    )
