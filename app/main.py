"""
Tourist Safety Hub - FastAPI Application Entry Point

Backend for tourist safety: panic/geofence/AI alerts, mocked blockchain
identity issuance, dashboard statistics and a GPS tracker feed.

DESIGN PRINCIPLES:
- Every response uses the {success, data?, error?} envelope
- Internal error details never reach the client
- Storage backend is injected (memory for demos/tests, Firestore in production)
- Chain and dashboard filler values are mocked behind providers
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import AppError
from app.core.settings import settings
from app.models.base import fail, ok
from app.routes import alerts, auth, blockchain, dashboard, health, tracking
from app.storage.registry import get_storage

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Tourist safety alerts, identity issuance and dashboard API",
    debug=settings.DEBUG
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render service errors (validation, auth, not found, conflict) as the envelope."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=fail(exc.message))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies/params become 400 with the first error."""
    errors = exc.errors()
    logger.info(f"Validation error on {request.method} {request.url.path}: {errors}")
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", []) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=fail(message))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(status_code=exc.status_code, content=fail("Route not found"))
    return JSONResponse(status_code=exc.status_code, content=fail(str(exc.detail)))


# Global exception handler to catch ALL exceptions
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log the full traceback server side; the client gets a generic message."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=fail("Internal server error")
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Application lifecycle events
@app.on_event("startup")
async def startup_event():
    """
    Initialize storage on application startup and seed demo data if enabled.
    """
    print(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    try:
        storage = get_storage()
    except Exception as e:
        print(f"Warning: Storage initialization failed: {e}")
        print("   The app will start but database operations may fail.")
        return

    print(f"[STARTUP] Storage backend: {storage.backend}")

    if settings.SEED_DEMO_DATA:
        from app.storage.seed import seed_demo_data
        try:
            seed_demo_data(storage, bcrypt_rounds=settings.BCRYPT_ROUNDS)
        except Exception as e:
            # Fail gracefully - don't block startup
            logger.error(f"[STARTUP] Failed to seed demo data: {e}", exc_info=True)


@app.on_event("shutdown")
async def shutdown_event():
    print(f"Shutting down {settings.APP_NAME}")


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(alerts.router)
app.include_router(blockchain.router)
app.include_router(dashboard.router)
app.include_router(tracking.router)


# Root endpoint
@app.get("/")
async def root():
    """
    Root endpoint - API information.
    """
    return ok({
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
    })
