import logging
import os
from datetime import datetime
from threading import Lock

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from styled.config import settings
from styled.core.exceptions import (
    StyledException,
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exception_handler,
    styled_exception_handler,
)
from styled.core.logging import configure_logging
from styled.core.rate_limit import limiter
from styled.database import engine, init_db
from styled.routers import calendar, closet, inspo, outfits, packing, profile, weather

logger = logging.getLogger(__name__)

# Global flag to track startup completion
_startup_complete = False
_startup_lock = Lock()

app = FastAPI(
    title="Styled API",
    description="Backend API for Styled: closet, calendar-aware outfits, weather and packing lists",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins() if settings.ENVIRONMENT == "production" else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)

app.state.limiter = limiter
app.add_exception_handler(StyledException, styled_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.on_event("startup")
async def startup() -> None:
    global _startup_complete
    configure_logging()
    init_db()
    with _startup_lock:
        _startup_complete = True
    logger.info(f"Styled API started (environment={settings.ENVIRONMENT})")


# Include routers
app.include_router(closet.router, prefix="/closet", tags=["closet"])
app.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
app.include_router(weather.router, prefix="/weather", tags=["weather"])
app.include_router(outfits.router, prefix="/outfits", tags=["outfits"])
app.include_router(packing.router, prefix="/packing", tags=["packing"])
app.include_router(profile.router, prefix="/profile", tags=["profile"])
app.include_router(inspo.router, prefix="/inspo", tags=["inspo"])


@app.get("/health")
@app.head("/health")
async def health_check():
    """
    Health check endpoint - returns immediately.
    Use /ready for readiness check (waits for startup completion).
    Supports both GET and HEAD methods for monitoring services.
    """
    db_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except SQLAlchemyError as exc:
        logger.warning(f"Health check database probe failed: {exc}")

    return {
        "status": "ok",
        "ready": _startup_complete,
        "database": "connected" if db_ok else "checking"
    }


@app.get("/ready")
async def readiness_check():
    """Returns 200 when startup tasks complete, 503 if still starting."""
    if _startup_complete:
        return {"status": "ready", "message": "Application is ready"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "starting", "message": "Application is still starting up"}
    )


@app.get("/admin/version")
async def version_info():
    """Admin: return deployment/version metadata to verify live build."""
    commit = (
        os.getenv("RENDER_GIT_COMMIT")
        or os.getenv("GIT_COMMIT")
        or os.getenv("VERCEL_GIT_COMMIT_SHA")
    )
    return {
        "commit": commit,
        "service_version": os.getenv("SERVICE_VERSION"),
        "app_version": app.version,
        "time": datetime.utcnow().isoformat() + "Z",
        "env": settings.ENVIRONMENT,
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to Styled API",
        "version": app.version,
        "docs": "/docs"
    }
