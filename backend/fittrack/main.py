import logging
from contextlib import asynccontextmanager
from typing import Any
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from fittrack.core.config import Settings, settings
from fittrack.core.database import engine
from fittrack.api.auth import router as auth_router
from fittrack.api.users import router as users_router
from fittrack.api.foods import router as foods_router
from fittrack.api.exercises import router as exercises_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Value shipped in .env.example
EXAMPLE_COOKIE_SECRET = "change-me-to-a-random-string-of-at-least-32-chars"
RELAXED_ENVIRONMENTS = {"development", "test"}


def validate_production_settings(settings: Settings) -> None:
    """Refuse to start with unsafe session settings outside development."""
    if settings.environment in RELAXED_ENVIRONMENTS:
        return

    if settings.session_cookie_secret == EXAMPLE_COOKIE_SECRET:
        raise RuntimeError(
            "SESSION_COOKIE_SECRET must be set in production. "
            "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(48))\""
        )

    if settings.cookie_secure is False:
        raise RuntimeError(
            "COOKIE_SECURE=false is only allowed in development. "
            "Session cookies must be sent over HTTPS only."
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    validate_production_settings(settings)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Fitness and nutrition tracking API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(foods_router, prefix="/api")
app.include_router(exercises_router, prefix="/api")


@app.get("/health")
async def health_check() -> dict[str, Any]:
    return {
        "status": "healthy",
        "version": "0.1.0",
        "environment": settings.environment,
    }
