"""FastAPI application - main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blu_networking.config import get_settings
from blu_networking.infrastructure.database import SessionLocal, dispose_engine, init_db
from blu_networking.core.logging import configure_logging
from blu_networking.core.middleware import setup_middleware
from blu_networking.core.exceptions import register_exception_handlers

# Import routers
from blu_networking.interfaces.api.auth import router as auth_router
from blu_networking.interfaces.api.members import router as members_router
from blu_networking.interfaces.api.organizations import router as organizations_router
from blu_networking.interfaces.api.events import router as events_router
from blu_networking.interfaces.api.leads import router as leads_router
from blu_networking.interfaces.api.spotlights import router as spotlights_router
from blu_networking.interfaces.api.analytics import router as analytics_router
from blu_networking.interfaces.api.admin import router as admin_router
from blu_networking.interfaces.api.messages import router as messages_router
from blu_networking.interfaces.api.board_minutes import router as board_minutes_router
from blu_networking.interfaces.api.networking_tips import router as networking_tips_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)

APP_NAME = "BLU Networking"
APP_VERSION = "1.0.0"


def seed_superadmin() -> None:
    from blu_networking.application.services.auth_service import seed_superadmin as seed
    from blu_networking.domain.models.user import User
    from blu_networking.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

    db = SessionLocal()
    try:
        seed(SQLAlchemyUserRepository(db, User))
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    logger.info("Starting BLU Networking API", env=settings.ENVIRONMENT)

    # Create DB tables (dev only - use migrations in production)
    init_db()
    logger.info("Database tables created/verified")

    seed_superadmin()

    if settings.SCHEDULER_ENABLED:
        from blu_networking.scheduler.jobs import start_scheduler
        start_scheduler()

    yield

    if settings.SCHEDULER_ENABLED:
        from blu_networking.scheduler.jobs import stop_scheduler
        stop_scheduler()
    dispose_engine()
    logger.info("BLU Networking API stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="BLU Networking API",
        description="Membership networking - members, chapters, events, leads, messaging and AI tips",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    # Setup Middleware (Correlation ID, Logging)
    setup_middleware(app)

    register_exception_handlers(app)

    # Added last so it runs first on the way in
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(members_router)
    app.include_router(organizations_router)
    app.include_router(events_router)
    app.include_router(leads_router)
    app.include_router(spotlights_router)
    app.include_router(analytics_router)
    app.include_router(admin_router)
    app.include_router(messages_router)
    app.include_router(board_minutes_router)
    app.include_router(networking_tips_router)

    @app.get("/")
    def root():
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
