"""Lift Planner Pro training service - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from liftplanner.core.config import Settings, get_settings
from liftplanner.core.errors import register_exception_handlers
from liftplanner.core.log import configure_logging
from liftplanner.db.session import Database
from liftplanner.routers import api
from liftplanner.services.seeding import seed_scenarios

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database(settings)
        db.connect()
        app.state.db = db

        if settings.create_tables_on_startup:
            await db.create_all()

        if settings.seed_on_startup:
            async with db.session() as session:
                await seed_scenarios(session)

        try:
            yield
        finally:
            # server stops accepting requests before this runs
            await db.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Training scenarios, attempts and trainee progress",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.debug("Application created: %s", settings.app_name)
    return app


app = create_app()
