# TidyHQ CRM backend entrypoint: application factory plus the module-level app uvicorn serves.

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tidyhq.api import activities
from tidyhq.api import auth
from tidyhq.api import bookings
from tidyhq.api import clients
from tidyhq.api import dashboard
from tidyhq.api import follow_ups
from tidyhq.api import jobs
from tidyhq.api import leads
from tidyhq.api import messages
from tidyhq.api import properties
from tidyhq.api import services
from tidyhq.core.dev_seed import ensure_default_dev_user, seed_dev_data
from tidyhq.core.errors import register_error_handlers
from tidyhq.core.rate_limit import RateLimiter
from tidyhq.core.settings import Settings, get_settings
from tidyhq.db.session import Database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.app_name, version=settings.api_version)

    database = Database.from_settings(settings)
    database.create_all()
    app.state.settings = settings
    app.state.database = database
    app.state.rate_limiters = {
        scope: RateLimiter(settings.auth_rate_limit_attempts, settings.auth_rate_limit_window_seconds)
        for scope in ("login", "register")
    }

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(clients.router)
    app.include_router(leads.router)
    app.include_router(jobs.router)
    app.include_router(bookings.router)
    app.include_router(messages.router)
    app.include_router(services.router)
    app.include_router(properties.router)
    app.include_router(activities.router)
    app.include_router(follow_ups.router)
    app.include_router(dashboard.router)

    @app.get("/")
    def read_root():
        return {"app": "TidyHQ CRM backend", "status": "ok"}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    @app.on_event("startup")
    def seed_development_data():
        if not settings.seed_dev_data:
            return
        with database.session() as db:
            ensure_default_dev_user(db)
            seed_dev_data(db)

    @app.on_event("shutdown")
    def close_database():
        database.dispose()

    logger.info("TidyHQ CRM started (environment=%s)", settings.environment)
    return app


app = create_app()
