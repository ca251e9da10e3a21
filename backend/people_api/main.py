"""People API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Session middleware wraps every request; the auth gate guards only /auth
    - Global error handlers map PeopleApiError → structured JSON responses
    - Database schema created on startup via lifespan; failure aborts startup

Design Decisions:
    - create_app(settings, oauth_config) over a module-level app: importing this module
      reads no files and logs nothing; serve with `uvicorn --factory people_api.main:create_app`
      or `python -m people_api`
    - OAuthConfig resolved once, before the app exists: SessionMiddleware needs its secret
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from people_api.api.error_handlers import register_error_handlers
from people_api.api.routes import auth, health, people
from people_api.config import Settings, get_settings
from people_api.core.errors import DatabaseError
from people_api.infrastructure.database import DatabaseSessionManager
from people_api.infrastructure.oauth_gate import (
    GitHubAuthGate, OAuthConfig, load_oauth_config,
)
from people_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await db_manager.create_schema()
    except DatabaseError:
        await db_manager.dispose()
        raise
    app.state.db_manager = db_manager
    logger.info("People API started")
    yield
    logger.info("People API shutting down")
    await db_manager.dispose()


def build_oauth_config(settings: Settings) -> OAuthConfig:
    return load_oauth_config(
        redirect_url=settings.redirect_url,
        credentials_file=settings.credentials_file,
        scopes=settings.oauth_scopes,
        secret=settings.session_secret,
        session_cookie=settings.session_cookie,
    )


def create_app(
    settings: Settings | None = None,
    oauth_config: OAuthConfig | None = None,
) -> FastAPI:
    """Wire settings, middleware, routes, and error handlers into an app."""
    settings = settings or get_settings()
    oauth_config = oauth_config or build_oauth_config(settings)

    app = FastAPI(title="People API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.auth_gate = GitHubAuthGate(oauth_config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=oauth_config.session_secret,
        session_cookie=oauth_config.session_cookie,
        same_site="lax",
    )

    app.include_router(health.router)
    app.include_router(people.router)
    app.include_router(auth.router)
    app.include_router(auth.private_router)

    register_error_handlers(app)
    return app

