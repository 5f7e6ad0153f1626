from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forumhub.api.errors import install_error_handlers
from forumhub.api.routers import topics
from forumhub.core.config import DEFAULT_PASSWORD, settings
from forumhub.core.http import install_basic_auth, install_request_logging
from forumhub.core.logging import configure_logging
from forumhub.core.security import CredentialStore
from forumhub.db.session import dispose_engine, init_models

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if settings.app_env == "production" and not settings.auth_password_hash and settings.auth_password == DEFAULT_PASSWORD:
            logger.warning("AUTH_PASSWORD is still the default; set AUTH_PASSWORD_HASH or AUTH_PASSWORD in production.")
        if settings.create_tables_on_startup:
            await init_models()
        yield
        await dispose_engine()

    app = FastAPI(title="ForumHub API", lifespan=lifespan)

    # Starlette runs the last added middleware first: CORS, then logging, then auth.
    install_basic_auth(app, CredentialStore.from_settings(settings), settings.auth_realm)
    install_request_logging(app)

    origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app)
    app.include_router(topics.router)

    @app.get("/")
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
