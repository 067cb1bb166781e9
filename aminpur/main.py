# aminpur/main.py
from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker
from starlette.middleware.sessions import SessionMiddleware

from .config import settings
from .db import SessionLocal, init_db
from .schemas import RemoteSyncConfig
from .services.dataset import load_directory, resolve_sync_config
from .services.github_sync import GitHubSyncClient
from .services.store import LocalStore
from .services.sync_coordinator import SyncCoordinator
from .routers import admin as admin_router, public as public_router

logger = logging.getLogger(__name__)


def env_sync_config() -> Optional[RemoteSyncConfig]:
    if not (settings.GITHUB_OWNER or settings.GITHUB_REPO or settings.GITHUB_TOKEN):
        return None
    return RemoteSyncConfig(
        token=settings.GITHUB_TOKEN or "",
        owner=settings.GITHUB_OWNER or "",
        repo=settings.GITHUB_REPO or "",
        path=settings.GITHUB_PATH,
        branch=settings.GITHUB_BRANCH,
    )


def create_app(
    session_factory: Optional[sessionmaker] = None,
    github_transport: Optional[httpx.AsyncBaseTransport] = None,
    ai_transport: Optional[httpx.AsyncBaseTransport] = None,
    load_remote: Optional[bool] = None,
) -> FastAPI:
    app = FastAPI(title="Aminpur Thana Info Portal")

    # --- CORS ---
    allowed_origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()] or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- sessions (admin flag) ---
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SECRET_KEY,
        session_cookie=settings.COOKIE_NAME,
        same_site=(settings.COOKIE_SAMESITE or "lax"),
        https_only=settings.COOKIE_SECURE,
    )

    app.include_router(public_router.router)
    app.include_router(admin_router.router)

    factory = session_factory or SessionLocal
    app.state.store = LocalStore(factory)
    app.state.sync_client = GitHubSyncClient(
        settings.GITHUB_API_URL, settings.GITHUB_RAW_URL, transport=github_transport
    )
    app.state.coordinator = SyncCoordinator(app.state.sync_client)
    app.state.ai_transport = ai_transport
    app.state.sync_config = RemoteSyncConfig()
    app.state.directory = None

    use_remote = settings.LOAD_REMOTE_ON_STARTUP if load_remote is None else load_remote

    @app.on_event("startup")
    async def on_startup():
        init_db(factory.kw["bind"])
        store: LocalStore = app.state.store
        config = resolve_sync_config(store, env_sync_config())
        app.state.sync_config = config
        outcome = await load_directory(
            store,
            app.state.sync_client if use_remote else None,
            config,
        )
        app.state.directory = outcome.state
        logger.info("directory ready (source=%s)", outcome.source)

    return app


logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()
