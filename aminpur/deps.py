# aminpur/deps.py
from __future__ import annotations

from fastapi import Request

from .services.github_sync import GitHubSyncClient
from .services.store import LocalStore
from .services.sync_coordinator import SyncCoordinator
from .state import DirectoryState

# everything lives on app.state, filled in at startup (see main.create_app)


def get_directory(request: Request) -> DirectoryState:
    return request.app.state.directory


def get_store(request: Request) -> LocalStore:
    return request.app.state.store


def get_sync_client(request: Request) -> GitHubSyncClient:
    return request.app.state.sync_client


def get_coordinator(request: Request) -> SyncCoordinator:
    return request.app.state.coordinator
