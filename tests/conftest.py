"""
Shared fixtures: a throwaway SQLite store and a fake GitHub behind
httpx.MockTransport.
"""
import json
from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from aminpur.config import settings
from aminpur.db import init_db, make_engine, make_session_factory
from aminpur.main import create_app
from aminpur.schemas import RemoteSyncConfig
from aminpur.services.github_sync import GitHubSyncClient
from aminpur.services.store import LocalStore


REMOTE_DATASET = {
    "categories": [
        {"id": "c1", "name": "হাসপাতাল", "description": "", "icon": "Stethoscope", "color": "bg-red-500"},
    ],
    "items": [
        {"id": "i1", "categoryId": "c1", "title": "Remote Clinic", "address": "Main road"},
    ],
    "version": "2.0",
    "generatedAt": "2026-01-01T00:00:00+00:00",
}


class FakeGitHub:
    """Plays both the Contents API and the raw file host."""

    def __init__(
        self,
        sha: Optional[str] = None,
        put_status: int = 201,
        put_message: str = "conflict",
        raw: Optional[bytes] = None,
        raw_status: int = 200,
        fail_with: Optional[Exception] = None,
    ) -> None:
        self.sha = sha
        self.put_status = put_status
        self.put_message = put_message
        self.raw = raw if raw is not None else json.dumps(REMOTE_DATASET).encode("utf-8")
        self.raw_status = raw_status
        self.fail_with = fail_with
        self.requests: list[httpx.Request] = []
        self.put_bodies: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        if request.url.host == "raw.githubusercontent.com":
            return httpx.Response(self.raw_status, content=self.raw)

        if request.method == "GET":
            if self.sha is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json={"sha": self.sha, "path": "data.json"})

        if request.method == "PUT":
            self.put_bodies.append(json.loads(request.content))
            if self.put_status in (200, 201):
                return httpx.Response(
                    self.put_status,
                    json={"content": {"sha": "newsha"}, "commit": {"sha": "commit1"}},
                )
            return httpx.Response(self.put_status, json={"message": self.put_message})

        return httpx.Response(405)

    @property
    def methods(self) -> list[str]:
        return [r.method for r in self.requests]


@pytest.fixture
def session_factory(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def store(session_factory):
    return LocalStore(session_factory)


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def sync_client(fake_github):
    return GitHubSyncClient(transport=httpx.MockTransport(fake_github))


@pytest.fixture
def sync_config():
    return RemoteSyncConfig(token="t", owner="o", repo="r", path="data.json", branch="main")


@pytest.fixture
def app(session_factory, fake_github):
    return create_app(
        session_factory=session_factory,
        github_transport=httpx.MockTransport(fake_github),
        load_remote=False,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client):
    resp = client.post(
        "/admin/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert resp.status_code == 200
    return client
