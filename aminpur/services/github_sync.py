# aminpur/services/github_sync.py
"""
Mirror of the dataset to a single JSON file in a GitHub repository.

Write path uses the Contents API: read the current sha, then PUT the whole
file with that sha as a precondition. There are no retries and no merge.
If the file changes between the GET and the PUT, GitHub rejects the write
(409/422) and the caller gets SyncFailed; the only recourse is to publish
again. Under several concurrent admins the last successful writer wins.

Read path fetches the raw file from the public raw endpoint, cache-busted.
"""
from __future__ import annotations

import base64
import datetime as dt
import logging
import re
import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import httpx

from ..errors import (
    ConfigurationIncomplete, FetchFailed, RemoteNotFound, SyncFailed
)
from ..schemas import RemoteSyncConfig, Snapshot
from .snapshot import dump_snapshot, parse_snapshot

logger = logging.getLogger(__name__)


@dataclass
class PublishResult:
    created: bool                   # True when the file did not exist before
    sha: Optional[str] = None       # new blob sha
    commit: Optional[str] = None    # commit sha


def _scrub(text: str, token: str) -> str:
    """Masks whole-token occurrences only; a one-letter token must not eat words."""
    if not token:
        return text
    pattern = r"(?<![\w-])" + re.escape(token) + r"(?![\w-])"
    return re.sub(pattern, "***", text)


def _error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"HTTP {resp.status_code}"


def encode_content(snapshot: Snapshot) -> str:
    """UTF-8 JSON, then base64, as the Contents API expects."""
    return base64.b64encode(dump_snapshot(snapshot).encode("utf-8")).decode("ascii")


def commit_message(now: Optional[dt.datetime] = None) -> str:
    now = now or dt.datetime.now()
    return f"Admin Update: {now.strftime('%d/%m/%Y, %H:%M:%S')}"


class GitHubSyncClient:
    def __init__(
        self,
        api_url: str = "https://api.github.com",
        raw_url: str = "https://raw.githubusercontent.com",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.raw_url = raw_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        # timeouts are left at httpx defaults
        return httpx.AsyncClient(transport=self._transport)

    def contents_url(self, config: RemoteSyncConfig) -> str:
        path = quote(config.path.lstrip("/"))
        return f"{self.api_url}/repos/{config.owner}/{config.repo}/contents/{path}"

    def raw_file_url(self, config: RemoteSyncConfig) -> str:
        path = quote(config.path.lstrip("/"))
        return f"{self.raw_url}/{config.owner}/{config.repo}/{config.branch}/{path}"

    # ---------- write ----------

    async def _current_sha(self, client: httpx.AsyncClient, config: RemoteSyncConfig) -> str:
        resp = await client.get(
            self.contents_url(config),
            params={"ref": config.branch},
            headers={
                "Authorization": f"token {config.token}",
                "Accept": "application/vnd.github.v3+json",
            },
        )
        if resp.status_code == 404:
            raise RemoteNotFound(config.path)
        if resp.status_code != 200:
            raise SyncFailed(_scrub(_error_message(resp), config.token), resp.status_code)
        try:
            sha = (resp.json() or {}).get("sha")
        except (ValueError, AttributeError):
            sha = None
        if not sha:
            raise SyncFailed("remote metadata has no sha", resp.status_code)
        return sha

    async def publish(self, config: RemoteSyncConfig, snapshot: Snapshot) -> PublishResult:
        if not config.is_complete():
            raise ConfigurationIncomplete("GitHub token, owner and repo are required")

        try:
            async with self._client() as client:
                try:
                    sha: Optional[str] = await self._current_sha(client, config)
                except RemoteNotFound:
                    sha = None

                body = {
                    "message": commit_message(),
                    "content": encode_content(snapshot),
                    "branch": config.branch,
                }
                if sha:
                    body["sha"] = sha

                resp = await client.put(
                    self.contents_url(config),
                    json=body,
                    headers={
                        "Authorization": f"token {config.token}",
                        "Accept": "application/vnd.github.v3+json",
                    },
                )
        except httpx.HTTPError as e:
            msg = _scrub(str(e) or e.__class__.__name__, config.token)
            logger.warning("GitHub sync failed: %s", msg)
            raise SyncFailed(msg) from None

        if resp.status_code not in (200, 201):
            msg = _scrub(_error_message(resp), config.token)
            logger.warning("GitHub sync failed (%s): %s", resp.status_code, msg)
            raise SyncFailed(msg, resp.status_code)

        try:
            data = resp.json() if resp.content else {}
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        result = PublishResult(
            created=sha is None,
            sha=((data.get("content") or {}).get("sha")),
            commit=((data.get("commit") or {}).get("sha")),
        )
        logger.info(
            "GitHub sync ok: %s/%s:%s@%s (%s)",
            config.owner, config.repo, config.path, config.branch,
            "created" if result.created else "updated",
        )
        return result

    # ---------- read ----------

    async def load(self, config: RemoteSyncConfig) -> Snapshot:
        if not (config.owner and config.repo):
            raise ConfigurationIncomplete("GitHub owner and repo are required")

        url = self.raw_file_url(config)
        try:
            async with self._client() as client:
                resp = await client.get(url, params={"t": int(time.time() * 1000)})
        except httpx.HTTPError as e:
            raise FetchFailed(str(e) or e.__class__.__name__) from None

        if not resp.is_success:
            raise FetchFailed(f"HTTP {resp.status_code}", resp.status_code)

        # ParseFailed propagates to the caller
        snapshot = parse_snapshot(resp.content)
        logger.info("remote dataset loaded: %d categories, %d items",
                    len(snapshot.categories), len(snapshot.items))
        return snapshot
