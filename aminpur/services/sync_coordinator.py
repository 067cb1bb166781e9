# aminpur/services/sync_coordinator.py
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from ..schemas import RemoteSyncConfig, Snapshot
from .github_sync import GitHubSyncClient, PublishResult

logger = logging.getLogger(__name__)


class SyncCoordinator:
    """
    One publish in flight per process. A trigger that arrives while a
    publish runs marks the coordinator dirty and waits; when the running
    publish ends, a single follow-up goes out with the newest snapshot.
    Triggers that pile up meanwhile collapse into that one follow-up.
    Each write replaces the whole file. A waiter whose config differs from
    the one last published does not share that result; it publishes again
    with its own config.

    No cancellation: a started publish always runs to completion.
    """

    def __init__(self, client: GitHubSyncClient) -> None:
        self.client = client
        self._lock = asyncio.Lock()
        self._dirty = False
        self._generation = 0        # bumped on every trigger
        self._published = 0         # generation covered by the last finished publish
        self._last: Optional[PublishResult] = None
        self._last_error: Optional[BaseException] = None
        self._last_config: Optional[RemoteSyncConfig] = None
        self.in_progress = False

    async def publish(
        self,
        config: RemoteSyncConfig,
        snapshot_provider: Callable[[], Snapshot],
    ) -> PublishResult:
        self._generation += 1
        my_generation = self._generation
        self._dirty = True

        async with self._lock:
            # someone else already published state at least as new as ours,
            # to the same target
            if self._published >= my_generation and config == self._last_config:
                if self._last_error is not None:
                    raise self._last_error
                if self._last is not None:
                    return self._last

            self._dirty = False
            covered = self._generation
            self.in_progress = True
            self._last_config = config
            try:
                result = await self.client.publish(config, snapshot_provider())
            except Exception as e:
                self._last, self._last_error = None, e
                self._published = covered
                raise
            finally:
                self.in_progress = False

            self._last, self._last_error = result, None
            self._published = covered
            return result

    def status(self) -> dict:
        last_ok = None
        if self._published:
            last_ok = self._last_error is None
        return {
            "in_progress": self.in_progress,
            "pending": self._dirty,
            "last_ok": last_ok,
            "last_error": str(self._last_error) if self._last_error else None,
        }
