# aminpur/services/dataset.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from ..defaults import default_directory
from ..errors import ConfigurationIncomplete, PortalError
from ..schemas import Category, InfoItem, RemoteSyncConfig
from ..state import DirectoryState
from .github_sync import GitHubSyncClient
from .store import LocalStore

logger = logging.getLogger(__name__)

Source = Literal["remote", "local", "defaults"]


@dataclass
class LoadOutcome:
    state: DirectoryState
    source: Source


async def load_directory(
    store: LocalStore,
    client: Optional[GitHubSyncClient],
    config: Optional[RemoteSyncConfig],
    defaults: Callable[[], tuple[list[Category], list[InfoItem]]] = default_directory,
) -> LoadOutcome:
    """
    remote -> local store -> built-in defaults. A failing tier is logged
    and the next one is tried; this never raises for data problems.
    """
    if client is not None and config is not None:
        try:
            snap = await client.load(config)
        except ConfigurationIncomplete:
            logger.debug("remote dataset not configured, skipping")
        except PortalError as e:
            logger.warning("remote dataset unavailable (%s): %s", e.__class__.__name__, e)
        else:
            # write-through so the next boot without network still has it
            store.save_dataset(snap.categories, snap.items)
            return LoadOutcome(DirectoryState(snap.categories, snap.items), "remote")

    try:
        local = store.load_dataset()
    except PortalError as e:
        logger.warning("local dataset unreadable: %s", e)
        local = None
    if local is not None:
        cats, items = local
        logger.info("dataset loaded from local store: %d categories, %d items", len(cats), len(items))
        return LoadOutcome(DirectoryState(cats, items), "local")

    cats, items = defaults()
    logger.info("dataset loaded from built-in defaults")
    return LoadOutcome(DirectoryState(cats, items), "defaults")


def resolve_sync_config(store: LocalStore, fallback: Optional[RemoteSyncConfig] = None) -> RemoteSyncConfig:
    """Stored config wins; otherwise the env seed; otherwise an empty one."""
    try:
        stored = store.load_sync_config()
    except PortalError as e:
        logger.warning("GitHub config unreadable: %s", e)
        stored = None
    return stored or fallback or RemoteSyncConfig()
