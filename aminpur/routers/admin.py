# aminpur/routers/admin.py
from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..admin.security import SESSION_FLAG, check_credentials, require_admin
from ..defaults import default_directory
from ..deps import get_coordinator, get_directory, get_store, get_sync_client
from ..errors import ConfigurationIncomplete, FetchFailed, ParseFailed, SyncFailed
from ..schemas import (
    CategoryIn, DescribeIn, InfoItemIn, LoginIn, RemoteSyncConfig, SyncConfigIn
)
from ..services.ai import generate_description
from ..services.github_sync import GitHubSyncClient
from ..services.snapshot import parse_snapshot, snapshot_to_dict
from ..services.store import LocalStore
from ..services.sync_coordinator import SyncCoordinator
from ..state import DirectoryState
from .public import category_out, item_out

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


async def _persist_and_sync(
    request: Request,
    directory: DirectoryState,
    store: LocalStore,
    coordinator: SyncCoordinator,
) -> str:
    """
    Local store first, then the GitHub mirror when it is configured.
    Returns "ok", "skipped" or the remote error message.
    """
    await run_in_threadpool(store.save_dataset, list(directory.categories), list(directory.items))
    config: RemoteSyncConfig = request.app.state.sync_config
    if not config.is_complete():
        return "skipped"
    try:
        await coordinator.publish(config, directory.snapshot)
    except SyncFailed as e:
        return e.message
    return "ok"


# ---------- session ----------

@router.post("/admin/login")
def admin_login(payload: LoginIn, request: Request):
    if not check_credentials(payload.username, payload.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="ইউজারনেম বা পাসওয়ার্ড ভুল হয়েছে!")
    request.session[SESSION_FLAG] = True
    resp = JSONResponse({"ok": True})
    resp.headers["Cache-Control"] = "no-store"
    return resp


@router.post("/admin/logout")
def admin_logout(request: Request):
    request.session.pop(SESSION_FLAG, None)
    return {"ok": True}


@router.get("/api/admin/stats")
def admin_stats(_: bool = Depends(require_admin), directory: DirectoryState = Depends(get_directory)):
    return {"ok": True, **directory.stats()}


# ---------- categories ----------

@router.post("/api/admin/categories")
async def admin_create_category(
    payload: CategoryIn,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    try:
        cat = directory.add_category(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "category": category_out(cat), "sync": sync}


@router.put("/api/admin/categories/{category_id}")
async def admin_update_category(
    category_id: str,
    payload: CategoryIn,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    try:
        cat = directory.update_category(category_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "category": category_out(cat), "sync": sync}


@router.delete("/api/admin/categories/{category_id}")
async def admin_delete_category(
    category_id: str,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    try:
        directory.delete_category(category_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "deleted": category_id, "sync": sync}


# ---------- items ----------

@router.post("/api/admin/items")
async def admin_create_item(
    payload: InfoItemIn,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    try:
        item = directory.add_item(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "item": item_out(item, directory), "sync": sync}


@router.put("/api/admin/items/{item_id}")
async def admin_update_item(
    item_id: str,
    payload: InfoItemIn,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    try:
        item = directory.update_item(item_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "item": item_out(item, directory), "sync": sync}


@router.delete("/api/admin/items/{item_id}")
async def admin_delete_item(
    item_id: str,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    try:
        directory.delete_item(item_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "deleted": item_id, "sync": sync}


# ---------- backups ----------

@router.get("/api/admin/backup")
def admin_backup(_: bool = Depends(require_admin), directory: DirectoryState = Depends(get_directory)):
    filename = f"aminpur_admin_backup_{dt.date.today().isoformat()}.json"
    return JSONResponse(
        snapshot_to_dict(directory.snapshot()),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/api/admin/restore")
async def admin_restore(
    payload: dict,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    try:
        snap = parse_snapshot(payload)
    except ParseFailed as e:
        raise HTTPException(status_code=422, detail=str(e))
    directory.replace(snap.categories, snap.items)
    logger.info("dataset restored from backup: %d categories, %d items", len(snap.categories), len(snap.items))
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "categories": len(snap.categories), "items": len(snap.items), "sync": sync}


@router.post("/api/admin/reset")
async def admin_reset(
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    cats, items = default_directory()
    directory.replace(cats, items)
    logger.info("dataset reset to built-in defaults")
    sync = await _persist_and_sync(request, directory, store, coordinator)
    return {"ok": True, "categories": len(cats), "items": len(items), "sync": sync}


# ---------- GitHub mirror ----------

@router.get("/api/admin/sync/config")
def admin_sync_config(request: Request, _: bool = Depends(require_admin)):
    return {"ok": True, "config": request.app.state.sync_config.masked()}


@router.put("/api/admin/sync/config")
def admin_update_sync_config(
    payload: SyncConfigIn,
    request: Request,
    _: bool = Depends(require_admin),
    store: LocalStore = Depends(get_store),
):
    current: RemoteSyncConfig = request.app.state.sync_config
    changes = payload.model_dump(exclude_none=True)
    token = changes.get("token")
    if token is not None and token.startswith("****"):
        changes.pop("token")    # masked value sent back unchanged
    changes = {k: v.strip() for k, v in changes.items()}
    config = current.model_copy(update=changes)
    store.save_sync_config(config)
    request.app.state.sync_config = config
    return {"ok": True, "config": config.masked()}


@router.post("/api/admin/sync")
async def admin_sync_now(
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    coordinator: SyncCoordinator = Depends(get_coordinator),
):
    config: RemoteSyncConfig = request.app.state.sync_config
    try:
        result = await coordinator.publish(config, directory.snapshot)
    except ConfigurationIncomplete as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SyncFailed as e:
        raise HTTPException(status_code=502, detail=e.message)
    return {"ok": True, "created": result.created, "sha": result.sha, "commit": result.commit}


@router.get("/api/admin/sync/status")
def admin_sync_status(_: bool = Depends(require_admin), coordinator: SyncCoordinator = Depends(get_coordinator)):
    return {"ok": True, **coordinator.status()}


@router.post("/api/admin/sync/pull")
async def admin_sync_pull(
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
    store: LocalStore = Depends(get_store),
    client: GitHubSyncClient = Depends(get_sync_client),
):
    config: RemoteSyncConfig = request.app.state.sync_config
    try:
        snap = await client.load(config)
    except ConfigurationIncomplete as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FetchFailed as e:
        raise HTTPException(status_code=502, detail=e.message)
    except ParseFailed as e:
        raise HTTPException(status_code=422, detail=str(e))
    directory.replace(snap.categories, snap.items)
    await run_in_threadpool(store.save_dataset, list(directory.categories), list(directory.items))
    return {"ok": True, "categories": len(snap.categories), "items": len(snap.items)}


# ---------- AI ----------

@router.post("/api/admin/ai/describe")
async def admin_ai_describe(
    payload: DescribeIn,
    request: Request,
    _: bool = Depends(require_admin),
    directory: DirectoryState = Depends(get_directory),
):
    title = payload.title.strip()
    if not title or not payload.category_id:
        raise HTTPException(status_code=400, detail="অনুগ্রহ করে আগে টাইটেল এবং ক্যাটাগরি দিন!")
    cat = directory.find_category(payload.category_id)
    text = await generate_description(
        title,
        cat.name if cat else "",
        transport=getattr(request.app.state, "ai_transport", None),
    )
    return {"ok": True, "description": text}
