# aminpur/services/snapshot.py
from __future__ import annotations

import datetime as dt
import json
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from ..config import settings
from ..errors import ParseFailed
from ..schemas import Category, InfoItem, Snapshot


def build_snapshot(
    categories: Iterable[Category],
    items: Iterable[InfoItem],
    version: Optional[str] = None,
    now: Optional[dt.datetime] = None,
) -> Snapshot:
    """
    Whole dataset as one document. Both collections are copied, the
    snapshot never shares objects with the live state.
    """
    return Snapshot(
        categories=[c.model_copy() for c in categories],
        items=[i.model_copy() for i in items],
        version=version or settings.SNAPSHOT_VERSION,
        generatedAt=now or dt.datetime.now(dt.timezone.utc),
    )


def snapshot_to_dict(snapshot: Snapshot) -> dict:
    return snapshot.to_wire()


def dump_snapshot(snapshot: Snapshot) -> str:
    return json.dumps(snapshot_to_dict(snapshot), ensure_ascii=False, indent=2)


def parse_snapshot(raw: Union[str, bytes, dict[str, Any]]) -> Snapshot:
    """
    Accepts the remote file, a stored value or an uploaded backup.
    Old backups keep items under "infoData" and the time under "date".
    """
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ParseFailed(f"not valid JSON: {e}") from e
    else:
        data = raw

    if not isinstance(data, dict):
        raise ParseFailed("dataset must be a JSON object")

    items = data.get("items")
    if items is None:
        items = data.get("infoData")
    categories = data.get("categories")
    if not isinstance(categories, list) or not isinstance(items, list):
        raise ParseFailed("dataset must contain 'categories' and 'items' lists")

    generated = data.get("generatedAt") or data.get("date") or dt.datetime.now(dt.timezone.utc)
    try:
        return Snapshot(
            categories=[Category.model_validate(c) for c in categories],
            items=[InfoItem.model_validate(i) for i in items],
            version=str(data.get("version") or settings.SNAPSHOT_VERSION),
            generatedAt=generated,
        )
    except ValidationError as e:
        raise ParseFailed(f"invalid dataset: {e.error_count()} error(s)") from e
