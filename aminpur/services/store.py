# aminpur/services/store.py
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session, sessionmaker

from ..errors import ParseFailed
from ..models.store import StoreEntry
from ..schemas import Category, InfoItem, RemoteSyncConfig

logger = logging.getLogger(__name__)

CATEGORIES_KEY = "aminpur_categories"
ITEMS_KEY = "aminpur_items"
SYNC_CONFIG_KEY = "aminpur_github_config"


class LocalStore:
    """
    Key-value replica of the dataset and the GitHub settings.
    Values are JSON text. The token is kept in cleartext.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[Any]:
        with self._session_factory() as db:
            row = db.get(StoreEntry, key)
            if row is None:
                return None
            raw = row.value
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseFailed(f"stored value for {key!r} is not valid JSON") from e

    def set(self, key: str, value: Any) -> None:
        raw = json.dumps(value, ensure_ascii=False)
        with self._session_factory() as db:
            self._upsert(db, key, raw)
            db.commit()

    def delete(self, key: str) -> None:
        with self._session_factory() as db:
            row = db.get(StoreEntry, key)
            if row is not None:
                db.delete(row)
                db.commit()

    @staticmethod
    def _upsert(db: Session, key: str, raw: str) -> None:
        row = db.get(StoreEntry, key)
        if row is None:
            db.add(StoreEntry(key=key, value=raw))
        else:
            row.value = raw

    # ---------- dataset ----------

    def load_dataset(self) -> Optional[tuple[list[Category], list[InfoItem]]]:
        cats = self.get(CATEGORIES_KEY)
        items = self.get(ITEMS_KEY)
        if cats is None or items is None:
            return None
        if not isinstance(cats, list) or not isinstance(items, list):
            raise ParseFailed("stored dataset has unexpected shape")
        try:
            return (
                [Category.model_validate(c) for c in cats],
                [InfoItem.model_validate(i) for i in items],
            )
        except ValidationError as e:
            raise ParseFailed(f"stored dataset is invalid: {e.error_count()} error(s)") from e

    def save_dataset(self, categories: list[Category], items: list[InfoItem]) -> None:
        # both keys in one transaction
        with self._session_factory() as db:
            self._upsert(db, CATEGORIES_KEY, json.dumps([c.to_wire() for c in categories], ensure_ascii=False))
            self._upsert(db, ITEMS_KEY, json.dumps([i.to_wire() for i in items], ensure_ascii=False))
            db.commit()
        logger.debug("local store saved: %d categories, %d items", len(categories), len(items))

    # ---------- github config ----------

    def load_sync_config(self) -> Optional[RemoteSyncConfig]:
        data = self.get(SYNC_CONFIG_KEY)
        if not data:
            return None
        try:
            return RemoteSyncConfig.model_validate(data)
        except ValidationError as e:
            raise ParseFailed("stored GitHub config is invalid") from e

    def save_sync_config(self, config: RemoteSyncConfig) -> None:
        self.set(SYNC_CONFIG_KEY, config.to_wire())
