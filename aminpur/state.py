# aminpur/state.py
from __future__ import annotations

import time
from typing import Iterable, Optional

from pydantic import BaseModel, ValidationError

from .schemas import Category, CategoryIn, InfoItem, InfoItemIn, Snapshot
from .services.snapshot import build_snapshot


def _new_id(taken: set[str]) -> str:
    # millisecond timestamp, the same scheme the old panel used
    base = str(int(time.time() * 1000))
    candidate, n = base, 1
    while candidate in taken:
        candidate = f"{base}-{n}"
        n += 1
    return candidate


def _merged(model: BaseModel, changes: dict) -> BaseModel:
    try:
        return type(model).model_validate({**model.model_dump(), **changes})
    except ValidationError as e:
        raise ValueError(f"Invalid data: {e.error_count()} error(s)") from e


class DirectoryState:
    """
    In-memory dataset of one running instance. This is the authoritative
    copy; the local store and the GitHub file are replicas of it.
    """

    def __init__(self, categories: Iterable[Category] = (), items: Iterable[InfoItem] = ()) -> None:
        self.categories: list[Category] = list(categories)
        self.items: list[InfoItem] = list(items)

    # ---------- categories ----------

    def list_categories(self) -> list[Category]:
        return list(self.categories)

    def get_category(self, category_id: str) -> Category:
        for c in self.categories:
            if c.id == category_id:
                return c
        raise LookupError("Category not found")

    def find_category(self, category_id: str) -> Optional[Category]:
        try:
            return self.get_category(category_id)
        except LookupError:
            return None

    def add_category(self, data: CategoryIn) -> Category:
        name = (data.name or "").strip()
        if not name:
            raise ValueError("Category name is required")
        fields = data.model_dump(exclude_none=True)
        fields["name"] = name
        fields.setdefault("color", "bg-slate-500")
        cat = Category(id=_new_id({c.id for c in self.categories}), **fields)
        self.categories.append(cat)
        return cat

    def update_category(self, category_id: str, data: CategoryIn) -> Category:
        cat = self.get_category(category_id)
        changes = data.model_dump(exclude_unset=True)
        if "name" in changes:
            changes["name"] = (changes["name"] or "").strip()
            if not changes["name"]:
                raise ValueError("Category name is required")
        updated = _merged(cat, changes)
        self.categories = [updated if c.id == category_id else c for c in self.categories]
        return updated

    def delete_category(self, category_id: str) -> Category:
        # items pointing at it are kept and show up as uncategorized
        cat = self.get_category(category_id)
        self.categories = [c for c in self.categories if c.id != category_id]
        return cat

    # ---------- items ----------

    def list_items(self, category_id: Optional[str] = None) -> list[InfoItem]:
        if category_id is None:
            return list(self.items)
        return [i for i in self.items if i.category_id == category_id]

    def get_item(self, item_id: str) -> InfoItem:
        for i in self.items:
            if i.id == item_id:
                return i
        raise LookupError("Item not found")

    def add_item(self, data: InfoItemIn) -> InfoItem:
        title = (data.title or "").strip()
        if not title:
            raise ValueError("Title is required")
        if not data.category_id:
            raise ValueError("Category is required")
        fields = data.model_dump(exclude_none=True)
        fields["title"] = title
        item = InfoItem(id=_new_id({i.id for i in self.items}), **fields)
        # newest first
        self.items.insert(0, item)
        return item

    def update_item(self, item_id: str, data: InfoItemIn) -> InfoItem:
        item = self.get_item(item_id)
        changes = data.model_dump(exclude_unset=True)
        if "title" in changes:
            changes["title"] = (changes["title"] or "").strip()
            if not changes["title"]:
                raise ValueError("Title is required")
        if "category_id" in changes and not changes["category_id"]:
            raise ValueError("Category is required")
        updated = _merged(item, changes)
        self.items = [updated if i.id == item_id else i for i in self.items]
        return updated

    def delete_item(self, item_id: str) -> InfoItem:
        item = self.get_item(item_id)
        self.items = [i for i in self.items if i.id != item_id]
        return item

    def category_of(self, item: InfoItem) -> Optional[Category]:
        """None means the item is uncategorized."""
        return self.find_category(item.category_id)

    def uncategorized(self) -> list[InfoItem]:
        ids = {c.id for c in self.categories}
        return [i for i in self.items if i.category_id not in ids]

    def search(self, term: str) -> list[InfoItem]:
        q = (term or "").strip().lower()
        if not q:
            return list(self.items)
        return [i for i in self.items if q in i.title.lower() or q in (i.address or "").lower()]

    def stats(self) -> dict:
        per_category = {c.id: 0 for c in self.categories}
        for i in self.items:
            if i.category_id in per_category:
                per_category[i.category_id] += 1
        return {
            "categories": len(self.categories),
            "items": len(self.items),
            "per_category": per_category,
            "uncategorized": len(self.items) - sum(per_category.values()),
        }

    # ---------- whole dataset ----------

    def replace(self, categories: Iterable[Category], items: Iterable[InfoItem]) -> None:
        self.categories = list(categories)
        self.items = list(items)

    def snapshot(self) -> Snapshot:
        return build_snapshot(self.categories, self.items)
