# aminpur/schemas.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    # JSON files use camelCase, python code uses snake_case
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Category(_Wire):
    id: str
    name: str
    description: str = ""
    icon: str = "Home"
    color: str = "bg-blue-500"
    image: Optional[str] = None     # data-URI or URL


class InfoItem(_Wire):
    id: str
    category_id: str = Field(alias="categoryId")   # soft reference, may dangle
    title: str
    address: str = ""
    phone: Optional[str] = None
    type: Optional[str] = None
    established: Optional[str] = None
    specialty: Optional[str] = None
    timing: Optional[str] = None
    route: Optional[str] = None
    details: Optional[str] = None
    map_link: Optional[str] = Field(default=None, alias="mapLink")
    image: Optional[str] = None


class CategoryIn(_Wire):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    image: Optional[str] = None


class InfoItemIn(_Wire):
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    title: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    type: Optional[str] = None
    established: Optional[str] = None
    specialty: Optional[str] = None
    timing: Optional[str] = None
    route: Optional[str] = None
    details: Optional[str] = None
    map_link: Optional[str] = Field(default=None, alias="mapLink")
    image: Optional[str] = None


class Snapshot(_Wire):
    categories: list[Category]
    items: list[InfoItem]
    version: str
    generated_at: dt.datetime = Field(alias="generatedAt")


class RemoteSyncConfig(_Wire):
    token: str = ""
    owner: str = ""
    repo: str = ""
    path: str = "data.json"
    branch: str = "main"

    def is_complete(self) -> bool:
        return bool(self.token and self.owner and self.repo)

    def masked(self) -> dict:
        data = self.to_wire()
        if self.token:
            data["token"] = "****" + self.token[-4:] if len(self.token) > 8 else "****"
        data["configured"] = self.is_complete()
        return data


class LoginIn(BaseModel):
    username: str = ""
    password: str = ""


class DescribeIn(_Wire):
    title: str = ""
    category_id: str = Field(default="", alias="categoryId")


class SyncConfigIn(_Wire):
    # token left out (or sent back masked) keeps the stored one
    token: Optional[str] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    path: Optional[str] = None
    branch: Optional[str] = None
