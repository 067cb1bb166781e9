import datetime as dt

from sqlalchemy import Column, DateTime, String, Text

from .base import Base


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class StoreEntry(Base):
    __tablename__ = "store_entries"

    key = Column(String(100), primary_key=True)     # "aminpur_categories", "aminpur_items", ...
    value = Column(Text, nullable=False)            # JSON
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)
