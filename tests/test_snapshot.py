import datetime as dt
import json

import pytest

from aminpur.defaults import default_directory
from aminpur.errors import ParseFailed
from aminpur.schemas import Category, InfoItem
from aminpur.services.snapshot import build_snapshot, dump_snapshot, parse_snapshot


def test_round_trip_defaults():
    cats, items = default_directory()
    snap = build_snapshot(cats, items, version="2.0", now=dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc))

    again = parse_snapshot(dump_snapshot(snap))

    assert again == snap


def test_dump_uses_wire_names_and_keeps_bengali():
    snap = build_snapshot(
        [Category(id="1", name="শিক্ষা")],
        [InfoItem(id="2", categoryId="1", title="স্কুল", mapLink="https://maps.example/x")],
    )
    text = dump_snapshot(snap)
    data = json.loads(text)

    assert "শিক্ষা" in text
    assert data["items"][0]["categoryId"] == "1"
    assert data["items"][0]["mapLink"] == "https://maps.example/x"
    assert "generatedAt" in data
    assert "phone" not in data["items"][0]


def test_snapshot_does_not_share_objects():
    cats = [Category(id="1", name="A")]
    snap = build_snapshot(cats, [])
    cats[0].name = "changed"
    assert snap.categories[0].name == "A"


def test_parse_accepts_legacy_backup():
    backup = {
        "categories": [{"id": "1", "name": "A", "icon": "Home", "color": "bg-blue-500"}],
        "infoData": [{"id": "9", "categoryId": "1", "title": "T", "address": "X", "phone": "1"}],
        "version": "2.0",
        "date": "2025-05-01T10:00:00.000Z",
    }
    snap = parse_snapshot(backup)
    assert snap.items[0].id == "9"
    assert snap.generated_at.year == 2025


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "[]",
        json.dumps({"categories": []}),
        json.dumps({"items": []}),
        json.dumps({"categories": {}, "items": []}),
        json.dumps({"categories": [{"name": "no id"}], "items": []}),
    ],
)
def test_parse_rejects_bad_input(raw):
    with pytest.raises(ParseFailed):
        parse_snapshot(raw)
