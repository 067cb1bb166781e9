import pytest

from aminpur.defaults import default_directory
from aminpur.errors import ParseFailed
from aminpur.models.store import StoreEntry
from aminpur.schemas import InfoItem, RemoteSyncConfig
from aminpur.services.store import CATEGORIES_KEY, ITEMS_KEY, LocalStore


def test_empty_store_has_no_dataset(store):
    assert store.load_dataset() is None
    assert store.load_sync_config() is None


def test_dataset_round_trip(store):
    cats, items = default_directory()
    store.save_dataset(cats, items)

    loaded = store.load_dataset()

    assert loaded == (cats, items)


def test_save_overwrites(store):
    cats, items = default_directory()
    store.save_dataset(cats, items)
    store.save_dataset(cats[:1], [])

    loaded_cats, loaded_items = store.load_dataset()
    assert len(loaded_cats) == 1
    assert loaded_items == []


def test_sync_config_token_kept(store):
    config = RemoteSyncConfig(token="ghp_x", owner="o", repo="r", path="db/data.json", branch="gh-pages")
    store.save_sync_config(config)
    assert store.load_sync_config() == config


def test_corrupt_value_raises_parse_failed(store, session_factory):
    with session_factory() as db:
        db.add(StoreEntry(key=CATEGORIES_KEY, value="{oops"))
        db.add(StoreEntry(key=ITEMS_KEY, value="[]"))
        db.commit()
    with pytest.raises(ParseFailed):
        store.load_dataset()


def test_delete_key(store):
    store.set("k", {"a": 1})
    assert store.get("k") == {"a": 1}
    store.delete("k")
    assert store.get("k") is None


def test_separate_instances_share_backing_db(session_factory):
    LocalStore(session_factory).set("k", [1, 2])
    assert LocalStore(session_factory).get("k") == [1, 2]


def test_empty_category_list_is_still_a_dataset(store):
    orphan = InfoItem(id="x1", categoryId="gone", title="Orphan")
    store.save_dataset([], [orphan])

    assert store.load_dataset() == ([], [orphan])
