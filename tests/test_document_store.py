"""
Tests for the collection/key document store.
"""
import pytest

from database import check_connection
from services.document_store import SERVER_TIMESTAMP


def test_set_then_get_returns_document(store):
    store.set("checkouts", "chk_1", {"id": "chk_1", "amount": 500, "metadata": {"a": [1, 2]}})

    assert store.get("checkouts", "chk_1") == {"id": "chk_1", "amount": 500, "metadata": {"a": [1, 2]}}


def test_get_missing_document_returns_none(store):
    assert store.get("checkouts", "nope") is None


def test_set_overwrites_existing_document(store):
    store.set("checkouts", "chk_1", {"id": "chk_1", "status": "created"})
    store.set("checkouts", "chk_1", {"id": "chk_1", "status": "replaced"})

    assert store.get("checkouts", "chk_1") == {"id": "chk_1", "status": "replaced"}


def test_collections_are_separate(store):
    store.set("checkouts", "k", {"n": 1})
    store.set("audit", "k", {"n": 2})

    assert store.get("checkouts", "k") == {"n": 1}
    assert store.get("audit", "k") == {"n": 2}


def test_server_timestamp_is_resolved_by_database(store):
    written = store.set("checkouts", "chk_ts", {"id": "chk_ts", "createdAt": SERVER_TIMESTAMP})

    assert isinstance(written["createdAt"], str)
    assert written["createdAt"]
    assert store.get("checkouts", "chk_ts")["createdAt"] == written["createdAt"]


def test_set_does_not_mutate_input(store):
    data = {"id": "chk_2", "createdAt": SERVER_TIMESTAMP}
    store.set("checkouts", "chk_2", data)

    assert data["createdAt"] is SERVER_TIMESTAMP


@pytest.mark.parametrize("collection,key", [("", "k"), ("checkouts", "")])
def test_set_requires_collection_and_key(store, collection, key):
    with pytest.raises(ValueError):
        store.set(collection, key, {"x": 1})


def test_check_connection_on_sqlite(engine):
    assert check_connection(engine) is True
