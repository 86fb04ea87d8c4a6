import pytest
from sqlalchemy import create_engine

from nexa_chat.core.errors import StoreError
from nexa_chat.db.session import make_engine
from nexa_chat.storage.sql import SqlMessageStore


@pytest.fixture
def store(tmp_path):
    s = SqlMessageStore(make_engine(f"sqlite:///{tmp_path / 'chat.db'}"))
    s.initialize()
    return s


def test_append_returns_full_row(store):
    row = store.append_message("room1", "vishnu", "hi")
    assert row.id == 1
    assert (row.chat_name, row.sender, row.text) == ("room1", "vishnu", "hi")
    assert row.timestamp is not None


def test_ids_are_global_and_increasing(store):
    ids = [store.append_message(room, "alan", "x").id for room in ["a", "b", "a", "c"]]
    assert ids == sorted(ids)
    assert len(set(ids)) == 4


def test_list_orders_by_timestamp_then_insertion(store):
    for text in ["one", "two", "three"]:
        store.append_message("room1", "vishnu", text)
    store.append_message("room2", "alan", "elsewhere")
    assert [m.text for m in store.list_messages("room1")] == ["one", "two", "three"]
    assert [m.text for m in store.list_messages("room2")] == ["elsewhere"]
    assert store.list_messages("empty") == []


def test_initialize_is_idempotent(store):
    store.append_message("room1", "vishnu", "keep me")
    store.initialize()
    assert len(store.list_messages("room1")) == 1


def test_health_check_ok(store):
    health = store.health_check()
    assert health.ok
    assert health.error is None


def test_unreachable_database(tmp_path):
    # Directory does not exist, so sqlite cannot open the file
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'chat.db'}")
    store = SqlMessageStore(engine)
    store.initialize()  # logged, not raised
    health = store.health_check()
    assert not health.ok
    assert health.error
    with pytest.raises(StoreError):
        store.list_messages("room1")
    with pytest.raises(StoreError):
        store.append_message("room1", "vishnu", "hi")
