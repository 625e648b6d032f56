import pytest

from user_store import UserStore


def test_add_returns_positions_in_order():
    store = UserStore()
    assert store.add({"name": "Alice"}) == 0
    assert store.add({"name": "Bob"}) == 1
    assert len(store) == 2


def test_get_returns_stored_record():
    store = UserStore()
    position = store.add({"name": "Alice", "age": 30})
    assert store.get(position) == {"name": "Alice", "age": 30}


def test_records_are_copied_on_insert():
    store = UserStore()
    record = {"name": "Alice"}
    store.add(record)
    record["name"] = "Mallory"
    assert store.get(0) == {"name": "Alice"}


def test_returned_records_do_not_alias_the_store():
    store = UserStore()
    store.add({"name": "Alice"})
    store.get(0)["name"] = "Mallory"
    assert store.get(0)["name"] == "Alice"


def test_exists():
    store = UserStore()
    store.add({"name": "Alice"})
    assert store.exists(0)
    assert not store.exists(1)
    assert not store.exists(-1)


@pytest.mark.parametrize("position", [-1, 1, 5])
def test_get_unoccupied_position_raises(position):
    store = UserStore()
    store.add({"name": "Alice"})
    with pytest.raises(IndexError):
        store.get(position)


def test_nested_values_are_not_shared_with_caller():
    store = UserStore()
    record = {"name": "Alice", "tags": ["admin"]}
    store.add(record)
    record["tags"].append("owner")
    store.get(0)["tags"].append("guest")
    assert store.get(0) == {"name": "Alice", "tags": ["admin"]}
