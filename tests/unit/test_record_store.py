from __future__ import annotations

import pytest

from json_uploads.errors import IndexOutOfRangeError, UnknownFieldError
from json_uploads.services.record_store import RecordStore


def test_append_returns_row_index_and_keeps_order(users):
    store = RecordStore()
    assert store.append(users[0]) == 0
    assert store.append(users[1]) == 1
    assert len(store) == 2
    assert store.list() == users[:2]


def test_append_stores_a_copy(users):
    store = RecordStore()
    record = users[0]
    store.append(record)
    record["name"] = "changed outside"
    assert store.get(0)["name"] == "Alice Tanaka"


def test_replace_field_changes_only_that_value_and_keeps_key_order(users):
    store = RecordStore([users[0]])
    store.replace_field(0, "email", "new@example.com")
    rec = store.get(0)
    assert rec == {"name": "Alice Tanaka", "email": "new@example.com", "number": "555-0101"}
    assert list(rec) == ["name", "email", "number"]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_replace_field_out_of_range(users, index):
    store = RecordStore([users[0]])
    with pytest.raises(IndexOutOfRangeError):
        store.replace_field(index, "name", "x")
    assert store.list() == [users[0]]


def test_replace_field_rejects_new_keys(users):
    store = RecordStore([users[0]])
    with pytest.raises(UnknownFieldError) as e:
        store.replace_field(0, "age", "30")
    assert e.value.code == "UNKNOWN_FIELD"
    assert "age" not in store.get(0)


def test_remove_shifts_later_rows(users):
    store = RecordStore(users)
    removed = store.remove(1)
    assert removed == users[1]
    assert store.list() == [users[0], users[2]]
    assert store.get(1) == users[2]


def test_remove_out_of_range_leaves_store_untouched(users):
    store = RecordStore(users)
    with pytest.raises(IndexOutOfRangeError) as e:
        store.remove(3)
    assert e.value.length == 3
    assert len(store) == 3


def test_index_error_is_also_builtin_index_error():
    with pytest.raises(IndexError):
        RecordStore().get(0)


def test_bool_index_is_rejected(users):
    store = RecordStore(users)
    with pytest.raises(IndexOutOfRangeError):
        store.get(True)


def test_list_snapshot_is_not_affected_by_later_mutation(users):
    store = RecordStore(users)
    snapshot = store.list()
    store.replace_field(0, "name", "Renamed")
    store.remove(2)
    store.append({"name": "New"})
    assert snapshot == users


def test_get_returns_detached_copy():
    store = RecordStore([{"tags": ["a", "b"]}])
    got = store.get(0)
    got["tags"].append("c")
    assert store.get(0) == {"tags": ["a", "b"]}


def test_empty_store_is_falsy():
    assert not RecordStore()
    assert RecordStore([{"a": "1"}])
