"""Tests for the in-memory user store."""

import threading

import pytest

from user_registry_api.app.core.store import Found, NotFound, UserStore


def test_seeded_in_order(store):
    assert store.list_all() == ["Ram", "Shyam", "Rita"]
    assert len(store) == 3


def test_list_all_returns_a_copy(store):
    users = store.list_all()
    users.append("Gita")
    assert store.list_all() == ["Ram", "Shyam", "Rita"]


@pytest.mark.parametrize("index, name", [(0, "Ram"), (1, "Shyam"), (2, "Rita")])
def test_get_valid_index(store, index, name):
    assert store.get(index) == Found(name)


@pytest.mark.parametrize("index", [-1, -3, 3, 100])
def test_out_of_range_is_not_found(store, index):
    assert store.get(index) == NotFound(index, 3)
    assert store.replace(index, "X") == NotFound(index, 3)
    assert store.remove(index) == NotFound(index, 3)
    assert store.list_all() == ["Ram", "Shyam", "Rita"]


def test_append_adds_to_end(store):
    assert store.append("Gita") == 4
    assert store.list_all()[-1] == "Gita"


def test_append_accepts_empty_and_duplicate_names(store):
    store.append("")
    store.append("Ram")
    assert store.list_all() == ["Ram", "Shyam", "Rita", "", "Ram"]


def test_replace_keeps_length(store):
    assert store.replace(1, "Mohan") == Found("Shyam")
    assert store.get(1) == Found("Mohan")
    assert len(store) == 3


def test_remove_shifts_later_entries(store):
    assert store.remove(0) == Found("Ram")
    assert store.list_all() == ["Shyam", "Rita"]
    assert store.get(0) == Found("Shyam")
    assert store.get(2) == NotFound(2, 2)


def test_empty_store():
    empty = UserStore()
    assert empty.list_all() == []
    assert empty.get(0) == NotFound(0, 0)


def test_reset(store):
    store.append("Gita")
    store.reset(["A"])
    assert store.list_all() == ["A"]


def test_concurrent_appends_are_not_lost():
    store = UserStore()

    def worker(n):
        for i in range(200):
            store.append(f"{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 8 * 200
    assert len(set(store.list_all())) == 8 * 200
