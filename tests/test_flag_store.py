import threading

import pytest

from feature_flag_api.app.core.errors import ConflictError, NotFoundError
from feature_flag_api.app.services.flag_store import FlagStore


def test_new_store_holds_welcome_message():
    store = FlagStore()
    assert store.get_all() == {"welcomeMessage": True}
    assert len(store) == 1
    assert "welcomeMessage" in store


def test_initial_flags_replace_defaults():
    store = FlagStore({"beta": False})
    assert store.get_all() == {"beta": False}


def test_initial_flags_must_be_bool():
    with pytest.raises(TypeError):
        FlagStore({"beta": 1})


def test_get_all_returns_snapshot():
    store = FlagStore()
    snapshot = store.get_all()
    snapshot["other"] = True
    assert "other" not in store


def test_get_missing_flag():
    with pytest.raises(NotFoundError) as exc_info:
        FlagStore().get("missing")
    assert exc_info.value.message == "Feature flag not found"


def test_set_updates_existing_flag():
    store = FlagStore()
    store.set("welcomeMessage", False)
    assert store.get("welcomeMessage") is False


def test_set_never_creates():
    store = FlagStore()
    with pytest.raises(NotFoundError):
        store.set("missing", True)
    assert "missing" not in store


def test_create_and_conflict():
    store = FlagStore()
    store.create("darkMode", False)
    assert store.get("darkMode") is False
    with pytest.raises(ConflictError) as exc_info:
        store.create("darkMode", True)
    assert exc_info.value.message == "Feature flag already exists"
    assert store.get("darkMode") is False


def test_names_are_exact_match():
    store = FlagStore()
    store.create("WelcomeMessage", False)
    store.create(" welcomeMessage", False)
    assert store.get("welcomeMessage") is True
    assert len(store) == 3


def test_delete():
    store = FlagStore()
    store.delete("welcomeMessage")
    assert "welcomeMessage" not in store
    with pytest.raises(NotFoundError):
        store.delete("welcomeMessage")


def test_concurrent_creates_admit_one_winner():
    store = FlagStore({})
    results = []
    barrier = threading.Barrier(8)

    def worker(value):
        barrier.wait()
        try:
            store.create("race", value)
            results.append("created")
        except ConflictError:
            results.append("conflict")

    threads = [threading.Thread(target=worker, args=(i % 2 == 0,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count("created") == 1
    assert results.count("conflict") == 7
    assert len(store) == 1
