import sqlite3
import threading

import pytest

import config
from core.errors import FetchError, SaveError, StoreOpenError
from models.member import Member
from services.member_service import MemberStore

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def test_empty_store(store):
    assert store.list_all() == []
    assert store.max_id() == 0
    assert store.count() == 0


def test_create_assigns_increasing_ids(store):
    ids = [store.create(f"User {i}", f"u{i}@x.com", "Eng", "bio", PNG_BYTES).id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert store.max_id() == 5


def test_get_returns_supplied_fields(store):
    created = store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES)

    member = store.get(created.id)
    assert member == Member(id=created.id, name="Ann", email="a@x.com",
                            profession="Eng", about="bio", image=PNG_BYTES)
    assert isinstance(member.image, bytes)


def test_get_missing_returns_none(store):
    assert store.get(42) is None


def test_delete_then_get(store):
    m = store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES)
    assert store.delete(m.id) is True
    assert store.get(m.id) is None
    assert store.delete(m.id) is False


def test_delete_all(store):
    for name in ("Ann", "Bo", "Cy"):
        store.create(name, f"{name}@x.com", "Eng", "bio", PNG_BYTES)

    assert store.delete_all() == 3
    assert store.list_all() == []
    assert store.delete_all() == 0


def test_update_overwrites_fields(store):
    m = store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES)

    assert store.update(m.id, "Anna", "anna@x.com", "PM", "new bio", b"\x01\x02") is True
    updated = store.get(m.id)
    assert updated.name == "Anna"
    assert updated.email == "anna@x.com"
    assert updated.profession == "PM"
    assert updated.about == "new bio"
    assert updated.image == b"\x01\x02"


def test_update_missing_leaves_store_unchanged(store):
    m = store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES)
    before = store.list_all()

    assert store.update(m.id + 1, "Ghost", "g@x.com", "None", "none", b"") is False
    assert store.list_all() == before


def test_example_sequence(store):
    assert store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES).id == 1
    assert store.create("Bo", "b@x.com", "PM", "bio2", PNG_BYTES).id == 2
    store.delete(1)

    members = store.list_all()
    assert [m.id for m in members] == [2]
    assert members[0].name == "Bo"


def test_ids_not_reused_after_delete(store):
    store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES)
    last = store.create("Bo", "b@x.com", "PM", "bio2", PNG_BYTES)
    store.delete(last.id)

    assert store.create("Cy", "c@x.com", "QA", "bio3", PNG_BYTES).id == last.id + 1


def test_concurrent_creates_get_unique_ids(store):
    results = []
    lock = threading.Lock()

    def create(n):
        m = store.create(f"User {n}", f"u{n}@x.com", "Eng", "bio", PNG_BYTES)
        with lock:
            results.append(m.id)

    threads = [threading.Thread(target=create, args=(n,)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 20
    assert len(set(results)) == 20
    assert store.count() == 20


def test_store_uses_configured_db_file(tmp_path):
    config.DB_FILE = tmp_path / "configured.db"
    store = MemberStore()
    store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES)

    assert config.DB_FILE.exists()


def test_open_without_path_raises():
    config.DB_FILE = None
    with pytest.raises(StoreOpenError):
        MemberStore()


def test_open_unusable_path_raises(tmp_path):
    # A directory cannot be opened as a database file
    with pytest.raises(StoreOpenError):
        MemberStore(tmp_path)


def test_read_failure_raises_fetch_error(store):
    with sqlite3.connect(store.db_file) as conn:
        conn.execute("DROP TABLE members")

    with pytest.raises(FetchError):
        store.list_all()
    with pytest.raises(FetchError):
        store.get(1)


def test_write_failure_raises_save_error(store):
    with sqlite3.connect(store.db_file) as conn:
        conn.execute("DROP TABLE members")

    with pytest.raises(SaveError):
        store.create("Ann", "a@x.com", "Eng", "bio", PNG_BYTES)
    with pytest.raises(SaveError):
        store.delete_all()
