"""Unit tests for BookmarkStore."""

import os
import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError

from dirmarks.framework.store import (
    Bookmark,
    BookmarkStore,
    DuplicateName,
    ErrorKind,
    NotFound,
    StorageUnavailable,
    StoreError,
)


class TestInitialize:
    """Test store creation and opening."""

    def test_creates_file_and_parent_dirs(self, db_path, store):
        assert db_path.parent.is_dir()
        assert db_path.exists()
        assert store.list() == []

    def test_initialize_is_idempotent(self, db_path, store):
        store.insert("work", "/home/u/work")
        with BookmarkStore.initialize(db_path) as reopened:
            assert reopened.list() == [Bookmark("work", "/home/u/work")]

    def test_sqlite_url(self, tmp_path):
        db_file = tmp_path / "url" / "marks.db"
        with BookmarkStore.initialize(f"sqlite:///{db_file}") as url_store:
            url_store.insert("docs", "/home/u/docs")
            assert url_store.lookup("docs") == "/home/u/docs"
        assert db_file.exists()

    def test_in_memory(self):
        with BookmarkStore.initialize("sqlite://") as memory_store:
            memory_store.insert("docs", "/home/u/docs")
            assert memory_store.lookup("docs") == "/home/u/docs"
            assert memory_store.location == ":memory:"

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(StorageUnavailable) as exc_info:
            BookmarkStore.initialize(blocker / "dirmarks.db")
        assert exc_info.value.kind == ErrorKind.STORAGE_UNAVAILABLE

    def test_location_is_a_directory(self, tmp_path):
        with pytest.raises(StorageUnavailable):
            BookmarkStore.initialize(tmp_path)

    def test_corrupt_file(self, tmp_path):
        corrupt = tmp_path / "corrupt.db"
        corrupt.write_bytes(b"this is not an sqlite database " * 64)
        with pytest.raises(StorageUnavailable):
            BookmarkStore.initialize(corrupt)

    def test_unsupported_backend(self):
        with pytest.raises(StorageUnavailable):
            BookmarkStore.initialize("postgresql://localhost/dirmarks")

    @pytest.mark.parametrize("location", ["", "   "])
    def test_blank_location_is_not_in_memory(self, location):
        with pytest.raises(StorageUnavailable):
            BookmarkStore.initialize(location)

    def test_sqlite_uri_passed_through(self, db_path, store):
        store.insert("work", "/home/u/work")
        read_only = f"sqlite:///file:{db_path.as_posix()}?mode=ro&uri=true"
        with BookmarkStore.initialize(read_only) as ro_store:
            assert ro_store.lookup("work") == "/home/u/work"
            with pytest.raises(StorageUnavailable):
                ro_store.insert("docs", "/home/u/docs")
        assert store.list() == [Bookmark("work", "/home/u/work")]


class TestInsertAndLookup:
    def test_round_trip(self, store):
        store.insert("work", "/home/u/work")
        assert store.lookup("work") == "/home/u/work"

    def test_path_is_stored_verbatim(self, store):
        store.insert("odd", "relative/../path with spaces/")
        assert store.lookup("odd") == "relative/../path with spaces/"

    def test_same_path_under_two_names(self, store):
        store.insert("a", "/srv")
        store.insert("b", "/srv")
        assert store.lookup("a") == store.lookup("b") == "/srv"

    def test_duplicate_name_leaves_store_unchanged(self, store):
        store.insert("work", "/home/u/work")
        with pytest.raises(DuplicateName) as exc_info:
            store.insert("work", "/tmp")
        assert exc_info.value.kind == ErrorKind.DUPLICATE_NAME
        assert exc_info.value.name == "work"
        assert store.list() == [Bookmark("work", "/home/u/work")]
        assert store.lookup("work") == "/home/u/work"

    def test_lookup_unknown_name(self, store):
        with pytest.raises(NotFound) as exc_info:
            store.lookup("nope")
        assert exc_info.value.kind == ErrorKind.NOT_FOUND
        assert exc_info.value.error_message == "Path 'nope' not found."

    def test_name_length_limit(self, store):
        store.insert("n" * 50, "/ok")
        with pytest.raises(StoreError) as exc_info:
            store.insert("n" * 51, "/too/long")
        assert exc_info.value.kind == ErrorKind.OTHER
        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert store.list() == [Bookmark("n" * 50, "/ok")]

    def test_empty_path_rejected(self, store):
        with pytest.raises(StoreError) as exc_info:
            store.insert("empty", "")
        assert not isinstance(exc_info.value, DuplicateName)
        assert store.list() == []


class TestList:
    def test_empty(self, store):
        assert store.list() == []

    def test_insertion_order(self, store):
        store.insert("zeta", "/z")
        store.insert("alpha", "/a")
        store.insert("mid", "/m")
        assert [bm.name for bm in store.list()] == ["zeta", "alpha", "mid"]

    def test_reflects_other_handles(self, db_path, store):
        with BookmarkStore.initialize(db_path) as other:
            other.insert("elsewhere", "/e")
        assert store.list() == [Bookmark("elsewhere", "/e")]


class TestRemove:
    def test_remove_existing(self, store):
        store.insert("work", "/home/u/work")
        assert store.remove("work") is True
        with pytest.raises(NotFound):
            store.lookup("work")

    def test_remove_absent_is_silent(self, store):
        assert store.remove("never") is False
        with pytest.raises(NotFound):
            store.lookup("never")

    def test_remove_absent_must_exist(self, store):
        store.insert("keep", "/k")
        with pytest.raises(NotFound):
            store.remove("never", must_exist=True)
        assert store.list() == [Bookmark("keep", "/k")]

    def test_remove_only_named(self, store):
        store.insert("a", "/a")
        store.insert("b", "/b")
        store.remove("a", must_exist=True)
        assert store.list() == [Bookmark("b", "/b")]


def test_scenario(store):
    store.insert("work", "/home/u/work")
    store.insert("docs", "/home/u/docs")
    expected = [Bookmark("work", "/home/u/work"), Bookmark("docs", "/home/u/docs")]
    assert store.list() == expected
    assert store.lookup("docs") == "/home/u/docs"

    with pytest.raises(DuplicateName):
        store.insert("work", "/tmp")
    assert store.list() == expected

    store.remove("work")
    with pytest.raises(NotFound):
        store.lookup("work")


class TestStorageFailures:
    """Failures after the store was opened successfully."""

    def test_locked_database(self, db_path):
        with BookmarkStore.initialize(f"sqlite:///{db_path.as_posix()}?timeout=0.1") as locked_store:
            blocker = sqlite3.connect(str(db_path), isolation_level=None)
            try:
                blocker.execute("BEGIN EXCLUSIVE")
                with pytest.raises(StorageUnavailable) as exc_info:
                    locked_store.insert("work", "/home/u/work")
                assert exc_info.value.kind == ErrorKind.STORAGE_UNAVAILABLE
                assert "locked" in exc_info.value.error_message
            finally:
                blocker.execute("ROLLBACK")
                blocker.close()
            assert locked_store.list() == []

    def test_undecodable_path(self, store):
        with pytest.raises(StoreError) as exc_info:
            store.insert("bad", os.fsdecode(b"/tmp/caf\xff"))
        assert exc_info.value.kind == ErrorKind.OTHER
        assert isinstance(exc_info.value.__cause__, UnicodeError)
        assert store.list() == []

    def test_undecodable_name(self, store):
        with pytest.raises(StoreError):
            store.lookup(os.fsdecode(b"caf\xff"))
