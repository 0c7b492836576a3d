"""
Tests for the progress stores – in-memory and SQLite.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from core.progress import (
    CUSTOM_SET_KEY,
    DISPLAY_KEY,
    KNOWN_KEY,
    MemoryProgressStore,
    SqlProgressStore,
)
from db.models import Base, Setting


@pytest.fixture
def session_factory():
    """Fresh in-memory SQLite database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def sql_store(session_factory):
    return SqlProgressStore(session_factory)


class TestMemoryStore:
    def test_default_when_missing(self):
        store = MemoryProgressStore()
        assert store.get(KNOWN_KEY, 0) == 0
        assert store.get(CUSTOM_SET_KEY) is None

    def test_set_then_get(self):
        store = MemoryProgressStore()
        store.set(KNOWN_KEY, 5)
        assert store.get(KNOWN_KEY, 0) == 5

    def test_type_mismatch_falls_back(self):
        store = MemoryProgressStore({DISPLAY_KEY: "yes"})
        assert store.get(DISPLAY_KEY, False) is False

    def test_unserialisable_value_ignored(self):
        store = MemoryProgressStore()
        store.set(KNOWN_KEY, object())
        assert store.get(KNOWN_KEY, 0) == 0


class TestSqlStore:
    def test_round_trip(self, sql_store):
        words = [{"term": "house", "translation": "בית"}]
        sql_store.set(CUSTOM_SET_KEY, words)
        sql_store.set(KNOWN_KEY, 3)
        sql_store.set(DISPLAY_KEY, True)
        assert sql_store.get(CUSTOM_SET_KEY) == words
        assert sql_store.get(KNOWN_KEY, 0) == 3
        assert sql_store.get(DISPLAY_KEY, False) is True

    def test_overwrite(self, sql_store, session_factory):
        sql_store.set(KNOWN_KEY, 1)
        sql_store.set(KNOWN_KEY, 2)
        assert sql_store.get(KNOWN_KEY, 0) == 2
        with session_factory() as s:
            assert s.query(Setting).count() == 1

    def test_store_none(self, sql_store):
        sql_store.set(CUSTOM_SET_KEY, [{"term": "a", "translation": "b"}])
        sql_store.set(CUSTOM_SET_KEY, None)
        assert sql_store.get(CUSTOM_SET_KEY) is None

    def test_survives_new_store_instance(self, session_factory):
        SqlProgressStore(session_factory).set(KNOWN_KEY, 9)
        assert SqlProgressStore(session_factory).get(KNOWN_KEY, 0) == 9

    def test_corrupt_json_falls_back(self, sql_store, session_factory):
        with session_factory() as s:
            s.add(Setting(key=KNOWN_KEY, value="{not json"))
            s.commit()
        assert sql_store.get(KNOWN_KEY, 0) == 0

    def test_type_mismatch_falls_back(self, sql_store):
        sql_store.set(KNOWN_KEY, "lots")
        assert sql_store.get(KNOWN_KEY, 0) == 0


class TestUnavailableDatabase:
    def test_missing_table(self):
        engine = create_engine("sqlite:///:memory:")   # no create_all
        store = SqlProgressStore(sessionmaker(bind=engine))
        store.set(KNOWN_KEY, 4)
        assert store.get(KNOWN_KEY, 7) == 7

    def test_session_factory_raises(self):
        def broken():
            raise OperationalError("connect", {}, Exception("disk gone"))

        store = SqlProgressStore(broken)
        store.set(KNOWN_KEY, 4)
        assert store.get(KNOWN_KEY, 0) == 0
