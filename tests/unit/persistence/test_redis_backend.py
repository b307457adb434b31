"""Unit tests for RedisKeyValueStore using fakeredis."""

from __future__ import annotations

import json
from unittest.mock import patch

import fakeredis
import pytest

from simt.core.exceptions import StorageError
from simt.persistence.redis_backend import RedisKeyValueStore


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def backend(fake_server):
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server, decode_responses=True)):
        return RedisKeyValueStore(host="localhost", port=6379, db=0)


class TestGet:
    def test_returns_none_on_miss(self, backend):
        assert backend.get("nonexistent") is None

    def test_returns_stored_string(self, backend):
        data = [{"nip": "198501152010011001", "name": "Ahmad Subarjo"}]
        backend.set("simt_employees_data_v1", json.dumps(data))
        assert backend.get("simt_employees_data_v1") == json.dumps(data)


class TestSet:
    def test_overwrites_existing_value(self, backend):
        backend.set("k", "old")
        backend.set("k", "new")
        assert backend.get("k") == "new"


class TestDelete:
    def test_removes_existing_key(self, backend):
        backend.set("del_me", "val")
        backend.delete("del_me")
        assert backend.get("del_me") is None

    def test_noop_on_missing_key(self, backend):
        backend.delete("never_existed")  # should not raise


class TestPing:
    def test_ping_true(self, backend):
        assert backend.ping() is True


class TestErrorWrapping:
    def _broken(self) -> RedisKeyValueStore:
        b = RedisKeyValueStore.__new__(RedisKeyValueStore)
        b._client = None  # will cause AttributeError -> StorageError
        return b

    def test_get_wraps_error(self):
        with pytest.raises(StorageError):
            self._broken().get("k")

    def test_set_wraps_error(self):
        with pytest.raises(StorageError):
            self._broken().set("k", "v")

    def test_ping_wraps_error(self):
        with pytest.raises(StorageError):
            self._broken().ping()


class TestUpdate:
    def test_applies_mutation(self, backend):
        backend.set("k", "1")
        assert backend.update("k", lambda current: str(int(current) + 1)) == "2"
        assert backend.get("k") == "2"

    def test_missing_key_passes_none(self, backend):
        seen = []
        backend.update("fresh", lambda current: seen.append(current) or "[]")
        assert seen == [None]
        assert backend.get("fresh") == "[]"

    def test_retries_when_key_changes_during_mutation(self, backend, fake_server):
        other = fakeredis.FakeRedis(server=fake_server, decode_responses=True)
        backend.set("k", "a")
        calls = []

        def mutate(current):
            calls.append(current)
            if len(calls) == 1:
                other.set("k", "b")  # concurrent writer
            return current + "!"

        assert backend.update("k", mutate) == "b!"
        assert calls == ["a", "b"]
        assert backend.get("k") == "b!"

    def test_mutation_error_propagates_without_write(self, backend):
        backend.set("k", "keep")

        def mutate(current):
            raise ValueError("nope")

        with pytest.raises(ValueError):
            backend.update("k", mutate)
        assert backend.get("k") == "keep"
