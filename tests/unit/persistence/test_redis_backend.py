"""Unit tests for RedisCacheBackend using fakeredis."""

from __future__ import annotations

import json
from unittest.mock import patch

import fakeredis
import pytest

from uamatch.core.exceptions import CacheError
from uamatch.core.protocols import ICacheBackend
from uamatch.persistence.redis_backend import RedisCacheBackend


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def backend(fake_server):
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server, decode_responses=True)):
        return RedisCacheBackend(host="localhost", port=6379, db=0)


def test_satisfies_protocol(backend):
    assert isinstance(backend, ICacheBackend)


def test_exposes_only_untimed_operations(backend):
    public = {name for name in dir(backend) if not name.startswith("_")}
    assert public == {"get", "set", "exists", "delete"}


class TestGet:
    def test_returns_none_on_miss(self, backend):
        assert backend.get("nonexistent") is None

    def test_returns_stored_string(self, backend):
        data = ["abc\tPATTERN_A"]
        backend.set("uamatch:browscap.patterns.ab", json.dumps(data))
        assert backend.get("uamatch:browscap.patterns.ab") == json.dumps(data)


class TestSet:
    def test_overwrites_existing_value(self, backend):
        backend.set("k", "old")
        backend.set("k", "new")
        assert backend.get("k") == "new"


class TestExists:
    def test_false_on_miss(self, backend):
        assert backend.exists("missing") is False

    def test_true_after_set(self, backend):
        backend.set("present", "1")
        assert backend.exists("present") is True


class TestDelete:
    def test_removes_existing_key(self, backend):
        backend.set("del_me", "val")
        backend.delete("del_me")
        assert backend.get("del_me") is None

    def test_noop_on_missing_key(self, backend):
        backend.delete("never_existed")  # should not raise


class TestErrorWrapping:
    @pytest.fixture
    def broken(self):
        b = RedisCacheBackend.__new__(RedisCacheBackend)
        b._client = None  # will cause AttributeError -> CacheError
        return b

    def test_get_wraps_redis_error(self, broken):
        with pytest.raises(CacheError):
            broken.get("k")

    def test_exists_wraps_redis_error(self, broken):
        with pytest.raises(CacheError, match="EXISTS"):
            broken.exists("k")

    def test_set_wraps_redis_error(self, broken):
        with pytest.raises(CacheError, match="SET"):
            broken.set("k", "v")
