"""Unit tests for RedisDraftStore using fakeredis."""

from __future__ import annotations

from unittest.mock import patch

import fakeredis
import pytest

from rosterimport.core.exceptions import DraftStoreError
from rosterimport.models.draft import ImportDraft, Summary
from rosterimport.persistence.redis_backend import RedisDraftStore
from tests.fakes import roster_suggestion


@pytest.fixture
def fake_redis():
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def store(fake_redis):
    with patch("redis.Redis", return_value=fake_redis):
        return RedisDraftStore(host="localhost", port=6379, db=0, ttl=600, key_prefix="draft")


@pytest.fixture
def draft():
    suggestion = roster_suggestion()
    return ImportDraft(
        source_software="opus1",
        headers=["Student", "Guardian Email", "Lesson Day"],
        rows=[["Ann", "a@x.com", "Mon"]],
        mappings=suggestion.mappings,
        target_fields=suggestion.target_fields,
        warnings=suggestion.warnings,
        detected_source="mymusicstaff",
        import_lessons=True,
        summary=Summary(entities_count=1, sub_entities_count=1, schedule_entries_count=1),
    )


class TestSave:
    def test_round_trips_draft(self, store, draft):
        store.save("s1", draft)
        assert store.load("s1") == draft

    def test_sets_ttl_under_prefixed_key(self, store, draft, fake_redis):
        store.save("s1", draft)
        assert 0 < fake_redis.ttl("draft:s1") <= 600

    def test_overwrites_previous_draft(self, store, draft):
        store.save("s1", draft)
        store.save("s1", draft.model_copy(update={"summary": None}))
        assert store.load("s1").summary is None


class TestLoad:
    def test_returns_none_on_miss(self, store):
        assert store.load("nothing") is None

    def test_corrupt_entry_raises(self, store, fake_redis):
        fake_redis.set("draft:bad", "{not json")
        with pytest.raises(DraftStoreError):
            store.load("bad")


class TestDiscard:
    def test_removes_draft(self, store, draft):
        store.save("s1", draft)
        store.discard("s1")
        assert store.load("s1") is None

    def test_noop_on_missing_key(self, store):
        store.discard("never_existed")  # should not raise


class TestErrorWrapping:
    def test_get_wraps_redis_error(self):
        s = RedisDraftStore.__new__(RedisDraftStore)
        s._key_prefix = "draft"
        s._client = None  # will cause AttributeError -> DraftStoreError
        with pytest.raises(DraftStoreError):
            s.load("k")
