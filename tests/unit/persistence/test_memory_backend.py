"""Tests for the in-memory draft store and sink."""

from __future__ import annotations

from rosterimport.core.protocols import IDraftSink, IDraftStore
from rosterimport.models.draft import ImportDraft
from rosterimport.models.wizard import MigrationChoice, WizardResult
from rosterimport.persistence.memory_backend import MemoryDraftSink, MemoryDraftStore


def test_store_copies_drafts_in_and_out():
    store = MemoryDraftStore()
    draft = ImportDraft(headers=["a"], rows=[["1"]])
    store.save("s", draft)
    draft.rows.append(["2"])
    loaded = store.load("s")
    assert loaded.rows == [["1"]]
    loaded.rows.append(["3"])
    assert store.load("s").rows == [["1"]]


def test_sink_records_results():
    sink = MemoryDraftSink()
    assert sink.last is None
    sink.accept(WizardResult(choice=MigrationChoice.FRESH))
    assert sink.last.choice == MigrationChoice.FRESH


def test_backends_satisfy_protocols():
    assert isinstance(MemoryDraftStore(), IDraftStore)
    assert isinstance(MemoryDraftSink(), IDraftSink)
