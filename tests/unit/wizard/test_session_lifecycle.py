"""ImportWizard construction, skip and resume paths that need no event loop."""

from __future__ import annotations

import pytest

from rosterimport.core.config import AppSettings
from rosterimport.models.draft import ImportDraft
from rosterimport.models.wizard import MigrationChoice, WizardPhase
from rosterimport.wizard.session import ImportWizard
from tests.fakes import ROSTER_HEADERS, StaticCredentialProvider, roster_suggestion


class TestSkipAndResume:
    def test_skip_discards_stored_draft_and_notifies_sink(self, wizard, sink, store):
        suggestion = roster_suggestion()
        store.save("sess-1", ImportDraft(headers=ROSTER_HEADERS, mappings=suggestion.mappings))
        wizard.choose_skip(MigrationChoice.LATER)
        assert store.load("sess-1") is None
        assert sink.last.choice == MigrationChoice.LATER
        assert sink.last.draft is None

    def test_resume_without_stored_draft_starts_at_selection(self, service, sink, store):
        resumed = ImportWizard.resume(
            settings=AppSettings(),
            mapping_service=service,
            credentials=StaticCredentialProvider("t"),
            sink=sink,
            store=store,
            session_id="unknown",
        )
        assert resumed.state.phase == WizardPhase.SELECTION

    def test_resume_with_mapped_draft_lands_in_mapping(self, service, sink, store):
        suggestion = roster_suggestion()
        store.save("sess-2", ImportDraft(headers=ROSTER_HEADERS, mappings=suggestion.mappings))
        resumed = ImportWizard.resume(
            settings=AppSettings(),
            mapping_service=service,
            credentials=StaticCredentialProvider("t"),
            sink=sink,
            store=store,
            session_id="sess-2",
        )
        assert resumed.state.phase == WizardPhase.MAPPING
        assert resumed.mapped_count() == (3, 3)

    def test_store_requires_session_id(self, service, sink, store):
        with pytest.raises(ValueError):
            ImportWizard(
                settings=AppSettings(),
                mapping_service=service,
                credentials=StaticCredentialProvider("t"),
                sink=sink,
                store=store,
            )
