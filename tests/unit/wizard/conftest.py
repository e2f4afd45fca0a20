"""Fixtures shared by the ImportWizard tests."""

from __future__ import annotations

import pytest

from rosterimport.core.config import AppSettings
from rosterimport.wizard.session import ImportWizard
from tests.fakes import (
    ROSTER_HEADERS,
    MemoryDraftSink,
    MemoryDraftStore,
    MockMappingService,
    StaticCredentialProvider,
    roster_suggestion,
)


@pytest.fixture
def service():
    svc = MockMappingService()
    svc.set_response(ROSTER_HEADERS, roster_suggestion())
    return svc


@pytest.fixture
def sink():
    return MemoryDraftSink()


@pytest.fixture
def store():
    return MemoryDraftStore()


@pytest.fixture
def wizard(service, sink, store):
    return ImportWizard(
        settings=AppSettings(),
        mapping_service=service,
        credentials=StaticCredentialProvider("token-123"),
        sink=sink,
        store=store,
        session_id="sess-1",
    )
