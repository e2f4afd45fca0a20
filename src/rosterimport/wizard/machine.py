"""Wizard state machine as a pure reducer.

    selection --ChooseImport--> upload --UploadSucceeded--> mapping --Confirm--> ready
        ^                         |  ^                        |  ^                 |
        +-----BackToSelection-----+  +-------BackToUpload-----+  +--EditMappings---+

``ChooseSkip`` (selection) and ``Continue`` (ready) are terminal. Every
transition is ``transition(state, event, config) -> state`` with no I/O.
"""

from __future__ import annotations

from collections.abc import Callable

from rosterimport.core.config import WizardConfig
from rosterimport.core.exceptions import InvalidTransitionError, MappingEditError
from rosterimport.models.draft import ImportDraft, Summary
from rosterimport.models.sources import AUTO_DETECT
from rosterimport.models.wizard import MigrationChoice, WizardPhase, WizardState
from rosterimport.reconcile.reconciler import MappingReconciler
from rosterimport.reconcile.summary import project, resolve_semantics
from rosterimport.wizard import events as ev


def initial_state(
    draft: ImportDraft | None = None,
    choice: MigrationChoice | None = None,
    source_software: str | None = None,
) -> WizardState:
    """Pick the resume phase from whatever draft the caller already holds."""
    source = source_software or (draft.source_software if draft else AUTO_DETECT)
    if draft is not None and draft.summary is not None:
        return WizardState(
            phase=WizardPhase.READY,
            choice=MigrationChoice.IMPORT,
            source_software=source,
            working=draft.model_copy(update={"summary": None}, deep=True),
            draft=draft,
        )
    if draft is not None and draft.mappings:
        return WizardState(
            phase=WizardPhase.MAPPING,
            choice=MigrationChoice.IMPORT,
            source_software=source,
            working=draft.model_copy(deep=True),
        )
    if choice == MigrationChoice.IMPORT:
        return WizardState(phase=WizardPhase.UPLOAD, choice=choice, source_software=source)
    return WizardState(phase=WizardPhase.SELECTION, choice=choice, source_software=source)


def reconciler_for(state: WizardState) -> MappingReconciler:
    working = state.working or ImportDraft()
    return MappingReconciler(working.mappings, working.target_fields)


def compute_summary(working: ImportDraft, config: WizardConfig) -> Summary | None:
    semantics = resolve_semantics(working.target_fields, config.field_semantics)
    return project(working.mappings, working.rows, semantics, headers=working.headers)


def can_confirm(state: WizardState) -> bool:
    return (
        state.phase == WizardPhase.MAPPING
        and not state.finished
        and state.working is not None
        and reconciler_for(state).is_complete()
    )


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _choose_import(state: WizardState, event: ev.ChooseImport, config: WizardConfig) -> WizardState:
    return state.model_copy(update={
        "phase": WizardPhase.UPLOAD, "choice": MigrationChoice.IMPORT, "pending_error": None,
    })


def _choose_skip(state: WizardState, event: ev.ChooseSkip, config: WizardConfig) -> WizardState:
    if event.choice == MigrationChoice.IMPORT:
        raise InvalidTransitionError(state.phase.value, "ChooseSkip(import)")
    return state.model_copy(update={
        "choice": event.choice,
        "working": None,
        "draft": None,
        "stale": False,
        "pending_error": None,
        "finished": True,
    })


def _back_to_selection(state: WizardState, event: ev.BackToSelection, config: WizardConfig) -> WizardState:
    if state.loading:
        return state
    return state.model_copy(update={"phase": WizardPhase.SELECTION, "pending_error": None})


def _select_source(state: WizardState, event: ev.SelectSource, config: WizardConfig) -> WizardState:
    # The in-flight request already carries the current hint.
    if state.loading:
        return state
    if event.value not in config.source_values():
        return state.model_copy(update={"pending_error": f"Unknown source {event.value!r}"})
    return state.model_copy(update={"source_software": event.value, "pending_error": None})


def _upload_started(state: WizardState, event: ev.UploadStarted, config: WizardConfig) -> WizardState:
    if state.loading:
        return state
    return state.model_copy(update={"loading": True, "pending_error": None})


def _upload_failed(state: WizardState, event: ev.UploadFailed, config: WizardConfig) -> WizardState:
    return state.model_copy(update={"loading": False, "pending_error": event.message})


def _upload_succeeded(state: WizardState, event: ev.UploadSucceeded, config: WizardConfig) -> WizardState:
    reconciler, warnings = MappingReconciler.from_suggestion(event.table.headers, event.suggestion)
    working = ImportDraft(
        source_software=state.source_software,
        headers=list(event.table.headers),
        rows=[list(r) for r in event.table.rows],
        mappings=reconciler.mappings,
        target_fields=reconciler.target_fields,
        warnings=warnings,
        detected_source=event.suggestion.detected_source,
        import_lessons=event.suggestion.has_lesson_data,
    )
    return state.model_copy(update={
        "phase": WizardPhase.MAPPING,
        "working": working,
        "draft": None,
        "stale": False,
        "loading": False,
        "pending_error": None,
    })


def _set_target(state: WizardState, event: ev.SetTarget, config: WizardConfig) -> WizardState:
    reconciler = reconciler_for(state)
    try:
        reconciler.set_target(event.csv_header, event.target_field)
    except MappingEditError as exc:
        return state.model_copy(update={"pending_error": str(exc)})
    working = state.working.model_copy(update={"mappings": reconciler.mappings})
    return state.model_copy(update={"working": working, "pending_error": None})


def _back_to_upload(state: WizardState, event: ev.BackToUpload, config: WizardConfig) -> WizardState:
    return state.model_copy(update={"phase": WizardPhase.UPLOAD, "pending_error": None})


def _confirm(state: WizardState, event: ev.Confirm, config: WizardConfig) -> WizardState:
    if not can_confirm(state):
        return state
    working = state.working
    snapshot = working.model_copy(
        update={
            "source_software": state.source_software,
            "summary": compute_summary(working, config),
        },
        deep=True,
    )
    return state.model_copy(update={
        "phase": WizardPhase.READY, "draft": snapshot, "stale": False, "pending_error": None,
    })


def _edit_mappings(state: WizardState, event: ev.EditMappings, config: WizardConfig) -> WizardState:
    return state.model_copy(update={"phase": WizardPhase.MAPPING, "stale": True})


def _continue(state: WizardState, event: ev.Continue, config: WizardConfig) -> WizardState:
    return state.model_copy(update={"finished": True})


def _dismiss_error(state: WizardState, event: ev.DismissError, config: WizardConfig) -> WizardState:
    return state.model_copy(update={"pending_error": None})


Handler = Callable[[WizardState, ev.WizardEvent, WizardConfig], WizardState]

_TRANSITIONS: dict[tuple[WizardPhase | None, type[ev.WizardEvent]], Handler] = {
    (WizardPhase.SELECTION, ev.ChooseImport): _choose_import,
    (WizardPhase.SELECTION, ev.ChooseSkip): _choose_skip,
    (WizardPhase.UPLOAD, ev.BackToSelection): _back_to_selection,
    (WizardPhase.UPLOAD, ev.SelectSource): _select_source,
    (WizardPhase.UPLOAD, ev.UploadStarted): _upload_started,
    (WizardPhase.UPLOAD, ev.UploadFailed): _upload_failed,
    (WizardPhase.UPLOAD, ev.UploadSucceeded): _upload_succeeded,
    (WizardPhase.MAPPING, ev.SetTarget): _set_target,
    (WizardPhase.MAPPING, ev.BackToUpload): _back_to_upload,
    (WizardPhase.MAPPING, ev.Confirm): _confirm,
    (WizardPhase.READY, ev.EditMappings): _edit_mappings,
    (WizardPhase.READY, ev.Continue): _continue,
    (None, ev.DismissError): _dismiss_error,
}


def transition(state: WizardState, event: ev.WizardEvent, config: WizardConfig) -> WizardState:
    """Apply one event. Raises InvalidTransitionError for events the phase does not accept."""
    name = type(event).__name__
    if state.finished:
        raise InvalidTransitionError(state.phase.value, name)
    handler = _TRANSITIONS.get((state.phase, type(event))) or _TRANSITIONS.get((None, type(event)))
    if handler is None:
        raise InvalidTransitionError(state.phase.value, name)
    return handler(state, event, config)
