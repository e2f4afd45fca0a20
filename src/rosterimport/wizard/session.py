"""ImportWizard: drives the state machine and owns all I/O around it.

The reducer in ``machine`` stays pure; this class reads uploads, calls the
mapping service, and hands the result to the caller's sink and store.
"""

from __future__ import annotations

import logging

from rosterimport.core.config import AppSettings
from rosterimport.core.exceptions import (
    AuthenticationRequiredError,
    DuplicateHeaderError,
    EmptyTableError,
    InputShapeError,
    InvalidFileTypeError,
    RosterImportError,
)
from rosterimport.core.protocols import (
    ICredentialProvider,
    IDraftSink,
    IDraftStore,
    IMappingService,
    IUploadedFile,
)
from rosterimport.ingest.encoding import resolve_text
from rosterimport.ingest.tokenizer import tokenize
from rosterimport.ingest.uploads import has_extension
from rosterimport.models.draft import ImportDraft, Summary
from rosterimport.models.mapping import MappingRequest, TargetField
from rosterimport.models.sources import source_hint
from rosterimport.models.table import RawTable
from rosterimport.models.wizard import MigrationChoice, WizardResult, WizardState
from rosterimport.reconcile.confidence import ConfidenceBadge, badge_for
from rosterimport.wizard import events as ev
from rosterimport.wizard.machine import (
    can_confirm,
    compute_summary,
    initial_state,
    reconciler_for,
    transition,
)

logger = logging.getLogger(__name__)

UPLOAD_INTERRUPTED = "Upload did not complete. Please try again"


class ImportWizard:
    """One import session.

    Collaborators are injected at construction time: settings, the mapping
    service, a credential provider and the sink that receives the result.
    A draft store plus session id make the session resumable.
    """

    def __init__(
        self,
        *,
        settings: AppSettings,
        mapping_service: IMappingService,
        credentials: ICredentialProvider,
        sink: IDraftSink,
        store: IDraftStore | None = None,
        session_id: str | None = None,
        draft: ImportDraft | None = None,
        choice: MigrationChoice | None = None,
    ) -> None:
        if store is not None and not session_id:
            raise ValueError("session_id is required when a draft store is given")
        self._settings = settings
        self._config = settings.wizard
        self._service = mapping_service
        self._credentials = credentials
        self._sink = sink
        self._store = store
        self._session_id = session_id
        self._state = initial_state(draft, choice)
        logger.debug("Wizard starting in phase %s", self._state.phase)

    @classmethod
    def resume(
        cls,
        *,
        settings: AppSettings,
        mapping_service: IMappingService,
        credentials: ICredentialProvider,
        sink: IDraftSink,
        store: IDraftStore,
        session_id: str,
        choice: MigrationChoice | None = None,
    ) -> "ImportWizard":
        """Rebuild a wizard from the draft saved for ``session_id``, if any."""
        return cls(
            settings=settings,
            mapping_service=mapping_service,
            credentials=credentials,
            sink=sink,
            store=store,
            session_id=session_id,
            draft=store.load(session_id),
            choice=choice,
        )

    # ---- state ----

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def can_confirm(self) -> bool:
        return can_confirm(self._state)

    def dispatch(self, event: ev.WizardEvent) -> WizardState:
        previous = self._state.phase
        self._state = transition(self._state, event, self._config)
        if self._state.phase != previous:
            logger.info("Wizard %s -> %s", previous, self._state.phase)
        return self._state

    # ---- selection ----

    def choose_import(self) -> WizardState:
        return self.dispatch(ev.ChooseImport())

    def choose_skip(self, choice: MigrationChoice) -> WizardState:
        state = self.dispatch(ev.ChooseSkip(choice=choice))
        if self._store is not None:
            self._store.discard(self._session_id)
        self._sink.accept(WizardResult(choice=choice, draft=None))
        return state

    # ---- upload ----

    def back(self) -> WizardState:
        return self.dispatch(ev.BackToSelection())

    def select_source(self, value: str) -> WizardState:
        return self.dispatch(ev.SelectSource(value=value))

    def dismiss_error(self) -> WizardState:
        return self.dispatch(ev.DismissError())

    def _read_table(self, file: IUploadedFile) -> RawTable:
        if not has_extension(file.name, self._config.allowed_extension):
            raise InvalidFileTypeError(file.name)
        try:
            text = resolve_text(file, self._config.fallback_encoding)
        except OSError as exc:
            raise InputShapeError(f"Could not read {file.name!r}: {exc}") from exc
        table = tokenize(text)
        if table.is_empty:
            raise EmptyTableError()
        if table.duplicate_headers:
            raise DuplicateHeaderError(table.duplicate_headers)
        return table

    async def upload(self, file: IUploadedFile) -> WizardState:
        """Read, tokenize and send a file for mapping suggestions.

        Does nothing while another upload is in flight. Every failure leaves
        the wizard in the upload phase with ``pending_error`` set and
        ``loading`` cleared. Cancellation and errors outside the
        ``RosterImportError`` tree are recorded the same way, then re-raised.
        """
        if not self._state.can_upload:
            logger.warning("Upload of %r ignored: wizard cannot accept an upload now", file.name)
            return self._state

        self.dispatch(ev.UploadStarted())
        try:
            table = self._read_table(file)
            token = self._credentials.get_access_token()
            if not token:
                raise AuthenticationRequiredError()
            request = MappingRequest(
                headers=table.headers,
                sample_rows=table.sample(self._config.sample_row_count),
                source_hint=source_hint(self._state.source_software),
            )
            suggestion = await self._service.suggest(request, token)
        except RosterImportError as exc:
            logger.warning("Upload of %r failed: %s", file.name, exc)
            return self.dispatch(ev.UploadFailed(message=str(exc)))
        except BaseException:
            logger.exception("Upload of %r was interrupted", file.name)
            self.dispatch(ev.UploadFailed(message=UPLOAD_INTERRUPTED))
            raise

        logger.info("Upload of %r parsed %d rows x %d columns", file.name, len(table.rows), len(table.headers))
        return self.dispatch(ev.UploadSucceeded(table=table, suggestion=suggestion))

    # ---- mapping ----

    def available_targets(self, csv_header: str) -> list[TargetField]:
        return reconciler_for(self._state).available_targets(csv_header)

    def set_target(self, csv_header: str, target_field: str | None) -> WizardState:
        return self.dispatch(ev.SetTarget(csv_header=csv_header, target_field=target_field))

    def missing_required(self) -> list[str]:
        return reconciler_for(self._state).missing_required()

    def mapped_count(self) -> tuple[int, int]:
        """(mapped columns, total columns), for progress display."""
        working = self._state.working
        total = len(working.mappings) if working else 0
        return reconciler_for(self._state).mapped_count(), total

    def badges(self) -> list[ConfidenceBadge]:
        working = self._state.working
        if working is None:
            return []
        threshold = self._config.confidence_threshold
        return [b for b in (badge_for(m, threshold) for m in working.mappings) if b is not None]

    def live_summary(self) -> Summary | None:
        if self._state.working is None:
            return None
        return compute_summary(self._state.working, self._config)

    def back_to_upload(self) -> WizardState:
        return self.dispatch(ev.BackToUpload())

    def confirm(self) -> WizardState:
        """Freeze the draft. A no-op while required fields are unmapped."""
        if not self.can_confirm:
            logger.info("Confirm ignored; missing required fields: %s", self.missing_required())
            return self._state
        state = self.dispatch(ev.Confirm())
        if self._store is not None and state.draft is not None:
            self._store.save(self._session_id, state.draft)
        return state

    # ---- ready ----

    def edit_mappings(self) -> WizardState:
        return self.dispatch(ev.EditMappings())

    def finish(self) -> ImportDraft | None:
        """Leave the wizard from the ready phase and hand the draft to the sink."""
        state = self.dispatch(ev.Continue())
        self._sink.accept(WizardResult(choice=MigrationChoice.IMPORT, draft=state.draft))
        return state.draft
