from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Literal

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode, Tracer

from storefront.connectors.base import ListingConnector
from storefront.engine.draft import ListingDraft
from storefront.engine.owner import resolve_owner_id
from storefront.engine.payload import build_update_payload
from storefront.schemas.listing import UpdateResponse
from storefront.services.errors import translate_error


log = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    FAILED = "failed"


OutcomeKind = Literal["saved", "invalid", "no_changes", "failed", "ignored", "discarded"]


@dataclass(frozen=True)
class SubmissionOutcome:
    kind: OutcomeKind
    title: str | None = None
    message: str | None = None
    errors: dict[str, str] = field(default_factory=dict)
    payload: dict[str, Any] | None = None
    response: UpdateResponse | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.kind == "saved"


@dataclass(frozen=True)
class SessionContext:
    """Read-only view of the signed-in user, passed in on every save."""
    owner_id: int | float | None = None


Notify = Callable[[str, str], None]
ErrorTranslator = Callable[[BaseException, str], str]


class SubmissionController:
    """
    Runs a save for one draft: validate -> diff -> resolve owner -> update.

    States: IDLE -> VALIDATING -> SUBMITTING -> IDLE, or via FAILED back to
    IDLE. A save requested while not IDLE is ignored, so repeated taps never
    issue a second request. The draft is locked while the request is in
    flight. Results arriving after the draft was closed are dropped.
    """

    def __init__(
        self,
        draft: ListingDraft,
        connector: ListingConnector,
        listing_id: int,
        *,
        listing_owner_id: Any = None,
        notify: Notify | None = None,
        on_saved: Callable[[SubmissionOutcome], None] | None = None,
        translate: ErrorTranslator = translate_error,
        tracer: Tracer | None = None,
        on_transition: Callable[[SubmissionState, SubmissionState], None] | None = None,
    ):
        self.draft = draft
        self.connector = connector
        self.listing_id = listing_id
        self.listing_owner_id = listing_owner_id
        self._notify = notify
        self._on_saved = on_saved
        self._translate = translate
        self._tracer = tracer or trace.get_tracer(__name__)
        self._on_transition = on_transition
        self._state = SubmissionState.IDLE

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state in (SubmissionState.VALIDATING, SubmissionState.SUBMITTING)

    def _transition(self, new: SubmissionState) -> None:
        old = self._state
        self._state = new
        log.debug("%s#%s submission: %s -> %s", self.draft.category.key, self.listing_id, old.value, new.value)
        if self._on_transition is not None:
            self._on_transition(old, new)

    def _alert(self, title: str, message: str) -> None:
        if self._notify is not None:
            self._notify(title, message)

    async def submit(self, session: SessionContext) -> SubmissionOutcome:
        if self._state is not SubmissionState.IDLE:
            log.debug("%s#%s save ignored: already %s", self.draft.category.key, self.listing_id, self._state.value)
            return SubmissionOutcome(kind="ignored")

        category = self.draft.category
        msgs = category.messages

        self._transition(SubmissionState.VALIDATING)
        try:
            errors = self.draft.validate_form()
        except Exception:
            self._transition(SubmissionState.IDLE)
            raise
        if errors:
            self._transition(SubmissionState.IDLE)
            log.info("%s#%s save blocked: %d invalid field(s)", category.key, self.listing_id, len(errors))
            self._alert(msgs.invalid_title, msgs.invalid_body)
            return SubmissionOutcome(kind="invalid", title=msgs.invalid_title, message=msgs.invalid_body, errors=errors)

        changed = self.draft.changed_fields()
        if not changed:
            self._transition(SubmissionState.IDLE)
            log.info("%s#%s save skipped: no changes", category.key, self.listing_id)
            self._alert(msgs.no_changes_title, msgs.no_changes_body)
            return SubmissionOutcome(kind="no_changes", title=msgs.no_changes_title, message=msgs.no_changes_body)

        submitted = self.draft.current
        try:
            owner_id = resolve_owner_id(self.listing_owner_id, session.owner_id)
            payload = build_update_payload(category, submitted, changed, owner_id=owner_id)
        except Exception as e:
            self._transition(SubmissionState.IDLE)
            message = self._translate(e, msgs.update_failed)
            log.exception("%s#%s could not build update payload", category.key, self.listing_id)
            self._alert("Error", message)
            return SubmissionOutcome(kind="failed", title="Error", message=message, error=e)

        self._transition(SubmissionState.SUBMITTING)
        self.draft.lock()
        try:
            response = await self._send(payload, changed)
        except Exception as e:
            self.draft.unlock()
            if self.draft.closed:
                self._transition(SubmissionState.IDLE)
                log.info("%s#%s update failed after close; dropped", category.key, self.listing_id)
                return SubmissionOutcome(kind="discarded", payload=payload, error=e)

            self._transition(SubmissionState.FAILED)
            message = self._translate(e, msgs.update_failed)
            log.warning("%s#%s update failed: %s", category.key, self.listing_id, e)
            self._transition(SubmissionState.IDLE)
            self._alert("Error", message)
            return SubmissionOutcome(kind="failed", title="Error", message=message, payload=payload, error=e)
        except BaseException:
            # cancelled: leave the controller usable
            self.draft.unlock()
            self._transition(SubmissionState.IDLE)
            raise

        self.draft.unlock()
        if self.draft.closed:
            self._transition(SubmissionState.IDLE)
            log.info("%s#%s update resolved after close; dropped", category.key, self.listing_id)
            return SubmissionOutcome(kind="discarded", payload=payload, response=response)

        self.draft.reset(submitted)
        self._transition(SubmissionState.IDLE)
        log.info("%s#%s updated fields=%s", category.key, self.listing_id, sorted(changed))

        outcome = SubmissionOutcome(
            kind="saved", title="Success", message=msgs.updated, payload=payload, response=response
        )
        self._alert("Success", msgs.updated)
        if self._on_saved is not None:
            self._on_saved(outcome)
        return outcome

    async def _send(self, payload: dict[str, Any], changed: set[str]) -> UpdateResponse:
        with self._tracer.start_as_current_span("listing.update", record_exception=False) as span:
            span.set_attribute("listing.category", self.draft.category.key)
            span.set_attribute("listing.id", self.listing_id)
            span.set_attribute("listing.changed_fields", len(changed))
            try:
                return await self.connector.update_listing(self.listing_id, payload)
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                raise
