from __future__ import annotations

import logging
from typing import Any, Callable

from storefront.categories.base import CategorySpec
from storefront.categories.registry import get_category
from storefront.connectors.base import ListingConnector
from storefront.engine.draft import ListingDraft
from storefront.engine.submission import (
    ErrorTranslator,
    Notify,
    SessionContext,
    SubmissionController,
    SubmissionOutcome,
)
from storefront.engine.values import FormValue, form_values_from_detail, sanitize_input
from storefront.schemas.listing import ListingPage, UpdateResponse
from storefront.services.errors import ListingLoadError, translate_error


log = logging.getLogger(__name__)


class ListingEditor:
    """
    Edit session behind one "update listing" screen.

    Owns a single draft and controller; nothing is shared between editors.
    Call close() when the screen goes away.
    """

    def __init__(self, draft: ListingDraft, controller: SubmissionController):
        self.draft = draft
        self.controller = controller

    @classmethod
    async def open(
        cls,
        category: str | CategorySpec,
        listing_id: int,
        connector: ListingConnector,
        *,
        notify: Notify | None = None,
        on_saved: Callable[[SubmissionOutcome], None] | None = None,
        translate: ErrorTranslator = translate_error,
        **controller_kwargs: Any,
    ) -> "ListingEditor":
        """
        Load the listing and seed a fresh draft from it.

        Raises ListingLoadError with a user-facing message if the fetch fails.
        """
        spec = get_category(category)
        try:
            detail = await connector.get_listing(listing_id)
        except Exception as e:
            message = translate(e, spec.messages.load_failed)
            log.warning("%s#%s load failed: %s", spec.key, listing_id, e)
            raise ListingLoadError(message, cause=e) from e

        draft = ListingDraft(spec, form_values_from_detail(spec, detail))
        controller = SubmissionController(
            draft,
            connector,
            listing_id,
            listing_owner_id=detail.seller_id,
            notify=notify,
            on_saved=on_saved,
            translate=translate,
            **controller_kwargs,
        )
        log.debug("%s#%s editor opened", spec.key, listing_id)
        return cls(draft, controller)

    @property
    def saving(self) -> bool:
        return self.controller.busy

    def change(self, field: str, raw: FormValue) -> None:
        spec = self.draft.category.get_field(field)
        self.draft.set_field(field, sanitize_input(spec, raw))

    def pick(self, field: str, value: FormValue) -> None:
        """Dropdown/year picker selection: set and validate in one step."""
        value = sanitize_input(self.draft.category.get_field(field), value)
        self.draft.set_field(field, value)
        self.draft.blur_field(field, value)

    def blur(self, field: str) -> str | None:
        return self.draft.blur_field(field)

    def visible_error(self, field: str) -> str | None:
        return self.draft.visible_error(field)

    def year_options(self) -> list[str]:
        return self.draft.category.year_options()

    async def save(self, session: SessionContext) -> SubmissionOutcome:
        return await self.controller.submit(session)

    def close(self) -> None:
        self.draft.close()


async def browse_listings(category: str | CategorySpec, connector: ListingConnector) -> ListingPage:
    spec = get_category(category)
    items = await connector.list_listings()
    log.debug("%s browse: %d listing(s)", spec.key, len(items))
    return ListingPage.single(items)


async def delete_listing(
    category: str | CategorySpec,
    listing_id: int,
    connector: ListingConnector,
) -> UpdateResponse:
    spec = get_category(category)
    response = await connector.delete_listing(listing_id)
    log.info("%s#%s deleted", spec.key, listing_id)
    return response
