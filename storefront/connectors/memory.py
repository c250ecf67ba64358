from __future__ import annotations

import copy
from typing import Any

from storefront.categories.base import CategorySpec
from storefront.categories.registry import get_category
from storefront.schemas.listing import ListingDetail, UpdateResponse
from storefront.services.errors import ListingApiError
from storefront.services.http_client import HttpResult


def _not_found(listing_id: int) -> ListingApiError:
    return ListingApiError(
        HttpResult(
            ok=False,
            status_code=404,
            detail={"message": f"Listing {listing_id} not found"},
            error_code="HTTP_404",
            error_message="HTTP 404",
        ),
        operation="memory",
    )


class InMemoryListingConnector:
    """
    In-process stand-in for the REST endpoints.

    Listings are stored as wire dicts; updates merge the partial payload
    (null values are stored as None). Every update call is recorded in `update_calls`.
    Set `fail_with` to make the next calls raise.
    """

    def __init__(self, category: str | CategorySpec, listings: dict[int, dict[str, Any]] | None = None):
        self.category = get_category(category)
        self.listings: dict[int, dict[str, Any]] = copy.deepcopy(listings or {})
        self.update_calls: list[tuple[int, dict[str, Any]]] = []
        self.fail_with: BaseException | None = None

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def get_listing(self, listing_id: int) -> ListingDetail:
        self._check_failure()
        if listing_id not in self.listings:
            raise _not_found(listing_id)
        return self.category.detail_model.model_validate(self.listings[listing_id])

    async def update_listing(self, listing_id: int, payload: dict[str, Any]) -> UpdateResponse:
        self.update_calls.append((listing_id, copy.deepcopy(payload)))
        self._check_failure()
        if listing_id not in self.listings:
            raise _not_found(listing_id)
        self.listings[listing_id].update(payload)
        return UpdateResponse(status="success", message=f"{self.category.label} updated")

    async def list_listings(self) -> list[dict[str, Any]]:
        self._check_failure()
        return [copy.deepcopy(v) for _, v in sorted(self.listings.items())]

    async def delete_listing(self, listing_id: int) -> UpdateResponse:
        self._check_failure()
        if self.listings.pop(listing_id, None) is None:
            raise _not_found(listing_id)
        return UpdateResponse(status="success", message=f"{self.category.label} deleted")
