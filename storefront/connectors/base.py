from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from storefront.categories.base import CategorySpec
from storefront.schemas.listing import ListingDetail, UpdateResponse


@runtime_checkable
class ListingConnector(Protocol):
    """
    Transport for one listing category's endpoints.
    Every method raises on failure (ListingApiError for HTTP/transport errors).
    """

    category: CategorySpec

    async def get_listing(self, listing_id: int) -> ListingDetail:
        ...

    async def update_listing(self, listing_id: int, payload: dict[str, Any]) -> UpdateResponse:
        """
        Partial update: `payload` carries only changed fields plus the
        category's required fields.
        """
        ...

    async def list_listings(self) -> list[dict[str, Any]]:
        ...

    async def delete_listing(self, listing_id: int) -> UpdateResponse:
        ...
