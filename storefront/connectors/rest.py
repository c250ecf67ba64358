from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from storefront.categories.base import CategorySpec
from storefront.categories.registry import get_category
from storefront.connectors.base import ListingConnector
from storefront.schemas.listing import ListingDetail, UpdateResponse
from storefront.services.errors import ListingApiError
from storefront.services.http_client import HttpResult, StorefrontHttpClient


log = logging.getLogger(__name__)


class RestListingConnector(ListingConnector):
    """
    Marketplace REST endpoints, one path segment per category:

      GET    /{segment}/get
      GET    /{segment}/get/{id}
      PATCH  /{segment}/update/{id}
      DELETE /{segment}/delete/{id}
    """

    def __init__(self, category: str | CategorySpec, client: StorefrontHttpClient):
        self.category = get_category(category)
        self._client = client

    def _url(self, action: str, listing_id: int | None = None) -> str:
        base = f"/{self.category.path_segment}/{action}"
        return base if listing_id is None else f"{base}/{listing_id}"

    def _raise_for(self, result: HttpResult, *, operation: str) -> None:
        if result.ok:
            return
        log.warning(
            "%s %s failed: code=%s status=%s retryable=%s",
            self.category.key, operation, result.error_code, result.status_code, result.retryable,
        )
        raise ListingApiError(result, operation=operation)

    def _write_response(self, result: HttpResult, *, operation: str) -> UpdateResponse:
        # the write already happened; an odd body must not turn it into a failure
        try:
            return UpdateResponse.model_validate(result.detail)
        except ValidationError as e:
            log.warning("%s %s: unexpected response body: %s", self.category.key, operation, e)
            return UpdateResponse(status=result.status_code)

    async def get_listing(self, listing_id: int) -> ListingDetail:
        result = await self._client.get_json(url=self._url("get", listing_id))
        self._raise_for(result, operation="get_listing")
        return self.category.detail_model.model_validate(result.detail)

    async def update_listing(self, listing_id: int, payload: dict[str, Any]) -> UpdateResponse:
        result = await self._client.patch_json(url=self._url("update", listing_id), json_body=payload)
        self._raise_for(result, operation="update_listing")
        return self._write_response(result, operation="update_listing")

    async def list_listings(self) -> list[dict[str, Any]]:
        result = await self._client.get_json(url=self._url("get"))
        self._raise_for(result, operation="list_listings")
        data = result.detail.get("data")
        return list(data) if isinstance(data, list) else []

    async def delete_listing(self, listing_id: int) -> UpdateResponse:
        result = await self._client.delete_json(url=self._url("delete", listing_id))
        self._raise_for(result, operation="delete_listing")
        return self._write_response(result, operation="delete_listing")
