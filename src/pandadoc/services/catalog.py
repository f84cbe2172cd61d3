r"""Service for the product catalog endpoints."""

from __future__ import annotations

__all__ = ["ProductCatalogService", "build_catalog_search_query"]

from typing import TYPE_CHECKING, Any

from pandadoc.core.validation import escape_path_param
from pandadoc.models.catalog import ProductCatalogItemResponse, SearchProductCatalogItemsResponse
from pandadoc.request import RequestSpec
from pandadoc.services.base import BaseService, format_bool, json_payload, require_payload

if TYPE_CHECKING:
    import threading
    from collections.abc import Mapping

    from pandadoc.models.catalog import SearchProductCatalogItemsOptions

_ITEMS_PATH = "/public/v2/product-catalog/items"


def _enum_value(value: Any) -> str:
    return str(getattr(value, "value", value))


def build_catalog_search_query(
    options: SearchProductCatalogItemsOptions | None,
) -> list[tuple[str, str]]:
    """Build the query of the catalog search endpoint.

    Example:
        ```pycon
        >>> from pandadoc.models import ProductCatalogItemType, SearchProductCatalogItemsOptions
        >>> from pandadoc.services.catalog import build_catalog_search_query
        >>> build_catalog_search_query(
        ...     SearchProductCatalogItemsOptions(
        ...         per_page=5, types=(ProductCatalogItemType.REGULAR, ProductCatalogItemType.BUNDLE)
        ...     )
        ... )
        [('per_page', '5'), ('types', 'regular'), ('types', 'bundle')]

        ```
    """
    if options is None:
        return []

    query: list[tuple[str, str]] = []
    if options.page > 0:
        query.append(("page", str(options.page)))
    if options.per_page > 0:
        query.append(("per_page", str(options.per_page)))
    if options.query:
        query.append(("query", options.query))
    if options.order_by:
        query.append(("order_by", options.order_by))
    query.extend(("types", _enum_value(value)) for value in options.types)
    query.extend(("billing_types", _enum_value(value)) for value in options.billing_types)
    query.extend(("exclude_uuids", value) for value in options.exclude_uuids)
    if options.category_id:
        query.append(("category_id", options.category_id))
    if options.no_category is not None:
        query.append(("no_category", format_bool(options.no_category)))
    return query


class ProductCatalogService(BaseService):
    """Service for searching and managing product catalog items."""

    def search(
        self,
        options: SearchProductCatalogItemsOptions | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> SearchProductCatalogItemsResponse:
        """Search catalog items.

        Args:
            options: Optional filters and paging.
            cancel: Optional event aborting the call between attempts.

        Returns:
            One page of matching items, with ``has_more_items`` and
            ``total``.
        """
        return self._client.decode_json(
            self._search_spec(options), SearchProductCatalogItemsResponse, cancel
        )

    async def search_async(
        self, options: SearchProductCatalogItemsOptions | None = None
    ) -> SearchProductCatalogItemsResponse:
        return await self._client.decode_json_async(
            self._search_spec(options), SearchProductCatalogItemsResponse
        )

    def create(
        self, payload: Mapping[str, Any], *, cancel: threading.Event | None = None
    ) -> ProductCatalogItemResponse:
        r"""Create a catalog item."""
        return self._client.decode_json(
            self._create_spec(payload), ProductCatalogItemResponse, cancel
        )

    async def create_async(self, payload: Mapping[str, Any]) -> ProductCatalogItemResponse:
        return await self._client.decode_json_async(
            self._create_spec(payload), ProductCatalogItemResponse
        )

    def get(
        self, item_uuid: str, *, cancel: threading.Event | None = None
    ) -> ProductCatalogItemResponse:
        r"""Return a catalog item."""
        return self._client.decode_json(
            self._get_spec(item_uuid), ProductCatalogItemResponse, cancel
        )

    async def get_async(self, item_uuid: str) -> ProductCatalogItemResponse:
        return await self._client.decode_json_async(
            self._get_spec(item_uuid), ProductCatalogItemResponse
        )

    def update(
        self,
        item_uuid: str,
        payload: Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> ProductCatalogItemResponse:
        r"""Partially update a catalog item."""
        return self._client.decode_json(
            self._update_spec(item_uuid, payload), ProductCatalogItemResponse, cancel
        )

    async def update_async(
        self, item_uuid: str, payload: Mapping[str, Any]
    ) -> ProductCatalogItemResponse:
        return await self._client.decode_json_async(
            self._update_spec(item_uuid, payload), ProductCatalogItemResponse
        )

    def delete(self, item_uuid: str, *, cancel: threading.Event | None = None) -> None:
        r"""Delete a catalog item."""
        self._client.decode_json(self._delete_spec(item_uuid), cancel=cancel)

    async def delete_async(self, item_uuid: str) -> None:
        await self._client.decode_json_async(self._delete_spec(item_uuid))

    def _search_spec(self, options: SearchProductCatalogItemsOptions | None) -> RequestSpec:
        return RequestSpec(
            "GET", f"{_ITEMS_PATH}/search", params=build_catalog_search_query(options)
        )

    def _create_spec(self, payload: Mapping[str, Any] | None) -> RequestSpec:
        return RequestSpec("POST", _ITEMS_PATH, json=json_payload(require_payload(payload)))

    def _get_spec(self, item_uuid: str) -> RequestSpec:
        return RequestSpec("GET", f"{_ITEMS_PATH}/{escape_path_param(item_uuid)}")

    def _update_spec(self, item_uuid: str, payload: Mapping[str, Any] | None) -> RequestSpec:
        path = f"{_ITEMS_PATH}/{escape_path_param(item_uuid)}"
        return RequestSpec("PATCH", path, json=json_payload(require_payload(payload)))

    def _delete_spec(self, item_uuid: str) -> RequestSpec:
        return RequestSpec("DELETE", f"{_ITEMS_PATH}/{escape_path_param(item_uuid)}")
