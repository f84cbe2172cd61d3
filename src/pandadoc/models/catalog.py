r"""Models for the product catalog endpoints."""

from __future__ import annotations

__all__ = [
    "ProductCatalogBillingType",
    "ProductCatalogItemResponse",
    "ProductCatalogItemType",
    "ProductCatalogSearchItem",
    "SearchProductCatalogItemsOptions",
    "SearchProductCatalogItemsResponse",
]

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import Field

from pandadoc.models.base import PandaDocModel


class ProductCatalogItemType(str, Enum):
    REGULAR = "regular"
    BUNDLE = "bundle"


class ProductCatalogBillingType(str, Enum):
    ONE_TIME = "one_time"
    RECURRING = "recurring"


@dataclass(frozen=True)
class SearchProductCatalogItemsOptions:
    """Filters for searching catalog items.

    Empty strings, zero numbers and ``None`` values are not sent. The
    sequence filters are sent as repeated query parameters.
    """

    page: int = 0
    per_page: int = 0
    query: str = ""
    order_by: str = ""
    types: tuple[ProductCatalogItemType | str, ...] = ()
    billing_types: tuple[ProductCatalogBillingType | str, ...] = ()
    exclude_uuids: tuple[str, ...] = ()
    category_id: str = ""
    no_category: bool | None = None


class ProductCatalogSearchItem(PandaDocModel):
    uuid: str | None = None
    workspace_id: str | None = None
    title: str | None = None
    sku: str | None = None
    description: str | None = None
    type: str | None = None
    billing_type: str | None = None
    billing_cycle: int | None = None
    currency: str | None = None
    category_id: str | None = None
    category_name: str | None = None
    created_by: str | None = None
    modified_by: str | None = None
    date_created: str | None = None
    date_modified: str | None = None
    pricing_method: int | None = None
    bundle_items_count: int | None = None
    image_src: str | None = None
    price: float | None = None
    cost: float | None = None
    min_tier_value: float | None = None
    max_tier_value: float | None = None
    custom_fields: Any = None
    images: Any = None
    highlights: Any = None
    tiers: Any = None


class SearchProductCatalogItemsResponse(PandaDocModel):
    items: list[ProductCatalogSearchItem] = Field(default_factory=list)
    has_more_items: bool = False
    total: int = 0


class ProductCatalogItemResponse(PandaDocModel):
    """Catalog item returned by the create, get and update endpoints."""

    uuid: str | None = None
    title: str | None = None
    type: str | None = None
    category_id: str | None = None
    category_name: str | None = None
    created_by: str | None = None
    modified_by: str | None = None
    date_created: str | None = None
    date_modified: str | None = None
    default_price_configuration: Any = None
    variants: Any = None
    bundle_items: Any = None
