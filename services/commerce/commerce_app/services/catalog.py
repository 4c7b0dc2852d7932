"""Product listing and lookup."""

from __future__ import annotations

import math
from typing import Any

from ..errors import NotFoundError, ValidationError
from ..store import CommerceStore

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

# sort key -> (attribute, descending)
SORT_OPTIONS: dict[str, tuple[str, bool]] = {
    "price_asc": ("price", False),
    "price_desc": ("price", True),
    "rating": ("rating", True),
}


def _positive_int(value: Any, name: str, default: int) -> int:
    """Coerce a query-string value to a positive int."""
    if value is None or value == "":
        return default
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"'{name}' must be a positive integer") from exc
    if number < 1:
        raise ValidationError(f"'{name}' must be a positive integer")
    return number


class CatalogService:
    """Read-only queries over the product catalog."""

    def __init__(self, store: CommerceStore, *, max_limit: int = 100):
        self.store = store
        self.max_limit = max_limit

    def list_products(
        self,
        page: Any = DEFAULT_PAGE,
        limit: Any = DEFAULT_LIMIT,
        category: str | None = None,
        search: str | None = None,
        sort: str | None = None,
    ) -> dict[str, Any]:
        """
        Return one page of products plus pagination metadata.

        Filters are applied in order: category (case-insensitive exact
        match), then search (case-insensitive substring of name or
        description), then the optional sort.  Unknown sort keys keep
        catalog order.  ``total`` counts the filtered list before slicing.

        Raises:
            ValidationError: If *page* or *limit* is not a positive integer.
        """
        page = _positive_int(page, "page", DEFAULT_PAGE)
        limit = min(_positive_int(limit, "limit", DEFAULT_LIMIT), self.max_limit)

        products = self.store.list_products()

        if category:
            wanted = category.lower()
            products = [p for p in products if p.category.lower() == wanted]

        if search:
            term = search.lower()
            products = [
                p
                for p in products
                if term in p.name.lower() or term in p.description.lower()
            ]

        if sort in SORT_OPTIONS:
            attribute, descending = SORT_OPTIONS[sort]
            # sorted() is stable, so ties keep catalog order
            products = sorted(products, key=lambda p: getattr(p, attribute), reverse=descending)

        total = len(products)
        offset = (page - 1) * limit
        page_items = products[offset : offset + limit]

        return {
            "products": [p.to_dict() for p in page_items],
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "pages": math.ceil(total / limit),
            },
        }

    def get_product(self, product_id: str) -> dict[str, Any]:
        """
        Return a single product.

        Raises:
            NotFoundError: If no product has that id.
        """
        product = self.store.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product.to_dict()
