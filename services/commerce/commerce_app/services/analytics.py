"""Store-wide statistics for the analytics endpoint."""

from __future__ import annotations

from typing import Any

from ..models import ProductCategory, newest_first, to_utc_iso
from ..store import CommerceStore

RECENT_ACTIVITY_LIMIT = 10


class AnalyticsService:
    """
    Aggregate figures over the whole store.

    Every call rescans all collections; nothing is cached.  Revenue is
    store-wide, not scoped to the calling user.
    """

    def __init__(self, store: CommerceStore):
        self.store = store

    def get_analytics(self) -> dict[str, Any]:
        orders = self.store.list_orders()
        products = self.store.list_products()

        total_revenue = sum(order.total for order in orders)
        average_order_value = total_revenue / len(orders) if orders else 0

        top_categories = [
            {
                "category": category.value,
                "count": sum(1 for p in products if p.category == category.value),
            }
            for category in ProductCategory
        ]

        recent = newest_first(orders)
        recent_activity = [
            {
                "type": "order",
                "amount": order.total,
                "timestamp": to_utc_iso(order.created_at),
            }
            for order in recent[:RECENT_ACTIVITY_LIMIT]
        ]

        return {
            "totalProducts": len(products),
            "totalUsers": self.store.user_count(),
            "totalOrders": len(orders),
            "totalRevenue": total_revenue,
            "averageOrderValue": average_order_value,
            "topCategories": top_categories,
            "recentActivity": recent_activity,
        }
