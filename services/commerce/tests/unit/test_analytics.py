"""Unit tests for store-wide analytics aggregation."""

from __future__ import annotations

import pytest

from commerce_app.models import Order
from commerce_app.services import AnalyticsService

pytestmark = pytest.mark.unit


def test_analytics_on_fresh_store(store):
    """Test that a store with no orders reports zero revenue and average."""
    # Act
    result = AnalyticsService(store).get_analytics()

    # Assert
    assert result["totalProducts"] == len(store.products)
    assert result["totalUsers"] == len(store.users)
    assert result["totalOrders"] == 0
    assert result["totalRevenue"] == 0
    assert result["averageOrderValue"] == 0
    assert result["recentActivity"] == []


def test_top_categories_count_every_product(store):
    """Test that the category breakdown lists all four categories and sums to the catalog."""
    # Act
    result = AnalyticsService(store).get_analytics()

    # Assert
    categories = [entry["category"] for entry in result["topCategories"]]
    assert categories == ["Electronics", "Clothing", "Books", "Home"]
    assert sum(entry["count"] for entry in result["topCategories"]) == len(store.products)


def test_revenue_and_recent_activity(store):
    """Test revenue totals, averages and the ten-item recent activity cap."""
    # Arrange
    for index in range(12):
        store.add_order(Order(id=f"o{index}", user_id="user_1", items=[], total=100))

    # Act
    result = AnalyticsService(store).get_analytics()

    # Assert
    assert result["totalOrders"] == 12
    assert result["totalRevenue"] == 1200
    assert result["averageOrderValue"] == 100
    assert len(result["recentActivity"]) == 10
    assert all(entry["type"] == "order" for entry in result["recentActivity"])
    timestamps = [entry["timestamp"] for entry in result["recentActivity"]]
    assert timestamps == sorted(timestamps, reverse=True)
