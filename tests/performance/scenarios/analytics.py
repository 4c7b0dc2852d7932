"""
Analytics dashboard Locust scenario.

:class:`AnalyticsViewerUser` models an operator refreshing the analytics
endpoint, the slowest route on the commerce API.  Low weight and long
think time keep it a small share of total traffic.
"""

from __future__ import annotations

from locust import between, tag, task
from locust.exception import StopUser

from tests.performance.data import seeded_user_credentials
from tests.performance.helpers import login_user
from tests.performance.scenarios.base import AuthenticatedShopperUser


@tag("analytics")
class AnalyticsViewerUser(AuthenticatedShopperUser):
    weight = 5
    wait_time = between(2, 5)

    def on_start(self) -> None:
        super().on_start()
        username, password = seeded_user_credentials()
        token = login_user(self.client, username=username, password=password)
        if token is None:
            raise StopUser("Login failed")
        self._use_token(token)

    @task
    def view_analytics(self) -> None:
        self._view_analytics()
