"""
Analytics facade -- one place to create aggregate and event requests.
"""
from __future__ import annotations

import threading

from d2client.analytics.aggregate import AnalyticsAggregate
from d2client.analytics.events import AnalyticsEvents
from d2client.api.client import Api, get_api


class Analytics:
    """Factory for fresh analytics requests sharing one Api."""

    def __init__(self, api: Api | None = None):
        self.api = api if api is not None else get_api()

    @property
    def aggregate(self) -> AnalyticsAggregate:
        """A new, empty aggregate request on every access."""
        return AnalyticsAggregate(self.api)

    @property
    def events(self) -> AnalyticsEvents:
        """A new, empty event request on every access."""
        return AnalyticsEvents(self.api)


_analytics: Analytics | None = None
_analytics_lock = threading.Lock()


def get_analytics() -> Analytics:
    """Return the shared Analytics facade."""
    global _analytics
    if _analytics is None:
        with _analytics_lock:
            if _analytics is None:
                _analytics = Analytics()
    return _analytics
