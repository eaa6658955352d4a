"""
Aggregate analytics -- terminal operations over an AnalyticsRequest.

Endpoints (relative to the API root):
  analytics.<format>                 aggregate table
  analytics/dataValueSet.<format>    aggregate values as a data value set
  analytics/debug/sql.json           generated SQL (always json)
  analytics/rawData.<format>         raw data

Responses are returned exactly as the Api parsed them.
"""
from __future__ import annotations

from typing import Any, Mapping

from d2client.analytics.request import AnalyticsRequest
from d2client.api.client import Api, get_api
from d2client.core.logging import get_logger

logger = get_logger(__name__)


class AnalyticsAggregate(AnalyticsRequest):
    def __init__(self, api: Api | None = None):
        super().__init__()
        self.api = api if api is not None else get_api()

    def get(self, format: str = "json", params: Mapping[str, Any] | None = None) -> Any:
        """Fetch the aggregate analytics table."""
        return self._fetch(f"analytics.{format}", params)

    def get_data_value_set(self, format: str = "json", params: Mapping[str, Any] | None = None) -> Any:
        """Fetch aggregated values shaped as a data value set."""
        return self._fetch(f"analytics/dataValueSet.{format}", params)

    def get_debug_sql(self, params: Mapping[str, Any] | None = None) -> Any:
        """Fetch the SQL the server would run for this request."""
        return self._fetch("analytics/debug/sql.json", params)

    def get_raw_data(self, format: str = "json", params: Mapping[str, Any] | None = None) -> Any:
        """Fetch raw (non-aggregated) analytics data."""
        return self._fetch(f"analytics/rawData.{format}", params)

    def _fetch(self, path: str, params: Mapping[str, Any] | None) -> Any:
        self.add_parameters(params)
        logger.debug(
            "Analytics GET %s  dimensions=%d filters=%d params=%d",
            path, len(self.dimensions), len(self.filters), len(self.query),
        )
        return self.api.get(path, self.build_query())
