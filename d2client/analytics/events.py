"""
Event analytics -- per-program terminal operations over an AnalyticsRequest.

All endpoints live under ``analytics/events/<kind>/<program>.json``.
"""
from __future__ import annotations

from typing import Any, Mapping

from d2client.analytics.request import AnalyticsRequest
from d2client.api.client import Api, get_api
from d2client.core.logging import get_logger

logger = get_logger(__name__)


class AnalyticsEvents(AnalyticsRequest):
    def __init__(self, api: Api | None = None, program: str | None = None):
        super().__init__()
        self.api = api if api is not None else get_api()
        self.program = program

    def set_program(self, program: str) -> AnalyticsEvents:
        self.program = program
        return self

    def get_aggregate(self, params: Mapping[str, Any] | None = None) -> Any:
        return self._fetch("aggregate", params)

    def get_query(self, params: Mapping[str, Any] | None = None) -> Any:
        return self._fetch("query", params)

    def get_count(self, params: Mapping[str, Any] | None = None) -> Any:
        return self._fetch("count", params)

    def get_cluster(self, params: Mapping[str, Any] | None = None) -> Any:
        return self._fetch("cluster", params)

    def _fetch(self, kind: str, params: Mapping[str, Any] | None) -> Any:
        if not self.program:
            raise ValueError(
                f"Event analytics '{kind}' requires a program.  "
                "Call set_program() first."
            )
        self.add_parameters(params)
        path = f"analytics/events/{kind}/{self.program}.json"
        logger.debug("Event analytics GET %s", path)
        return self.api.get(path, self.build_query())
