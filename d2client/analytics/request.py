"""
AnalyticsRequest -- fluent accumulator for analytics query state.

Dimensions and filters are opaque strings of the form
``<dimensionId>[:<item1>[;<item2>...]]``; they are passed through as-is.

Instances are not thread-safe.  Terminal calls merge their parameter
override into ``query``, so concurrent calls on one instance race
(last write wins).
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping


class AnalyticsRequest:
    """Accumulated dimensions, filters and query parameters."""

    def __init__(self) -> None:
        self.dimensions: list[str] = []
        self.filters: list[str] = []
        self.query: dict[str, Any] = {}

    def add_dimension(self, dimension: str | None = None) -> AnalyticsRequest:
        if dimension:
            self.dimensions.append(dimension)
        return self

    def add_dimensions(self, dimensions: Iterable[str] | str | None = None) -> AnalyticsRequest:
        """Append several dimensions; a bare string counts as one dimension."""
        if isinstance(dimensions, str):
            return self.add_dimension(dimensions)
        if dimensions:
            self.dimensions.extend(dimensions)
        return self

    def add_filter(self, filter_: str | None = None) -> AnalyticsRequest:
        if filter_:
            self.filters.append(filter_)
        return self

    def add_filters(self, filters: Iterable[str] | str | None = None) -> AnalyticsRequest:
        if isinstance(filters, str):
            return self.add_filter(filters)
        if filters:
            self.filters.extend(filters)
        return self

    def add_parameters(self, params: Mapping[str, Any] | None = None) -> AnalyticsRequest:
        """Merge *params* into the query; later calls override same-named keys."""
        if params:
            self.query.update(params)
        return self

    def build_query(self) -> list[tuple[str, Any]]:
        """Serialise the state as query pairs (repeated ``dimension``/``filter`` keys)."""
        pairs: list[tuple[str, Any]] = [("dimension", d) for d in self.dimensions]
        pairs.extend(("filter", f) for f in self.filters)
        pairs.extend(self.query.items())
        return pairs
