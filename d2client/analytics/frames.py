"""
Convert analytics responses into pandas DataFrames.

Two response shapes are understood:
  - data value sets: ``{"dataValues": [{...}, ...]}``
  - grids:           ``{"headers": [{"name": ...}, ...], "rows": [[...], ...]}``
"""
from __future__ import annotations

from typing import Any, Mapping

import pandas as pd


def to_dataframe(response: Mapping[str, Any]) -> pd.DataFrame:
    if not isinstance(response, Mapping):
        raise ValueError(f"Cannot convert {type(response).__name__} to a DataFrame.")

    if "dataValues" in response:
        return pd.DataFrame(list(response["dataValues"] or []))

    if "headers" in response:
        columns = [h.get("name") or h.get("column") for h in response["headers"]]
        return pd.DataFrame(list(response.get("rows") or []), columns=columns)

    raise ValueError(
        "Response has neither 'dataValues' nor 'headers'; "
        "only data value sets and grids can be converted."
    )
