"""
Shared fixtures -- a recording stand-in for the Api.
"""
from __future__ import annotations

from typing import Any

import pytest


class FakeApi:
    """Records every call and answers with a canned body."""

    def __init__(self, response: Any = None):
        self.response = response
        self.calls: list[tuple[str, str, Any]] = []

    def get(self, path: str, params: Any = None) -> Any:
        self.calls.append(("GET", path, params))
        return self.response

    def post(self, path: str, data: Any = None, params: Any = None) -> Any:
        self.calls.append(("POST", path, data))
        return self.response


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()
