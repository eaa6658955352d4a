"""
REST client for the platform's Web API.

Thin wrapper around ``httpx.Client``:
  - relative paths are joined onto the configured ``api_url``
  - requests use basic auth and ask for JSON
  - non-2xx responses raise ``httpx.HTTPStatusError`` unmodified
  - JSON bodies are parsed, everything else is returned as text

Configuration is read from Settings (env / .env).
"""
from __future__ import annotations

import threading
from typing import Any

import httpx

from d2client.core.config import get_settings
from d2client.core.logging import get_logger, timed

logger = get_logger(__name__)

QueryParams = dict[str, Any] | list[tuple[str, Any]] | None


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.json()
    return response.text


class Api:
    """Synchronous client bound to one server.

    Parameters
    ----------
    base_url : str, optional
        Full API root, e.g. ``https://play.dhis2.org/dev/api``.  Defaults to
        ``Settings.api_url``.
    username, password : str, optional
        Basic-auth credentials.  Default to the configured ones.
    timeout : float, optional
        Per-request timeout in seconds.
    client : httpx.Client, optional
        Pre-built transport; when given, auth and timeout are left to it.
    """

    def __init__(
        self,
        base_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        if client is None:
            client = httpx.Client(
                auth=(username or settings.dhis2_username, password or settings.dhis2_password),
                timeout=timeout if timeout is not None else settings.http_timeout,
                headers={"Accept": "application/json"},
            )
        self._client = client

    # ── Public API ──────────────────────────────────────

    def get(self, path: str, params: QueryParams = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, data: Any = None, params: QueryParams = None) -> Any:
        return self.request("POST", path, params=params, data=data)

    def put(self, path: str, data: Any = None, params: QueryParams = None) -> Any:
        return self.request("PUT", path, params=params, data=data)

    def patch(self, path: str, data: Any = None, params: QueryParams = None) -> Any:
        return self.request("PATCH", path, params=params, data=data)

    def delete(self, path: str, params: QueryParams = None) -> Any:
        return self.request("DELETE", path, params=params)

    def request(self, method: str, path: str, params: QueryParams = None, data: Any = None) -> Any:
        """Send one request and return the parsed response body."""
        url = self.url_for(path)
        kwargs: dict[str, Any] = {"params": params}
        if data is not None:
            if isinstance(data, (str, bytes)):
                kwargs["content"] = data
            else:
                kwargs["json"] = data

        with timed(logger, f"{method} {url}") as info:
            response = self._client.request(method, url, **kwargs)
            info["status"] = response.status_code

        response.raise_for_status()
        return _parse_body(response)

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Api:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


# ── Module-level singleton ──────────────────────────────

_api: Api | None = None
_api_lock = threading.Lock()


def get_api() -> Api:
    """Return the shared Api instance (lazy-created, cached)."""
    global _api
    if _api is None:
        with _api_lock:
            if _api is None:
                _api = Api()
                logger.info("Api client created  base_url=%s", _api.base_url)
    return _api
