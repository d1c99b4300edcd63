"""Thin HTTP wrapper around the KeuzeKompas REST API."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from .storage import TOKEN_KEY, MemoryStorage

logger = logging.getLogger("client.api")

DEFAULT_BASE_URL = "http://localhost:3000"


class ApiError(Exception):
    """Non-2xx response (or unreachable server, status 0) with a displayable message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, message={self.message!r})"


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("detail", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return resp.reason_phrase or f"HTTP {resp.status_code}"


class ApiClient:
    """Sends JSON requests, attaching the stored bearer token when present.

    ``http`` may be any ``httpx.Client`` (including FastAPI's ``TestClient``);
    paths are passed relative so the client's own ``base_url`` applies.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        storage=None,
        timeout: float = 10.0,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        if http is None:
            base = (base_url or os.getenv("KEUZEKOMPAS_API_URL") or DEFAULT_BASE_URL).rstrip("/")
            http = httpx.Client(base_url=base, timeout=timeout)
            self._owns_http = True
        else:
            self._owns_http = False
        self._http = http

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self.storage.get(TOKEN_KEY)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, method: str, path: str, *, json: Any = None, params: Any = None) -> Any:
        if not path.startswith("/"):
            path = "/" + path
        try:
            resp = self._http.request(method, path, json=json, params=params, headers=self._headers())
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(0, "Could not reach the server") from e
        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.debug("%s %s -> %s %s", method, path, resp.status_code, message)
            raise ApiError(resp.status_code, message)
        if not resp.content:
            return None
        return resp.json()

    def get(self, path: str, params: Any = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str, json: Any = None) -> Any:
        return self.request("DELETE", path, json=json)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
