"""JSON-over-HTTP transport shared by every resource endpoint."""

from __future__ import annotations

from typing import Any

import requests

from .config import DEFAULT_TIMEOUT_S, ClientConfig


_JSON = "application/json"


class ApiTransport:
    """Thin wrapper over a requests.Session bound to one API root.

    The transport owns connection settings only. It never inspects status
    codes and never retries; requests exceptions reach the caller as-is.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        headers: dict[str, str] | None = None,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._headers = {"Accept": _JSON}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        if headers:
            self._headers.update(headers)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session: requests.Session | None = None,
    ) -> "ApiTransport":
        return cls(
            config.base_url,
            session=session,
            headers=config.headers,
            token=config.token,
            timeout=config.timeout,
        )

    def url_for(self, path: str) -> str:
        """Join an API path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, headers: dict | None = None) -> requests.Response:
        return self._send("GET", path, headers=headers)

    def post(self, path: str, body: Any, headers: dict | None = None) -> requests.Response:
        return self._send("POST", path, body=body, headers=headers)

    def put(self, path: str, body: Any, headers: dict | None = None) -> requests.Response:
        return self._send("PUT", path, body=body, headers=headers)

    def _send(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: dict | None = None,
    ) -> requests.Response:
        request_headers = dict(self._headers)
        if body is not None:
            request_headers["Content-Type"] = _JSON
        if headers:
            request_headers.update(headers)
        return self._session.request(
            method,
            self.url_for(path),
            json=body,
            headers=request_headers,
            timeout=self.timeout,
        )
