"""Connection settings for the API under test."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TIMEOUT_S = 10.0


class ClientConfig(BaseModel):
    """Base URL, credentials and timeout handed to the transport."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., min_length=1, description="API root, e.g. https://jsonplaceholder.typicode.com")
    token: str | None = Field(default=None, description="Bearer token, sent as Authorization header")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra default headers")
    timeout: float = Field(default=DEFAULT_TIMEOUT_S, gt=0, description="Per-request timeout in seconds")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build settings from TAF_BASE_URL, TAF_API_TOKEN and TAF_TIMEOUT.

        Raises:
            ValueError: if TAF_BASE_URL is unset or TAF_TIMEOUT is not a number.
        """
        base_url = os.environ.get("TAF_BASE_URL", "")
        if not base_url:
            raise ValueError("TAF_BASE_URL is not set")
        timeout = os.environ.get("TAF_TIMEOUT", "")
        return cls(
            base_url=base_url,
            token=os.environ.get("TAF_API_TOKEN") or None,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT_S,
        )
