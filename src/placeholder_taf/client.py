"""Entry point bundling every resource endpoint behind one transport."""

from __future__ import annotations

import logging

import requests

from .endpoints.comment_endpoint import CommentEndpoint
from .endpoints.user_endpoint import UserEndpoint
from .transport.config import ClientConfig
from .transport.transport import ApiTransport


class PlaceholderApi:
    """All resource endpoints of the API under test, sharing one transport."""

    def __init__(self, transport: ApiTransport, logger: logging.Logger | None = None) -> None:
        self.transport = transport
        self.comments = CommentEndpoint(transport, logger=logger)
        self.users = UserEndpoint(transport, logger=logger)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> "PlaceholderApi":
        return cls(ApiTransport.from_config(config, session=session), logger=logger)

    @classmethod
    def from_env(cls, session: requests.Session | None = None) -> "PlaceholderApi":
        """Build from TAF_BASE_URL / TAF_API_TOKEN / TAF_TIMEOUT."""
        return cls.from_config(ClientConfig.from_env(), session=session)
