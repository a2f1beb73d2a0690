"""Generic CRUD endpoint shared by every resource client.

A resource client only declares its paths and record type:

    class CommentEndpoint(ResourceEndpoint[Comment]):
        resource_name = "Comment"
        collection_path = "/comments"
        member_path = "/comments/{commentID}"
        record_type = Comment

Every operation comes in two forms:
  - ``<op>_response(..., expected_status=...)`` asserts the given status and
    returns a ValidatedResponse. Use it to test failure paths.
  - ``<op>(...)`` asserts the default status and returns typed records.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, ClassVar, Generic

from ..models.base import RecordModel
from ..transport.transport import ApiTransport
from .paths import expand_path, placeholders
from .response import RecordT, ValidatedResponse

Identifier = int | str


class ResourceEndpoint(Generic[RecordT]):
    """CREATE / READ / UPDATE / LIST over one resource collection."""

    resource_name: ClassVar[str]
    collection_path: ClassVar[str]
    member_path: ClassVar[str]
    record_type: ClassVar[type[RecordModel]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        collection = getattr(cls, "collection_path", None)
        member = getattr(cls, "member_path", None)
        if collection is None or member is None:
            return  # intermediate base without paths
        if placeholders(collection):
            raise ValueError(f"{cls.__name__}.collection_path must not contain placeholders: {collection!r}")
        if len(placeholders(member)) != 1:
            raise ValueError(f"{cls.__name__}.member_path must contain exactly one placeholder: {member!r}")
        if not getattr(cls, "resource_name", None):
            cls.resource_name = getattr(cls, "record_type", cls).__name__

    def __init__(self, transport: ApiTransport, logger: logging.Logger | None = None) -> None:
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Status-explicit operations
    # ------------------------------------------------------------------

    def create_response(
        self,
        payload: RecordModel | dict,
        expected_status: HTTPStatus | int = HTTPStatus.CREATED,
    ) -> ValidatedResponse[RecordT]:
        """POST ``payload`` to the collection path and assert the status."""
        self._logger.info("Create new %s", self.resource_name)
        response = self._transport.post(self.collection_path, _serialize(payload))
        return ValidatedResponse.expect(response, expected_status, self.record_type)

    def get_by_id_response(
        self,
        id: Identifier,
        expected_status: HTTPStatus | int = HTTPStatus.OK,
    ) -> ValidatedResponse[RecordT]:
        """GET one member and assert the status.

        The ID is not validated here; a malformed ID yields whatever the
        server answers, which is then checked against ``expected_status``.
        """
        self._logger.info("Get %s by id [%s]", self.resource_name, id)
        response = self._transport.get(expand_path(self.member_path, id))
        return ValidatedResponse.expect(response, expected_status, self.record_type)

    def update_response(
        self,
        payload: RecordModel | dict,
        id: Identifier,
        expected_status: HTTPStatus | int = HTTPStatus.OK,
    ) -> ValidatedResponse[RecordT]:
        """PUT ``payload`` to one member (full replace) and assert the status."""
        self._logger.info("Update %s by id [%s]", self.resource_name, id)
        response = self._transport.put(expand_path(self.member_path, id), _serialize(payload))
        return ValidatedResponse.expect(response, expected_status, self.record_type)

    def get_all_response(
        self,
        expected_status: HTTPStatus | int = HTTPStatus.OK,
    ) -> ValidatedResponse[RecordT]:
        """GET the whole collection and assert the status."""
        self._logger.info("Get all %ss", self.resource_name)
        response = self._transport.get(self.collection_path)
        return ValidatedResponse.expect(response, expected_status, self.record_type)

    # ------------------------------------------------------------------
    # Happy-path operations
    # ------------------------------------------------------------------

    def create(self, payload: RecordModel | dict) -> RecordT:
        return self.create_response(payload).as_record()

    def get_by_id(self, id: Identifier) -> RecordT:
        return self.get_by_id_response(id).as_record()

    def update(self, id: Identifier, payload: RecordModel | dict) -> RecordT:
        return self.update_response(payload, id).as_record()

    def get_all(self) -> list[RecordT]:
        return self.get_all_response().as_records()


def define_endpoint(
    resource_name: str,
    collection_path: str,
    member_path: str,
    record_type: type[RecordModel],
) -> type[ResourceEndpoint]:
    """Build a ResourceEndpoint subclass for a resource without a class body."""
    return type(
        f"{resource_name}Endpoint",
        (ResourceEndpoint,),
        {
            "resource_name": resource_name,
            "collection_path": collection_path,
            "member_path": member_path,
            "record_type": record_type,
        },
    )


def _serialize(payload: RecordModel | dict) -> Any:
    if isinstance(payload, RecordModel):
        return payload.to_payload()
    return payload
