"""Responses whose status code has already been checked."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Generic, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from ..models.base import RecordModel
from .errors import DeserializationError, StatusAssertionError


RecordT = TypeVar("RecordT", bound=RecordModel)


class ValidatedResponse(Generic[RecordT]):
    """A response that passed its status assertion.

    Build one with :meth:`expect`; the constructor does not check anything.
    The wrapped response is never modified.
    """

    def __init__(self, response: requests.Response, record_type: type[RecordT]) -> None:
        self._response = response
        self.record_type = record_type

    @classmethod
    def expect(
        cls,
        response: requests.Response,
        expected_status: HTTPStatus | int,
        record_type: type[RecordT],
    ) -> "ValidatedResponse[RecordT]":
        """Assert ``response`` has ``expected_status`` and wrap it.

        Raises:
            StatusAssertionError: on any status mismatch.
        """
        expected = int(expected_status)
        if response.status_code != expected:
            request = response.request
            raise StatusAssertionError(
                expected=expected,
                actual=response.status_code,
                body=response.text,
                method=getattr(request, "method", "") or "",
                url=response.url or "",
            )
        return cls(response, record_type)

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Any:
        return self._response.headers

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def raw(self) -> requests.Response:
        return self._response

    def json(self) -> Any:
        return self._response.json()

    def as_record(self) -> RecordT:
        """Materialize the body as one record.

        Raises:
            DeserializationError: if the body is not valid JSON or lacks a
                required field or the server-assigned id, or a field has
                the wrong type.
        """
        try:
            record = self.record_type.model_validate_json(self._response.content)
        except ValidationError as exc:
            raise DeserializationError(self.record_type, self._response.text, str(exc)) from exc
        self._require_id(record)
        return record

    def as_records(self) -> list[RecordT]:
        """Materialize a JSON array body as records, in response order."""
        adapter = TypeAdapter(list[self.record_type])  # type: ignore[valid-type]
        try:
            records = adapter.validate_json(self._response.content)
        except ValidationError as exc:
            raise DeserializationError(self.record_type, self._response.text, str(exc)) from exc
        for record in records:
            self._require_id(record)
        return records

    def _require_id(self, record: RecordT) -> None:
        # id is optional only on outgoing payloads; the server must echo it
        if getattr(record, "id", None) is None:
            raise DeserializationError(self.record_type, self._response.text, "missing server-assigned id")
