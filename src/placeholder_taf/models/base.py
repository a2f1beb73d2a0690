"""Base class for typed records exchanged with the API under test."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict


_RecordT = TypeVar("_RecordT", bound="RecordModel")


class RecordModel(BaseModel):
    """Immutable wire record.

    Unknown response fields are ignored. Field types are checked strictly:
    a JSON ``"1"`` is not accepted for an integer field. Python field names
    may differ from the JSON names; aliases carry the wire names and both
    are accepted on construction.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, strict=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body sent on create/update.

        Unset optional fields (the server-assigned ``id`` on a new record)
        are left out.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls: type[_RecordT], text: str | bytes) -> _RecordT:
        """Parse a JSON document into a record of this type."""
        return cls.model_validate_json(text)
