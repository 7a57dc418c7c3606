"""Pydantic base classes shared by every request and response model.

Wire conventions handled here once, so individual models only declare fields:

  - snake_case attributes map to camelCase JSON keys (``message_id`` ↔
    ``messageId``). Irregular keys such as ``from`` use an explicit alias.
  - Absent optional fields are left out of the payload, never sent as null.
  - Response models tolerate missing fields and ignore unknown ones, so a
    provider adding a field never breaks decoding.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from infobip_sdk.errors import RequestValidationError
from infobip_sdk.validation import Violation, collect_violations


class WireModel(BaseModel):
    """Base for anything that crosses the wire as JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the wire JSON shape (camelCase keys, no nulls)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: dict[str, Any]):
        return cls.model_validate(data)


class RequestModel(WireModel):
    """A request body (or part of one) carrying declarative field rules."""

    def violations(self) -> list[Violation]:
        """Every rule this instance breaks, including nested models."""
        return collect_violations(self)

    def validate_fields(self) -> None:
        """Raise RequestValidationError if any field rule is broken."""
        violations = self.violations()
        if violations:
            raise RequestValidationError(violations)


class QueryParameters(RequestModel):
    """Request data sent in the URL query string instead of the body."""

    def to_params(self) -> dict[str, str]:
        """Render present fields as query string values.

        Booleans become ``true``/``false`` and lists are comma-joined.
        """
        params: dict[str, str] = {}
        for key, value in self.to_wire().items():
            params[key] = _render(value)
        return params


class ResponseModel(WireModel):
    """A decoded response body. Every field is optional; nothing is validated."""

    model_config = ConfigDict(extra="ignore")


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(_render(item) for item in value)
    return str(value)
