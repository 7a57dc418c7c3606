"""Declarative field rules for request bodies.

Rules are attached to model fields through ``typing.Annotated`` metadata:

    to: Annotated[str, Length(min=1, max=24)]
    sections: Annotated[list[Section], Size(min=1, max=10)]

Pydantic keeps unknown metadata on ``FieldInfo.metadata`` without acting on
it, so construction only checks types. ``collect_violations`` walks a model,
evaluates every rule on every present field, and recurses into nested models.
All violations are collected; nothing stops at the first failure.

Absent optional fields (``None``) are exempt from every rule.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError

_URL_ADAPTER = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class Violation:
    """One failed rule on one field, addressed by its wire path."""

    field: str
    rule: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class Rule:
    """Base class for field rules. ``check`` returns an error message or None."""

    name = "rule"

    def check(self, value: Any) -> str | None:
        raise NotImplementedError


@dataclass(frozen=True)
class Length(Rule):
    """String length in code points, inclusive bounds."""

    min: int | None = None
    max: int | None = None

    name = "length"

    def check(self, value: Any) -> str | None:
        size = len(value)
        if self.min is not None and size < self.min:
            return f"length must be at least {self.min}, got {size}"
        if self.max is not None and size > self.max:
            return f"length must be at most {self.max}, got {size}"
        return None


@dataclass(frozen=True)
class Size(Rule):
    """Number of elements in a collection, inclusive bounds."""

    min: int | None = None
    max: int | None = None

    name = "size"

    def check(self, value: Any) -> str | None:
        size = len(value)
        if self.min is not None and size < self.min:
            return f"must contain at least {self.min} item(s), got {size}"
        if self.max is not None and size > self.max:
            return f"must contain at most {self.max} item(s), got {size}"
        return None


class NonEmpty(Size):
    """A collection with at least one element."""

    name = "non_empty"

    def __init__(self) -> None:
        super().__init__(min=1)


@dataclass(frozen=True)
class Range(Rule):
    """Numeric value within inclusive bounds."""

    min: float | None = None
    max: float | None = None

    name = "range"

    def check(self, value: Any) -> str | None:
        if isinstance(value, float) and not math.isfinite(value):
            return f"must be a finite number, got {value}"
        if self.min is not None and value < self.min:
            return f"must be greater than or equal to {self.min}, got {value}"
        if self.max is not None and value > self.max:
            return f"must be less than or equal to {self.max}, got {value}"
        return None


@dataclass(frozen=True)
class Pattern(Rule):
    """Full match against a fixed regular expression."""

    regex: str

    name = "pattern"

    def check(self, value: Any) -> str | None:
        if re.fullmatch(self.regex, str(value)) is None:
            return f"does not match pattern {self.regex!r}"
        return None


@dataclass(frozen=True)
class Url(Rule):
    """An absolute URL with a scheme."""

    name = "url"

    def check(self, value: Any) -> str | None:
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError:
            return f"is not a valid URL: {value!r}"
        return None


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _walk(value: Any, path: str) -> list[Violation]:
    if isinstance(value, BaseModel):
        return collect_violations(value, path)
    if isinstance(value, dict):
        found: list[Violation] = []
        for key, item in value.items():
            found.extend(_walk(item, _join(path, str(key))))
        return found
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        found = []
        for index, item in enumerate(value):
            found.extend(_walk(item, f"{path}[{index}]"))
        return found
    return []


def collect_violations(model: BaseModel, prefix: str = "") -> list[Violation]:
    """Evaluate every rule declared on ``model`` and its nested models."""
    violations: list[Violation] = []
    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        if value is None:
            continue
        path = _join(prefix, field.alias or name)
        for rule in field.metadata:
            if not isinstance(rule, Rule):
                continue
            message = rule.check(value)
            if message is not None:
                violations.append(Violation(field=path, rule=rule.name, message=message))
        violations.extend(_walk(value, path))
    return violations
