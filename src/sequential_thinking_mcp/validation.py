"""Decoding of raw ``sequentialthinking`` arguments into a ThoughtRecord.

The argument map arrives as decoded JSON with no guarantees about its
shape. Decoding is driven by ``THOUGHT_FIELDS``:

- required fields are checked in table order and the first bad one is
  reported by its wire name;
- optional fields with the wrong type are dropped (lenient mode, the
  default) or reported like required ones (strict mode);
- numbers may be ints or floats and are truncated toward zero.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import INVALID_INPUT, ValidationError
from .result import Err, Ok, Result
from .types import ThoughtRecord

logger = logging.getLogger(__name__)

_INVALID = object()


class FieldKind(str, Enum):
    """JSON type expected for a field."""

    TEXT = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Decoding rule for one wire field."""

    wire_name: str
    attr: str
    kind: FieldKind
    required: bool = False
    non_empty: bool = False

    def error(self) -> ValidationError:
        return ValidationError(
            message=f"invalid {self.wire_name}: must be a {self.kind.value}",
            code=INVALID_INPUT,
            field_name=self.wire_name,
        )

    def decode(self, value: Any) -> Any:
        """Return the typed value, or ``_INVALID`` when it does not fit."""
        if self.kind is FieldKind.BOOLEAN:
            return value if isinstance(value, bool) else _INVALID
        if self.kind is FieldKind.TEXT:
            if not isinstance(value, str) or (self.non_empty and not value):
                return _INVALID
            return value
        # bool is an int subclass but never a JSON number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return _INVALID
        if isinstance(value, float) and not math.isfinite(value):
            return _INVALID
        return int(value)


THOUGHT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("thought", "thought", FieldKind.TEXT, required=True, non_empty=True),
    FieldSpec("thoughtNumber", "thought_number", FieldKind.NUMBER, required=True),
    FieldSpec("totalThoughts", "total_thoughts", FieldKind.NUMBER, required=True),
    FieldSpec("nextThoughtNeeded", "next_thought_needed", FieldKind.BOOLEAN, required=True),
    FieldSpec("isRevision", "is_revision", FieldKind.BOOLEAN),
    FieldSpec("revisesThought", "revises_thought", FieldKind.NUMBER),
    FieldSpec("branchFromThought", "branch_from_thought", FieldKind.NUMBER),
    FieldSpec("branchId", "branch_id", FieldKind.TEXT),
    FieldSpec("needsMoreThoughts", "needs_more_thoughts", FieldKind.BOOLEAN),
)


def validate_thought(
    arguments: Mapping[str, Any] | None,
    *,
    strict: bool = False,
) -> Result[ThoughtRecord, ValidationError]:
    """Validate a raw argument map.

    Args:
        arguments: Tool call arguments as decoded from the request.
        strict: Report mistyped optional fields instead of dropping them.

    Returns:
        Ok with the record (total thoughts already raised to the thought
        number when needed) or Err naming the first offending field.
    """
    arguments = arguments or {}
    values: dict[str, Any] = {}

    for field_spec in THOUGHT_FIELDS:
        raw = arguments.get(field_spec.wire_name)
        if raw is None:
            if field_spec.required:
                return Err(field_spec.error())
            continue

        value = field_spec.decode(raw)
        if value is _INVALID:
            if field_spec.required or strict:
                return Err(field_spec.error())
            logger.debug(
                "Ignoring %s: expected %s, got %s",
                field_spec.wire_name,
                field_spec.kind.value,
                type(raw).__name__,
            )
            continue
        values[field_spec.attr] = value

    if values["thought_number"] > values["total_thoughts"]:
        values["total_thoughts"] = values["thought_number"]

    return Ok(ThoughtRecord(**values))
