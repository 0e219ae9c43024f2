"""Type definitions for the sequential thinking server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# === Enums ===

class ThoughtKind(str, Enum):
    """How a thought is presented in the diagnostic box."""

    THOUGHT = "thought"
    REVISION = "revision"
    BRANCH = "branch"


# === Records ===

@dataclass(frozen=True, slots=True)
class ThoughtRecord:
    """One accepted reasoning step as stored in history.

    ``total_thoughts`` is never below ``thought_number``; the validator
    raises it before the record is built.
    """

    thought: str
    thought_number: int
    total_thoughts: int
    next_thought_needed: bool
    is_revision: bool | None = None
    revises_thought: int | None = None
    branch_from_thought: int | None = None
    branch_id: str | None = None
    needs_more_thoughts: bool | None = None

    @property
    def is_branch(self) -> bool:
        """True when the record carries both branch tags."""
        return self.branch_from_thought is not None and self.branch_id is not None

    def to_dict(self) -> dict[str, Any]:
        """Wire representation; absent optional fields are omitted."""
        data: dict[str, Any] = {
            "thought": self.thought,
            "thoughtNumber": self.thought_number,
            "totalThoughts": self.total_thoughts,
            "nextThoughtNeeded": self.next_thought_needed,
        }
        optional = {
            "isRevision": self.is_revision,
            "revisesThought": self.revises_thought,
            "branchFromThought": self.branch_from_thought,
            "branchId": self.branch_id,
            "needsMoreThoughts": self.needs_more_thoughts,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data
