"""Summary returned to the caller after each accepted thought."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .store import BranchIndex, HistoryStore
from .types import ThoughtRecord


class ThoughtSummary(BaseModel):
    """Accumulated state after one thought, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    thought_number: int
    total_thoughts: int
    next_thought_needed: bool
    branches: list[str] = Field(default_factory=list)
    thought_history_length: int = 0

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def build_summary(
    record: ThoughtRecord,
    history: HistoryStore,
    branches: BranchIndex,
) -> ThoughtSummary:
    return ThoughtSummary(
        thought_number=record.thought_number,
        total_thoughts=record.total_thoughts,
        next_thought_needed=record.next_thought_needed,
        branches=branches.known_branch_ids(),
        thought_history_length=len(history),
    )
