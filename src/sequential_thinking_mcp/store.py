"""In-memory thought history and branch index."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import ThoughtRecord


@dataclass
class HistoryStore:
    """Append-only sequence of every accepted thought, in arrival order."""

    _records: list[ThoughtRecord] = field(default_factory=list, init=False, repr=False)

    def append(self, record: ThoughtRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, position: int) -> ThoughtRecord | None:
        """Record at a 1-based arrival position, or None when out of range."""
        if 1 <= position <= len(self._records):
            return self._records[position - 1]
        return None

    def snapshot(self) -> list[ThoughtRecord]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


@dataclass
class BranchIndex:
    """Branch id -> thoughts tagged with that id.

    Branch membership is additive: records stay in the main history too.
    """

    _branches: dict[str, list[ThoughtRecord]] = field(default_factory=dict, init=False, repr=False)

    def record_if_branch(self, record: ThoughtRecord) -> bool:
        """Append the record to its branch if it carries both branch tags."""
        if not record.is_branch:
            return False
        self._branches.setdefault(record.branch_id, []).append(record)
        return True

    def known_branch_ids(self) -> list[str]:
        """Branch ids in first-seen order."""
        return list(self._branches)

    def get(self, branch_id: str) -> list[ThoughtRecord] | None:
        branch = self._branches.get(branch_id)
        return list(branch) if branch is not None else None

    def snapshot(self) -> dict[str, list[ThoughtRecord]]:
        return {branch_id: list(records) for branch_id, records in self._branches.items()}

    def clear(self) -> None:
        self._branches.clear()
