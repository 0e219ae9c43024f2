"""Sequential thinking processor: validation, bookkeeping and summaries."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .config import ServerConfig, load_config
from .errors import ValidationError
from .formatting import ThoughtLogger
from .response import ThoughtSummary, build_summary
from .result import Err, Ok, Result
from .store import BranchIndex, HistoryStore
from .types import ThoughtRecord
from .validation import validate_thought

logger = logging.getLogger(__name__)


@dataclass
class SequentialThinkingProcessor:
    """Owns the thought history and branch index for one server.

    Usage:
        processor = SequentialThinkingProcessor()

        result = processor.process_thought({
            "thought": "Let me break down this problem...",
            "thoughtNumber": 1,
            "totalThoughts": 5,
            "nextThoughtNeeded": True,
        })
        if result.is_ok():
            print(result.value.to_json())
        else:
            print(result.error.message)

        # Branch into an alternative path
        processor.process_thought({
            "thought": "Exploring alternative approach...",
            "thoughtNumber": 2,
            "totalThoughts": 5,
            "nextThoughtNeeded": True,
            "branchFromThought": 1,
            "branchId": "alt-approach",
        })

        history = processor.get_history()
        branches = processor.get_branches()
    """

    config: ServerConfig = field(default_factory=load_config)
    thought_logger: ThoughtLogger | None = None
    _history: HistoryStore = field(default_factory=HistoryStore, init=False, repr=False)
    _branches: BranchIndex = field(default_factory=BranchIndex, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.thought_logger is None:
            self.thought_logger = ThoughtLogger(enabled=not self.config.disable_thought_logging)

    def process_thought(
        self, arguments: Mapping[str, Any] | None
    ) -> Result[ThoughtSummary, ValidationError]:
        """Validate and record one thought.

        Args:
            arguments: Raw tool arguments with camelCase wire names.

        Returns:
            Ok with the summary, or Err naming the first invalid required
            field. Nothing is recorded on Err.
        """
        validated = validate_thought(arguments, strict=self.config.strict)
        if validated.is_err():
            logger.info("Rejected thought: %s", validated.error.message)
            return validated

        record = validated.value
        with self._lock:
            self._history.append(record)
            if self._branches.record_if_branch(record):
                logger.debug("Thought %d added to branch %r", record.thought_number, record.branch_id)
            self.thought_logger.emit(record)
            summary = build_summary(record, self._history, self._branches)

        logger.debug(
            "Recorded thought %d/%d (history length %d)",
            record.thought_number,
            record.total_thoughts,
            summary.thought_history_length,
        )
        return Ok(summary)

    def get_history(self) -> list[ThoughtRecord]:
        """Get the full thought history."""
        with self._lock:
            return self._history.snapshot()

    def get_branches(self) -> dict[str, list[ThoughtRecord]]:
        """Get all branches and their thoughts."""
        with self._lock:
            return self._branches.snapshot()

    def get_branch(self, branch_id: str) -> list[ThoughtRecord] | None:
        """Get thoughts for a specific branch."""
        with self._lock:
            return self._branches.get(branch_id)

    def clear(self) -> None:
        """Clear all thought history and branches."""
        with self._lock:
            self._history.clear()
            self._branches.clear()


def process_thought(
    thought: str,
    thought_number: int,
    total_thoughts: int,
    next_thought_needed: bool,
    is_revision: bool | None = None,
    revises_thought: int | None = None,
    branch_from_thought: int | None = None,
    branch_id: str | None = None,
    needs_more_thoughts: bool | None = None,
) -> Result[ThoughtSummary, ValidationError]:
    """Process a single thought (convenience function).

    Creates a new processor for single use with thought logging disabled.
    For a chain of thoughts, keep one SequentialThinkingProcessor.
    """
    processor = SequentialThinkingProcessor(config=ServerConfig(disable_thought_logging=True))
    arguments = {
        "thought": thought,
        "thoughtNumber": thought_number,
        "totalThoughts": total_thoughts,
        "nextThoughtNeeded": next_thought_needed,
        "isRevision": is_revision,
        "revisesThought": revises_thought,
        "branchFromThought": branch_from_thought,
        "branchId": branch_id,
        "needsMoreThoughts": needs_more_thoughts,
    }
    return processor.process_thought(arguments)
