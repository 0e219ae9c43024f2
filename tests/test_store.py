"""Unit tests for the history store and branch index."""
import pytest

from sequential_thinking_mcp.store import BranchIndex, HistoryStore
from sequential_thinking_mcp.types import ThoughtRecord


def _record(number, **kwargs):
    return ThoughtRecord(
        thought=f"step {number}",
        thought_number=number,
        total_thoughts=max(number, 3),
        next_thought_needed=True,
        **kwargs,
    )


class TestHistoryStore:
    """Tests for HistoryStore."""

    def test_append_preserves_order(self):
        """Test records are kept in arrival order."""
        store = HistoryStore()
        for number in (3, 1, 1):
            store.append(_record(number))
        assert len(store) == 3
        assert [r.thought_number for r in store.snapshot()] == [3, 1, 1]

    def test_get_is_one_based(self):
        """Test positional lookup uses 1-based arrival positions."""
        store = HistoryStore()
        store.append(_record(1))
        store.append(_record(2))
        assert store.get(1).thought_number == 1
        assert store.get(2).thought_number == 2
        assert store.get(0) is None
        assert store.get(3) is None

    def test_snapshot_is_a_copy(self):
        """Test mutating a snapshot leaves the store intact."""
        store = HistoryStore()
        store.append(_record(1))
        store.snapshot().clear()
        assert len(store) == 1


class TestBranchIndex:
    """Tests for BranchIndex."""

    def test_untagged_record_ignored(self):
        """Test records without branch tags are not indexed."""
        index = BranchIndex()
        assert index.record_if_branch(_record(1)) is False
        assert index.known_branch_ids() == []

    def test_both_tags_required(self):
        """Test a branch id alone or an origin alone does not create a branch."""
        index = BranchIndex()
        assert index.record_if_branch(_record(2, branch_id="x")) is False
        assert index.record_if_branch(_record(2, branch_from_thought=1)) is False
        assert index.known_branch_ids() == []

    def test_same_branch_appends(self):
        """Test reusing a branch id extends the same list."""
        index = BranchIndex()
        index.record_if_branch(_record(2, branch_from_thought=1, branch_id="x"))
        index.record_if_branch(_record(3, branch_from_thought=1, branch_id="x"))
        index.record_if_branch(_record(2, branch_from_thought=1, branch_id="y"))

        assert sorted(index.known_branch_ids()) == ["x", "y"]
        assert [r.thought_number for r in index.get("x")] == [2, 3]

    def test_unknown_branch_returns_none(self):
        """Test looking up an unseen branch id."""
        assert BranchIndex().get("missing") is None

    def test_clear(self):
        """Test clearing drops every branch."""
        index = BranchIndex()
        index.record_if_branch(_record(2, branch_from_thought=1, branch_id="x"))
        index.clear()
        assert index.snapshot() == {}


class TestConstruction:
    """Tests for store construction."""

    def test_history_store_takes_no_arguments(self):
        """Test outside lists cannot be injected into a HistoryStore."""
        with pytest.raises(TypeError):
            HistoryStore(_records=[])

    def test_branch_index_takes_no_arguments(self):
        """Test outside mappings cannot be injected into a BranchIndex."""
        with pytest.raises(TypeError):
            BranchIndex(_branches={})

    def test_instances_do_not_share_state(self):
        """Test each store starts empty and independent."""
        first, second = HistoryStore(), HistoryStore()
        first.append(_record(1))
        assert len(second) == 0
