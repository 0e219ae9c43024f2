"""Diagnostic box rendering for accepted thoughts.

Widths are measured in terminal cells (``rich.cells.cell_len``), so wide
CJK characters and most emoji count as two and combining marks as zero.
For a header ``h`` and a single-line thought ``t`` the box width is
``max(cell_len(h), cell_len(t)) + 4``: the length of every horizontal rule
between the corners. A multi-line thought gets one row per line and is
measured by its widest line. Each rendered line is two cells wider than
the box width.
"""

from __future__ import annotations

import logging

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from .types import ThoughtKind, ThoughtRecord

logger = logging.getLogger(__name__)

# === Constants ===

HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT, TOP_RIGHT = "┌", "┐"
MID_LEFT, MID_RIGHT = "├", "┤"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"

BOX_PADDING = 4

LABELS: dict[ThoughtKind, str] = {
    ThoughtKind.REVISION: "Revision",
    ThoughtKind.BRANCH: "Branch",
    ThoughtKind.THOUGHT: "Thought",
}

LABEL_STYLES: dict[ThoughtKind, str] = {
    ThoughtKind.REVISION: "yellow",
    ThoughtKind.BRANCH: "green",
    ThoughtKind.THOUGHT: "blue",
}


# === Rendering ===

def classify(record: ThoughtRecord) -> ThoughtKind:
    """Revision beats branch; everything else is a plain thought."""
    if record.is_revision:
        return ThoughtKind.REVISION
    if record.is_branch:
        return ThoughtKind.BRANCH
    return ThoughtKind.THOUGHT


def _context(record: ThoughtRecord, kind: ThoughtKind) -> str:
    if kind is ThoughtKind.REVISION:
        if record.revises_thought is None:
            return ""
        return f" (revising thought {record.revises_thought})"
    if kind is ThoughtKind.BRANCH:
        return f" (from thought {record.branch_from_thought}, ID: {record.branch_id})"
    return ""


def format_header(record: ThoughtRecord, kind: ThoughtKind | None = None) -> str:
    kind = kind or classify(record)
    return (
        f"{LABELS[kind]} {record.thought_number}/{record.total_thoughts}"
        f"{_context(record, kind)}"
    )


def _content_lines(content: str) -> list[str]:
    return content.splitlines() or [""]


def box_width(header: str, content: str) -> int:
    widest = max(cell_len(line) for line in _content_lines(content))
    return max(cell_len(header), widest) + BOX_PADDING


def _pad(text: str, width: int) -> str:
    return text + " " * (width - cell_len(text))


def render_thought(record: ThoughtRecord, kind: ThoughtKind | None = None) -> str:
    """Render a thought as a bordered block. Pure; no trailing newline."""
    header = format_header(record, kind)
    width = box_width(header, record.thought)
    rule = HORIZONTAL * width
    inner = width - 2

    lines = [
        f"{TOP_LEFT}{rule}{TOP_RIGHT}",
        f"{VERTICAL} {_pad(header, inner)} {VERTICAL}",
        f"{MID_LEFT}{rule}{MID_RIGHT}",
    ]
    lines.extend(f"{VERTICAL} {_pad(line, inner)} {VERTICAL}" for line in _content_lines(record.thought))
    lines.append(f"{BOTTOM_LEFT}{rule}{BOTTOM_RIGHT}")
    return "\n".join(lines)


# === Emission ===

class ThoughtLogger:
    """Writes rendered thoughts to stderr with the label coloured by kind.

    stdout carries the MCP stdio channel, so nothing here may write to it.
    """

    def __init__(self, console: Console | None = None, enabled: bool = True):
        self.console = console or Console(stderr=True, highlight=False)
        self.enabled = enabled

    def emit(self, record: ThoughtRecord) -> None:
        if not self.enabled:
            return

        kind = classify(record)
        box = render_thought(record, kind)
        text = Text(box)

        # label sits right after "│ " on the second line
        label_start = box.index("\n") + 1 + len(VERTICAL) + 1
        text.stylize(LABEL_STYLES[kind], label_start, label_start + len(LABELS[kind]))

        self.console.print()
        self.console.print(text, soft_wrap=True)
