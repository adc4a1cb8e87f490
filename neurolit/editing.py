"""
NeuroLit Matrix - cell editing

A per-cell edit transaction over the MatrixStore and the lightweight
markup used to display insights (``- `` / ``* `` bullets, ``**bold**``).

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from neurolit.errors import EditorStateError
from neurolit.store import MatrixStore

BULLET_MARKERS = ("- ", "* ")
EMPHASIS_PATTERN = re.compile(r"(\*\*.*?\*\*)")


# ============================================================
# INSIGHT MARKUP
# ============================================================

@dataclass(frozen=True)
class Span:
    text: str
    emphasized: bool = False


@dataclass(frozen=True)
class Block:
    """One rendered line: a bullet item or a plain paragraph"""
    kind: str  # bullet, paragraph
    spans: Tuple[Span, ...]

    @property
    def is_bullet(self) -> bool:
        return self.kind == "bullet"

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


def parse_spans(line: str) -> Tuple[Span, ...]:
    """Split a line into plain and ``**emphasized**`` spans"""
    spans = []
    for part in EMPHASIS_PATTERN.split(line):
        if not part:
            continue
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            spans.append(Span(part[2:-2], emphasized=True))
        else:
            spans.append(Span(part))
    return tuple(spans)


def parse_insight(text: str) -> List[Block]:
    """Parse stored insight text into display blocks, dropping blank lines"""
    blocks = []
    for line in (text or "").split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(BULLET_MARKERS):
            blocks.append(Block("bullet", parse_spans(stripped[2:])))
        else:
            blocks.append(Block("paragraph", parse_spans(line)))
    return blocks


def _render_spans(spans) -> str:
    parts = []
    for span in spans:
        escaped = html.escape(span.text)
        parts.append(f'<strong class="insight-em">{escaped}</strong>' if span.emphasized else escaped)
    return "".join(parts)


def render_html(blocks: List[Block]) -> str:
    """Render parsed blocks as HTML; consecutive bullets share one list"""
    out = []
    in_list = False
    for block in blocks:
        if block.is_bullet:
            if not in_list:
                out.append('<ul class="insight-list">')
                in_list = True
            out.append(f"<li>{_render_spans(block.spans)}</li>")
        else:
            if in_list:
                out.append("</ul>")
                in_list = False
            out.append(f'<p class="insight-text">{_render_spans(block.spans)}</p>')
    if in_list:
        out.append("</ul>")
    return "".join(out)


# ============================================================
# CELL EDITOR
# ============================================================

class EditState(Enum):
    VIEWING = "viewing"
    EDITING = "editing"


class CellEditor:
    """
    Edit transaction for one (document, dimension) cell.

    ``begin`` snapshots the stored text, ``set_draft`` changes only the local
    draft, ``commit`` always writes the draft back to the store and
    ``cancel`` restores the snapshot without touching the store.
    """

    def __init__(self, store: MatrixStore, document_id: str, dimension_name: str):
        self.store = store
        self.document_id = document_id
        self.dimension_name = dimension_name
        self.state = EditState.VIEWING
        self.text = store.insight(document_id, dimension_name)
        self.baseline = self.text

    @property
    def is_editing(self) -> bool:
        return self.state is EditState.EDITING

    def _require_editing(self, action: str):
        if not self.is_editing:
            raise EditorStateError(f"Cannot {action} cell {self.document_id}/{self.dimension_name}: not editing")

    def sync(self):
        """Pick up the stored value while viewing"""
        if not self.is_editing:
            self.text = self.store.insight(self.document_id, self.dimension_name)
            self.baseline = self.text

    def begin(self):
        if self.is_editing:
            return
        self.sync()
        self.state = EditState.EDITING

    def set_draft(self, text: str):
        self._require_editing("edit")
        self.text = text

    def commit(self):
        """Leave edit mode and store the draft, even when unchanged"""
        self._require_editing("commit")
        self.state = EditState.VIEWING
        self.store.update_insight(self.document_id, self.dimension_name, self.text)
        self.baseline = self.text

    def cancel(self):
        """Leave edit mode and discard the draft"""
        self._require_editing("cancel")
        self.state = EditState.VIEWING
        self.text = self.baseline

    def render(self) -> List[Block]:
        return parse_insight(self.text)
