"""
NeuroLit Matrix - matrix store

Holds the current comparison Matrix. The whole value is replaced by a
comparison run; single cells are updated copy-on-write.

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

from typing import List, Optional, Set

from neurolit.config import MAX_UNDO_STEPS
from neurolit.logging_helper import get_logger
from neurolit.model import Matrix
from neurolit.table import active_ids

log = get_logger(__name__)


class MatrixStore:
    """Owner of the current Matrix value and its edit history"""

    def __init__(self, matrix: Optional[Matrix] = None, max_undo_steps: int = MAX_UNDO_STEPS):
        self._matrix = matrix
        self.max_undo_steps = max_undo_steps
        self.undo_stack: List[Optional[Matrix]] = []
        self.redo_stack: List[Optional[Matrix]] = []

    @property
    def matrix(self) -> Optional[Matrix]:
        return self._matrix

    def replace(self, matrix: Optional[Matrix]):
        """Install a new Matrix wholesale and forget the edit history"""
        self._matrix = matrix
        self.undo_stack = []
        self.redo_stack = []
        log.info("Matrix replaced: %d dimensions", len(matrix) if matrix is not None else 0)

    def active_document_ids(self) -> Set[str]:
        """Ids present in the membership-source dimension"""
        return active_ids(self._matrix)

    def insight(self, document_id: str, dimension_name: str) -> str:
        if self._matrix is None:
            return ""
        dimension = self._matrix.find(dimension_name)
        return dimension.insight(document_id) if dimension is not None else ""

    def update_insight(self, document_id: str, dimension_name: str, text: str) -> bool:
        """
        Replace one insight. Unknown dimensions and an empty store are
        ignored. The previous Matrix object is left untouched.
        """
        if self._matrix is None:
            return False
        updated = self._matrix.replace_insight(document_id, dimension_name, text)
        if updated is None:
            log.debug("No dimension named %r; update ignored", dimension_name)
            return False

        # Unchanged commits still install a new value but add no history
        if updated != self._matrix:
            self._save_state_for_undo()
        self._matrix = updated
        return True

    # ------------------------------------------------------------
    # Undo / Redo
    # ------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return len(self.undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.redo_stack) > 0

    def _save_state_for_undo(self):
        """Push the current value before it is changed"""
        self.undo_stack.append(self._matrix)
        # Limit stack size
        if len(self.undo_stack) > self.max_undo_steps:
            self.undo_stack.pop(0)
        # New edit invalidates redo
        self.redo_stack = []

    def undo(self) -> bool:
        """Undo last cell update"""
        if not self.undo_stack:
            return False
        self.redo_stack.append(self._matrix)
        self._matrix = self.undo_stack.pop()
        return True

    def redo(self) -> bool:
        """Redo last undone cell update"""
        if not self.redo_stack:
            return False
        self.undo_stack.append(self._matrix)
        self._matrix = self.redo_stack.pop()
        return True
