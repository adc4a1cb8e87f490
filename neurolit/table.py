"""
NeuroLit Matrix - transposition and sorting

Turns the dimension-major Matrix into document-major table rows and groups
the rows by a detected dimension (by default the one naming the model or
architecture a paper used).

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from neurolit.config import SORT_TERMS
from neurolit.model import Dimension, Document, Matrix

SortPredicate = Callable[[str], bool]


def name_contains(*terms: str) -> SortPredicate:
    """Predicate matching dimension names that contain any term, ignoring case"""
    lowered = tuple(t.lower() for t in terms)

    def predicate(name: str) -> bool:
        name = name.lower()
        return any(term in name for term in lowered)

    return predicate


DEFAULT_SORT_PREDICATE = name_contains(*SORT_TERMS)


def active_ids(matrix: Optional[Matrix]) -> set:
    if matrix is None:
        return set()
    source = matrix.membership_dimension()
    return set(source.insights) if source is not None else set()


def transpose(matrix: Optional[Matrix], documents: Sequence[Document]) -> List[Document]:
    """
    Documents that have a row in the table, in their original order.

    Membership comes from the membership-source dimension only; a document
    with insights solely under later dimensions is left out.
    """
    ids = active_ids(matrix)
    return [doc for doc in documents if doc.id in ids]


def find_sort_dimension(matrix: Optional[Matrix],
                        predicate: SortPredicate = DEFAULT_SORT_PREDICATE) -> Optional[Dimension]:
    if matrix is None:
        return None
    for dimension in matrix.dimensions:
        if predicate(dimension.name):
            return dimension
    return None


def sort_documents(matrix: Optional[Matrix], documents: Sequence[Document],
                   predicate: SortPredicate = DEFAULT_SORT_PREDICATE) -> List[Document]:
    """Stable sort by the matched dimension's insight text, case-insensitive"""
    dimension = find_sort_dimension(matrix, predicate)
    if dimension is None:
        return list(documents)
    return sorted(documents, key=lambda doc: dimension.insight(doc.id).lower())


@dataclass(frozen=True)
class ComparisonTable:
    """Rendered view of a Matrix: papers as rows, dimensions as columns"""
    documents: tuple
    dimensions: tuple
    sort_dimension: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return len(self.documents) == 0


def build_table(matrix: Optional[Matrix], documents: Sequence[Document],
                predicate: SortPredicate = DEFAULT_SORT_PREDICATE) -> ComparisonTable:
    rows = sort_documents(matrix, transpose(matrix, documents), predicate)
    sort_dimension = find_sort_dimension(matrix, predicate)
    return ComparisonTable(
        documents=tuple(rows),
        dimensions=matrix.dimensions if matrix is not None else (),
        sort_dimension=sort_dimension.name if sort_dimension is not None else None,
    )
