"""
NeuroLit Matrix - data model

Documents, Dimensions and the dimension-major Matrix. Matrix and Dimension
are immutable values: every change produces a new object, so callers can
detect changes by identity or hash.

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple


# ============================================================
# DOCUMENTS
# ============================================================

@dataclass(frozen=True)
class Document:
    """An analyzed paper that can take part in a comparison"""
    id: str
    title: str
    reference: str = ""  # file name or citation label
    summary: str = ""
    major_findings: Tuple[str, ...] = ()
    methodology: str = ""
    research_gaps: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping) -> "Document":
        """Build a Document from snake_case or camelCase keys"""
        return cls(
            id=str(data['id']),
            title=data.get('title', ''),
            reference=data.get('reference', data.get('fileName', data.get('file_name', ''))),
            summary=data.get('summary', ''),
            major_findings=tuple(data.get('major_findings', data.get('majorFindings', ()))),
            methodology=data.get('methodology', ''),
            research_gaps=tuple(data.get('research_gaps', data.get('researchGaps', ()))),
            keywords=tuple(data.get('keywords', ())),
        )


# ============================================================
# MATRIX
# ============================================================

@dataclass(frozen=True)
class Dimension:
    """A named comparison criterion with one insight per document"""
    name: str
    insights: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'insights', MappingProxyType(dict(self.insights)))

    def __hash__(self):
        return hash((self.name, frozenset(self.insights.items())))

    def insight(self, document_id: str) -> str:
        return self.insights.get(document_id, "")

    def with_insight(self, document_id: str, text: str) -> "Dimension":
        """Return a copy with a single insight replaced"""
        insights = dict(self.insights)
        insights[document_id] = text
        return Dimension(self.name, insights)


@dataclass(frozen=True)
class Matrix:
    """Ordered dimensions plus the name of the dimension that defines membership"""
    dimensions: Tuple[Dimension, ...] = ()
    membership_source: Optional[str] = None

    def __post_init__(self):
        dimensions = tuple(self.dimensions)
        object.__setattr__(self, 'dimensions', dimensions)
        if self.membership_source is None and dimensions:
            object.__setattr__(self, 'membership_source', dimensions[0].name)

    def __len__(self):
        return len(self.dimensions)

    def __iter__(self):
        return iter(self.dimensions)

    @property
    def dimension_names(self) -> List[str]:
        return [d.name for d in self.dimensions]

    def find(self, name: str) -> Optional[Dimension]:
        """First dimension whose name matches exactly, or None"""
        for dimension in self.dimensions:
            if dimension.name == name:
                return dimension
        return None

    def membership_dimension(self) -> Optional[Dimension]:
        if self.membership_source is None:
            return None
        return self.find(self.membership_source)

    def replace_insight(self, document_id: str, dimension_name: str, text: str) -> Optional["Matrix"]:
        """
        Return a new Matrix with one insight replaced, or None when no
        dimension carries that name. Only the first matching dimension changes.
        """
        for idx, dimension in enumerate(self.dimensions):
            if dimension.name == dimension_name:
                dimensions = list(self.dimensions)
                dimensions[idx] = dimension.with_insight(document_id, text)
                return Matrix(tuple(dimensions), self.membership_source)
        return None

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> "Matrix":
        """
        Build a Matrix from comparison records.

        Accepts ``{"name", "insights"}`` records as well as the
        ``{"criteria", "paperInsights"}`` shape returned by the analysis
        service. Records are trusted; no validation is performed.
        """
        dimensions = []
        for record in records:
            name = record['name'] if 'name' in record else record['criteria']
            insights = record.get('insights', record.get('paperInsights')) or {}
            dimensions.append(Dimension(name, insights))
        return cls(tuple(dimensions))

    def to_records(self) -> List[dict]:
        return [{'name': d.name, 'insights': dict(d.insights)} for d in self.dimensions]
