"""
NeuroLit Matrix - Comparative Analysis Matrix for Research Papers
Version: 1.0

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from neurolit.model import Document, Dimension, Matrix
from neurolit.store import MatrixStore
from neurolit.table import ComparisonTable, build_table, name_contains, sort_documents, transpose
from neurolit.editing import CellEditor, EditState, parse_insight
from neurolit.export import export_csv
from neurolit.comparison import ComparisonRunner, parse_comparison_response
from neurolit.errors import ComparisonError, EditorStateError, NeuroLitError

__version__ = "1.0.0"

__all__ = [
    "Document", "Dimension", "Matrix", "MatrixStore",
    "ComparisonTable", "build_table", "name_contains", "sort_documents", "transpose",
    "CellEditor", "EditState", "parse_insight", "export_csv",
    "ComparisonRunner", "parse_comparison_response",
    "ComparisonError", "EditorStateError", "NeuroLitError",
]
