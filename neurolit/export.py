"""
NeuroLit Matrix - CSV export

Serializes the rendered comparison table (papers as rows, dimensions as
columns) to CSV. Every field is quoted and insight markup is flattened.

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

import base64
import csv
import io
from typing import Optional, Sequence

import pandas as pd

from neurolit.config import CSV_HEADERS, EXPORT_FILENAME, EXPORT_MIME, HYPHEN_REPLACEMENT
from neurolit.logging_helper import get_logger
from neurolit.model import Document, Matrix

log = get_logger(__name__)

LINE_TERMINATOR = "\n"


def normalize_insight(text: str) -> str:
    """Drop emphasis markers and replace every hyphen"""
    return (text or "").replace("**", "").replace("-", HYPHEN_REPLACEMENT)


def to_dataframe(matrix: Matrix, documents: Sequence[Document]) -> pd.DataFrame:
    """Document-major table with normalized insight text"""
    columns = list(CSV_HEADERS) + matrix.dimension_names
    rows = []
    for doc in documents:
        rows.append(
            [doc.title, doc.reference]
            + [normalize_insight(dimension.insight(doc.id)) for dimension in matrix.dimensions]
        )
    return pd.DataFrame(rows, columns=columns, dtype=object)


def export_csv(matrix: Optional[Matrix], documents: Sequence[Document]) -> Optional[str]:
    """
    Export the table for *documents* (already transposed and sorted).

    Returns None when there is nothing to export.
    """
    if matrix is None or not documents:
        return None

    df = to_dataframe(matrix, documents)
    csv_buf = io.StringIO()
    df.to_csv(csv_buf, index=False, quoting=csv.QUOTE_ALL, lineterminator=LINE_TERMINATOR)
    content = csv_buf.getvalue()
    # Rows are joined, not terminated
    if content.endswith(LINE_TERMINATOR):
        content = content[:-len(LINE_TERMINATOR)]
    log.info("Exported %d papers x %d dimensions", len(documents), len(matrix))
    return content


# ============================================================
# DOWNLOAD HELPER (Base64 workaround for reliable downloads)
# ============================================================

def create_download_link(data, filename=EXPORT_FILENAME, mime_type=EXPORT_MIME, link_text="⬇️ Download CSV"):
    """
    Create an HTML download link using base64 encoding.

    Args:
        data: bytes or str data to download
        filename: name for the downloaded file
        mime_type: MIME type of the file
        link_text: text to display on the link

    Returns:
        HTML string with download link
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    b64 = base64.b64encode(data).decode()
    return f'<a href="data:{mime_type};charset=utf-8;base64,{b64}" download="{filename}" class="download-link">{link_text}</a>'
