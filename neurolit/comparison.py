"""
NeuroLit Matrix - comparison runs

Builds the comparison request for the external analysis service, parses
its JSON answer into a Matrix and installs the result in the store. The
service call itself is any callable ("comparer") taking the documents and
returning matrix records or the raw response text.

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

import json
import re
from typing import Callable, List, Sequence, Union

from neurolit.config import DEFAULT_DIMENSIONS, MIN_COMPARISON_DOCUMENTS
from neurolit.errors import ComparisonError
from neurolit.logging_helper import get_logger
from neurolit.model import Document, Matrix
from neurolit.store import MatrixStore

log = get_logger(__name__)

Comparer = Callable[[Sequence[Document]], Union[str, List[dict]]]

CODE_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


# ============================================================
# REQUEST / RESPONSE
# ============================================================

def build_paper_context(documents: Sequence[Document]) -> str:
    """Describe each paper for the comparison request"""
    blocks = []
    for doc in documents:
        blocks.append(
            f"Paper ID: {doc.id}\n"
            f"Title: {doc.title}\n"
            f"Findings: {'; '.join(doc.major_findings)}\n"
            f"Methodology: {doc.methodology}\n"
            f"Gaps: {'; '.join(doc.research_gaps)}"
        )
    return "\n\n".join(blocks)


def build_comparison_prompt(documents: Sequence[Document],
                            dimensions: Sequence[str] = DEFAULT_DIMENSIONS) -> str:
    criteria = "\n".join(f"{idx}. {name}" for idx, name in enumerate(dimensions, start=1))
    return f"""{build_paper_context(documents)}

Compare the provided research papers (identified by Paper ID).
Create a detailed comparison matrix.

FORMATTING INSTRUCTIONS:
1. Wrap important statistical findings (p-values, sample sizes, hazard ratios) or specific model names in double asterisks, e.g. **n=500**, **p<0.001**.
2. Use bullet points (start lines with "- ") for lists of items within a single cell.

Compare on these criteria rows in this order:
{criteria}

RETURN JSON ONLY: an array of objects of the form
[{{"criteria": "Category Name", "paperInsights": {{"PAPER_ID": "- Insight"}}}}]
The keys of "paperInsights" must be the exact Paper IDs provided above.
"""


def parse_comparison_response(text: str) -> Matrix:
    """Decode the service answer (optionally wrapped in a code fence) into a Matrix"""
    if not text or not text.strip():
        raise ComparisonError("Empty response from comparison service")

    fenced = CODE_FENCE.search(text)
    payload = fenced.group(1) if fenced else text
    try:
        records = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ComparisonError(f"Comparison response is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise ComparisonError("Comparison response must be a JSON array of criteria")
    return records_to_matrix(records)


def records_to_matrix(records) -> Matrix:
    """Build a Matrix, reporting records of the wrong shape as ComparisonError"""
    try:
        return Matrix.from_records(records)
    except (KeyError, TypeError, AttributeError) as e:
        raise ComparisonError(f"Comparison response has an unexpected shape: {e!r}") from e


# ============================================================
# RUNNER
# ============================================================

class ComparisonRunner:
    """Runs one comparison at a time and installs the result in the store"""

    def __init__(self, store: MatrixStore, comparer: Comparer):
        self.store = store
        self.comparer = comparer
        self.in_flight = False

    def run(self, documents: Sequence[Document]) -> Matrix:
        if self.in_flight:
            raise ComparisonError("A comparison is already running")
        if len(documents) < MIN_COMPARISON_DOCUMENTS:
            raise ComparisonError(f"Select at least {MIN_COMPARISON_DOCUMENTS} papers to compare")

        self.in_flight = True
        try:
            log.info("Comparing %d papers", len(documents))
            try:
                response = self.comparer(documents)
            except ComparisonError:
                raise
            except Exception as e:
                log.error("Comparison request failed: %s", e)
                raise ComparisonError(f"Failed to generate comparison: {e}") from e

            if isinstance(response, str):
                matrix = parse_comparison_response(response)
            else:
                matrix = records_to_matrix(response)
        finally:
            self.in_flight = False

        self.store.replace(matrix)
        return matrix
