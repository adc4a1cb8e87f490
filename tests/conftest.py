import pytest

from neurolit.model import Document, Matrix
from neurolit.store import MatrixStore


@pytest.fixture()
def documents():
    return [
        Document("a", "Alpha study", "alpha.pdf"),
        Document("b", "Beta study", "beta.pdf"),
        Document("c", "Gamma study", "gamma.pdf"),
        Document("d", "Delta study", "delta.pdf"),
    ]


@pytest.fixture()
def matrix():
    return Matrix.from_records([
        {"name": "Study Design", "insights": {"a": "RCT", "b": "Cohort", "c": "Cross-sectional"}},
        {"name": "Model/Architecture/Tools Used", "insights": {"a": "mice", "b": "MRI", "c": "Human data", "d": "ignored"}},
        {"name": "Key Findings", "insights": {"a": "- **p<0.001**", "b": "none"}},
    ])


@pytest.fixture()
def store(matrix):
    return MatrixStore(matrix)
