import base64

from neurolit.export import create_download_link, export_csv, normalize_insight
from neurolit.model import Document, Matrix
from neurolit.table import build_table


def test_escaping_and_hyphen_substitution():
    matrix = Matrix.from_records([{"name": "Notes", "insights": {"a": 'He said "hi" - ok'}}])
    docs = [Document("a", "Title", "ref.pdf")]
    assert export_csv(matrix, docs) == (
        '"Paper Title","Authors/Year (Ref)","Notes"\n'
        '"Title","ref.pdf","He said ""hi"" • ok"'
    )


def test_normalize_removes_emphasis_and_all_hyphens():
    assert normalize_insight("- **n=500** follow-up") == "• n=500 follow•up"
    assert normalize_insight("") == ""


def test_titles_are_escaped_but_not_normalized():
    matrix = Matrix.from_records([{"name": "Notes", "insights": {"a": ""}}])
    docs = [Document("a", 'A "quoted" well-known title', "x-y.pdf")]
    lines = export_csv(matrix, docs).split("\n")
    assert lines[1] == '"A ""quoted"" well-known title","x-y.pdf",""'


def test_export_uses_given_order_and_all_dimensions(matrix, documents):
    table = build_table(matrix, documents)
    content = export_csv(matrix, table.documents)
    lines = content.split("\n")

    assert lines[0] == '"Paper Title","Authors/Year (Ref)","Study Design","Model/Architecture/Tools Used","Key Findings"'
    assert lines[1] == '"Gamma study","gamma.pdf","Cross•sectional","Human data",""'
    assert lines[2] == '"Alpha study","alpha.pdf","RCT","mice","• p<0.001"'
    assert lines[3] == '"Beta study","beta.pdf","Cohort","MRI","none"'
    assert len(lines) == 4


def test_multiline_insight_stays_in_one_field():
    matrix = Matrix.from_records([{"name": "Notes", "insights": {"a": "- one\n- two"}}])
    content = export_csv(matrix, [Document("a", "T", "r")])
    assert content.endswith('"T","r","• one\n• two"')


def test_export_empty_document_list_is_noop(matrix):
    assert export_csv(matrix, []) is None
    assert export_csv(None, [Document("a", "T")]) is None


def test_export_does_not_mutate_matrix(matrix, documents):
    records = matrix.to_records()
    export_csv(matrix, documents)
    assert matrix.to_records() == records


def test_create_download_link():
    link = create_download_link("a,b")
    encoded = base64.b64encode(b"a,b").decode()
    assert f"base64,{encoded}" in link
    assert 'download="neurolit_comparison.csv"' in link
    assert "data:text/csv" in link
