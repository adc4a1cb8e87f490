import json

import pytest

from neurolit.comparison import ComparisonRunner, build_comparison_prompt, parse_comparison_response
from neurolit.errors import ComparisonError
from neurolit.model import Document

RECORDS = [
    {"criteria": "Study Design", "paperInsights": {"a": "RCT", "b": "Cohort"}},
    {"criteria": "Model/Architecture/Tools Used", "paperInsights": {"a": "mice", "b": "MRI"}},
]


def test_prompt_lists_papers_and_criteria():
    docs = [
        Document("a", "Alpha", major_findings=("f1", "f2"), methodology="RCT", research_gaps=("g",)),
        Document("b", "Beta"),
    ]
    prompt = build_comparison_prompt(docs, ["Study Design", "Key Findings"])
    assert "Paper ID: a" in prompt
    assert "Findings: f1; f2" in prompt
    assert "1. Study Design\n2. Key Findings" in prompt
    assert '"paperInsights"' in prompt


def test_parse_plain_json():
    matrix = parse_comparison_response(json.dumps(RECORDS))
    assert matrix.dimension_names == ["Study Design", "Model/Architecture/Tools Used"]
    assert matrix.membership_source == "Study Design"


def test_parse_fenced_json():
    text = "Here you go:\n```json\n" + json.dumps(RECORDS) + "\n```"
    assert parse_comparison_response(text).find("Study Design").insight("b") == "Cohort"


@pytest.mark.parametrize("text", ["", "   ", "not json", '{"criteria": "x"}'])
def test_parse_rejects_bad_responses(text):
    with pytest.raises(ComparisonError):
        parse_comparison_response(text)


def test_run_replaces_store(store, documents):
    runner = ComparisonRunner(store, lambda docs: RECORDS)
    matrix = runner.run(documents[:2])
    assert store.matrix is matrix
    assert store.active_document_ids() == {"a", "b"}
    assert not runner.in_flight


def test_run_accepts_response_text(store, documents):
    runner = ComparisonRunner(store, lambda docs: json.dumps(RECORDS))
    runner.run(documents[:2])
    assert store.insight("a", "Model/Architecture/Tools Used") == "mice"


def test_run_passes_selected_documents(store, documents):
    seen = []

    def comparer(docs):
        seen.extend(docs)
        return RECORDS

    ComparisonRunner(store, comparer).run(documents[:3])
    assert seen == documents[:3]


def test_failed_run_leaves_store_untouched(store, documents):
    store.update_insight("a", "Study Design", "edited")
    before = store.matrix

    def comparer(docs):
        raise RuntimeError("Region not supported")

    runner = ComparisonRunner(store, comparer)
    with pytest.raises(ComparisonError, match="Region not supported"):
        runner.run(documents)
    assert store.matrix is before
    assert store.can_undo
    assert not runner.in_flight


def test_unparsable_response_leaves_store_untouched(store, documents):
    before = store.matrix
    with pytest.raises(ComparisonError):
        ComparisonRunner(store, lambda docs: "oops").run(documents)
    assert store.matrix is before


def test_run_needs_two_documents(store, documents):
    with pytest.raises(ComparisonError):
        ComparisonRunner(store, lambda docs: RECORDS).run(documents[:1])


def test_single_flight(store, documents):
    runner = ComparisonRunner(store, lambda docs: RECORDS)
    runner.in_flight = True
    with pytest.raises(ComparisonError, match="already running"):
        runner.run(documents)


@pytest.mark.parametrize("text", ["[1, 2]", '[{"foo": 1}]', '[{"criteria": "x", "paperInsights": [1]}]'])
def test_parse_rejects_wrongly_shaped_records(text):
    with pytest.raises(ComparisonError, match="unexpected shape"):
        parse_comparison_response(text)


def test_wrongly_shaped_records_leave_store_untouched(store, documents):
    before = store.matrix
    with pytest.raises(ComparisonError):
        ComparisonRunner(store, lambda docs: [{"foo": 1}]).run(documents)
    assert store.matrix is before
