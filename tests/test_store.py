from neurolit.model import Matrix
from neurolit.store import MatrixStore


def test_active_ids_come_from_first_dimension(store):
    assert store.active_document_ids() == {"a", "b", "c"}


def test_active_ids_ignore_later_dimensions(matrix):
    records = matrix.to_records()
    records[2]["insights"]["zzz"] = "extra"
    records[1]["insights"]["yyy"] = "extra"
    assert MatrixStore(Matrix.from_records(records)).active_document_ids() == {"a", "b", "c"}


def test_active_ids_empty_store():
    assert MatrixStore().active_document_ids() == set()
    assert MatrixStore(Matrix()).active_document_ids() == set()


def test_update_changes_exactly_one_entry(store, matrix):
    assert store.update_insight("b", "Key Findings", "edited")

    after = store.matrix.to_records()
    before = matrix.to_records()
    assert after[2]["insights"]["b"] == "edited"
    after[2]["insights"]["b"] = before[2]["insights"]["b"]
    assert after == before


def test_update_is_copy_on_write(store, matrix):
    store.update_insight("a", "Study Design", "changed")
    assert store.matrix is not matrix
    assert matrix.find("Study Design").insight("a") == "RCT"


def test_update_adds_missing_entry(store):
    store.update_insight("d", "Key Findings", "late")
    assert store.insight("d", "Key Findings") == "late"


def test_update_unknown_dimension_is_noop(store, matrix):
    assert not store.update_insight("a", "Missing", "x")
    assert store.matrix is matrix
    assert not store.can_undo


def test_update_without_matrix_is_noop():
    store = MatrixStore()
    assert not store.update_insight("a", "Study Design", "x")
    assert store.matrix is None


def test_replace_installs_new_value_and_clears_history(store):
    store.update_insight("a", "Study Design", "x")
    new = Matrix.from_records([{"name": "Only", "insights": {"z": "1"}}])
    store.replace(new)
    assert store.matrix is new
    assert store.active_document_ids() == {"z"}
    assert not store.can_undo
    assert not store.can_redo


def test_undo_redo(store, matrix):
    store.update_insight("a", "Study Design", "x")
    edited = store.matrix

    assert store.undo()
    assert store.matrix is matrix
    assert store.redo()
    assert store.matrix is edited
    assert not store.redo()


def test_new_edit_clears_redo(store):
    store.update_insight("a", "Study Design", "x")
    store.undo()
    store.update_insight("a", "Study Design", "y")
    assert not store.can_redo
    assert store.insight("a", "Study Design") == "y"


def test_undo_stack_is_bounded(matrix):
    store = MatrixStore(matrix, max_undo_steps=3)
    for i in range(5):
        store.update_insight("a", "Study Design", str(i))
    assert len(store.undo_stack) == 3
    while store.undo():
        pass
    assert store.insight("a", "Study Design") == "1"


def test_unchanged_update_adds_no_history(store, matrix):
    assert store.update_insight("a", "Study Design", "RCT")
    assert store.matrix is not matrix
    assert store.matrix == matrix
    assert not store.can_undo

    store.update_insight("a", "Study Design", "x")
    store.update_insight("a", "Study Design", "x")
    assert len(store.undo_stack) == 1
    assert store.undo()
    assert store.insight("a", "Study Design") == "RCT"
