"""
NeuroLit Matrix - Comparative Analysis Matrix for Research Papers
Version: 1.0

Run with:  streamlit run neurolit/app.py

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

import html

import streamlit as st

from neurolit.comparison import ComparisonRunner, build_comparison_prompt
from neurolit.config import EXPORT_FILENAME, EXPORT_MIME, PAGE_ICON, PAGE_TITLE
from neurolit.editing import CellEditor, render_html
from neurolit.errors import NeuroLitError
from neurolit.export import create_download_link, export_csv
from neurolit.library import load_library, sample_library
from neurolit.logging_helper import get_logger
from neurolit.store import MatrixStore
from neurolit.table import build_table

log = get_logger(__name__)

# Custom CSS for better styling
CUSTOM_CSS = """
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #4338CA;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1rem;
        color: #666;
        margin-bottom: 2rem;
    }
    .paper-title {
        font-weight: bold;
        color: #1E293B;
    }
    .paper-ref {
        font-size: 0.75rem;
        color: #94A3B8;
        font-family: monospace;
    }
    .insight-em {
        color: #4338CA;
        background-color: #EEF2FF;
        padding: 0 4px;
        border-radius: 4px;
    }
    .insight-list {
        margin: 0;
        padding-left: 1.2rem;
    }
    .insight-empty {
        color: #CBD5E1;
        font-style: italic;
    }
</style>
"""


# ============================================================
# SESSION STATE INITIALIZATION
# ============================================================

def init_session_state():
    """Initialize session state variables"""
    if 'store' not in st.session_state:
        st.session_state.store = MatrixStore()
    if 'documents' not in st.session_state:
        st.session_state.documents = []
    if 'selected_ids' not in st.session_state:
        st.session_state.selected_ids = set()
    if 'editors' not in st.session_state:
        st.session_state.editors = {}  # "doc_id::dimension" -> CellEditor
    if 'comparison_error' not in st.session_state:
        st.session_state.comparison_error = None
    if 'is_comparing' not in st.session_state:
        st.session_state.is_comparing = False
    if 'export_data_content' not in st.session_state:
        st.session_state.export_data_content = None


def install_library(documents, matrix):
    """Replace papers and comparison, dropping per-cell editor state"""
    st.session_state.documents = documents
    st.session_state.selected_ids = {d.id for d in documents}
    st.session_state.store.replace(matrix)
    st.session_state.editors = {}
    st.session_state.export_data_content = None


def get_editor(doc_id, dimension_name) -> CellEditor:
    key = f"{doc_id}::{dimension_name}"
    editors = st.session_state.editors
    if key not in editors:
        editors[key] = CellEditor(st.session_state.store, doc_id, dimension_name)
    return editors[key]


# ============================================================
# SIDEBAR
# ============================================================

def render_sidebar():
    """Render sidebar with library controls"""
    st.sidebar.markdown(f"## {PAGE_ICON} NeuroLit Matrix")
    st.sidebar.markdown("*Comparative analysis of research papers*")
    st.sidebar.divider()

    st.sidebar.markdown("### 📁 Paper Library")

    library_file = st.sidebar.file_uploader(
        "Import analyzed papers (.json)",
        type=['json'],
        help="A list of papers, or {\"documents\": [...], \"comparison\": [...]}"
    )

    if library_file is not None:
        # Only process if this is a new file (check by name)
        file_key = f"loaded_file_{library_file.name}"
        if file_key not in st.session_state:
            try:
                documents, matrix = load_library(library_file.read().decode('utf-8'))
                install_library(documents, matrix)
                st.session_state[file_key] = True  # Mark as loaded
                st.sidebar.success(f"Loaded: {len(documents)} papers")
            except (NeuroLitError, UnicodeDecodeError) as e:
                log.warning("Library import failed: %s", e)
                st.sidebar.error(f"Error loading file: {e}")

    if st.sidebar.button("📂 Load Sample Library"):
        documents, matrix = sample_library()
        install_library(documents, matrix)
        # Clear any previous file loaded markers
        keys_to_remove = [k for k in st.session_state.keys() if k.startswith('loaded_file_')]
        for k in keys_to_remove:
            del st.session_state[k]
        st.sidebar.success("Sample library loaded!")
        st.rerun()

    st.sidebar.divider()
    st.sidebar.markdown("### Library Stats")
    st.sidebar.metric("Papers analyzed", len(st.session_state.documents))
    matrix = st.session_state.store.matrix
    st.sidebar.metric("Comparison criteria", len(matrix) if matrix is not None else 0)


# ============================================================
# COMPARISON RUN
# ============================================================

def render_comparison_controls():
    """Paper selection and comparison request/response"""
    documents = st.session_state.documents
    store = st.session_state.store

    st.markdown("#### Available Papers")
    cols = st.columns(3)
    for idx, doc in enumerate(documents):
        with cols[idx % 3]:
            checked = st.checkbox(doc.title, value=doc.id in st.session_state.selected_ids, key=f"select_{doc.id}")
            if checked:
                st.session_state.selected_ids.add(doc.id)
            else:
                st.session_state.selected_ids.discard(doc.id)

    selected = [d for d in documents if d.id in st.session_state.selected_ids]
    if len(selected) < 2:
        st.warning("Select at least 2 papers")
        return

    with st.expander("📝 Comparison request", expanded=store.matrix is None):
        st.code(build_comparison_prompt(selected), language="markdown")
        response_text = st.text_area(
            "Paste the analysis service response (JSON):",
            key="comparison_response",
            height=160
        )

        label = "Update Comparison" if store.matrix is not None else "Run Comparison"
        if st.button(label, type="primary", disabled=st.session_state.is_comparing):
            runner = ComparisonRunner(store, lambda docs: response_text)
            st.session_state.is_comparing = True
            try:
                runner.run(selected)
                st.session_state.editors = {}
                st.session_state.export_data_content = None
                st.session_state.comparison_error = None
            except NeuroLitError as e:
                log.warning("Comparison run failed: %s", e)
                st.session_state.comparison_error = str(e)
            finally:
                st.session_state.is_comparing = False
            st.rerun()

    if st.session_state.comparison_error:
        st.error(st.session_state.comparison_error)


# ============================================================
# MATRIX TABLE
# ============================================================

def render_cell(doc_id, dimension_name):
    """Render one editable insight cell"""
    editor = get_editor(doc_id, dimension_name)
    key = f"cell_{doc_id}::{dimension_name}"

    if editor.is_editing:
        st.text_area("Edit insight", value=editor.text, key=key, label_visibility="collapsed", height=140)
        save_col, cancel_col = st.columns(2)
        with save_col:
            if st.button("💾", key=f"save_{key}", help="Save"):
                editor.set_draft(st.session_state[key])
                editor.commit()
                st.session_state.export_data_content = None
                st.rerun()
        with cancel_col:
            if st.button("✖", key=f"cancel_{key}", help="Cancel"):
                editor.cancel()
                st.rerun()
        return

    editor.sync()
    blocks = editor.render()
    if blocks:
        st.markdown(render_html(blocks), unsafe_allow_html=True)
    else:
        st.markdown('<span class="insight-empty">Click ✏️ to add notes...</span>', unsafe_allow_html=True)
    if st.button("✏️", key=f"edit_{key}", help="Edit"):
        editor.begin()
        st.session_state.pop(key, None)  # stale draft from a previous edit
        st.rerun()


def render_matrix_tab():
    """Render the transposed comparison table"""
    store = st.session_state.store
    table = build_table(store.matrix, st.session_state.documents)

    if store.matrix is None:
        st.info("Run a comparison to build the matrix.")
        return

    # Control bar
    col1, col2, col3 = st.columns([4, 1, 1])
    with col1:
        if table.sort_dimension:
            st.caption(f"Papers sorted by: {table.sort_dimension}")
    with col2:
        if st.button("↶ Undo", use_container_width=True, disabled=not store.can_undo,
                     help=f"Undo last edit ({len(store.undo_stack)} steps available)"):
            if store.undo():
                st.session_state.export_data_content = None
                st.rerun()
    with col3:
        if st.button("↷ Redo", use_container_width=True, disabled=not store.can_redo,
                     help=f"Redo ({len(store.redo_stack)} steps available)"):
            if store.redo():
                st.session_state.export_data_content = None
                st.rerun()

    widths = [2] + [3] * len(table.dimensions)
    header = st.columns(widths)
    header[0].markdown("**Paper / Source**")
    for idx, dimension in enumerate(table.dimensions, start=1):
        header[idx].markdown(f"**{dimension.name}**")

    for doc in table.documents:
        st.divider()
        row = st.columns(widths)
        with row[0]:
            st.markdown(
                f'<div class="paper-title">{html.escape(doc.title)}</div><div class="paper-ref">{html.escape(doc.reference)}</div>',
                unsafe_allow_html=True
            )
        for idx, dimension in enumerate(table.dimensions, start=1):
            with row[idx]:
                render_cell(doc.id, dimension.name)


# ============================================================
# EXPORT
# ============================================================

def render_export_tab():
    """Render CSV export"""
    store = st.session_state.store
    table = build_table(store.matrix, st.session_state.documents)

    st.markdown("### 📄 Data Export")
    if table.is_empty:
        st.info("Nothing to export yet.")
        return

    def generate_data_file():
        st.session_state.export_data_content = export_csv(store.matrix, table.documents)

    st.button("📊 Generate CSV", on_click=generate_data_file, use_container_width=True)

    if st.session_state.get('export_data_content') is not None:
        st.success("✅ CSV ready!")

        @st.fragment
        def data_download_fragment():
            st.download_button(
                "⬇️ Download CSV",
                st.session_state.export_data_content,
                file_name=EXPORT_FILENAME,
                mime=EXPORT_MIME,
                use_container_width=True
            )
        data_download_fragment()
        st.caption("Download button not working? Use this link:")
        st.markdown(create_download_link(st.session_state.export_data_content), unsafe_allow_html=True)


# ============================================================
# MAIN APPLICATION
# ============================================================

def render_main_content():
    """Render main content area"""
    st.markdown('<p class="main-header">Comparative Analysis</p>', unsafe_allow_html=True)
    st.markdown('<p class="sub-header">Select papers to generate a side-by-side comparison matrix.</p>',
                unsafe_allow_html=True)

    if len(st.session_state.documents) == 0:
        st.info("👈 Import analyzed papers or load the sample library to get started.")
        return

    render_comparison_controls()

    tab1, tab2 = st.tabs(["📊 Matrix View", "📤 Export"])
    with tab1:
        render_matrix_tab()
    with tab2:
        render_export_tab()


def main():
    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon=PAGE_ICON,
        layout="wide",
        initial_sidebar_state="expanded"
    )
    st.markdown(CUSTOM_CSS, unsafe_allow_html=True)
    init_session_state()
    render_sidebar()
    render_main_content()


if __name__ == "__main__":
    main()
