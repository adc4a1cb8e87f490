"""
NeuroLit Matrix - configuration constants

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

# Page configuration
PAGE_TITLE = "NeuroLit Matrix"
PAGE_ICON = "🧠"

# CSV export
EXPORT_FILENAME = "neurolit_comparison.csv"
EXPORT_MIME = "text/csv"
CSV_HEADERS = ("Paper Title", "Authors/Year (Ref)")
HYPHEN_REPLACEMENT = "•"

# Dimension name fragments used to pick the grouping column
SORT_TERMS = ("model", "architecture")

# Undo/Redo history
MAX_UNDO_STEPS = 20

# Minimum number of papers for a comparison run
MIN_COMPARISON_DOCUMENTS = 2

DEFAULT_DIMENSIONS = (
    "Study Design (e.g., Cross-sectional, Longitudinal, RCT)",
    "Model/Architecture/Tools Used (e.g., Human Clinical Data, Transgenic Mice, specific ML models, MRI, MMSE)",
    "Sample Cohorts & Demographics (e.g., Sample size, Age range, Gender distribution)",
    "Major Experimental Methodology (The core procedure used)",
    "Key Findings/Outcomes",
    "Limitations/Gaps",
    "Proposed Mechanisms/Theories",
)

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
