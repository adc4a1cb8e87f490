"""
NeuroLit Matrix - exceptions

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""


class NeuroLitError(Exception):
    """Base class for all NeuroLit errors"""


class ComparisonError(NeuroLitError):
    """A comparison run failed or returned an unusable response"""


class EditorStateError(NeuroLitError):
    """A cell editor operation was called in the wrong state"""
