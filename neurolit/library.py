"""
NeuroLit Matrix - paper library import

Loads analyzed papers (and optionally a saved comparison) from JSON, and
provides a small built-in sample library.

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

import json
from typing import List, Optional, Tuple

from neurolit.errors import NeuroLitError
from neurolit.model import Document, Matrix


def load_library(json_str: str) -> Tuple[List[Document], Optional[Matrix]]:
    """
    Import papers from a JSON string.

    Expected shape: ``{"documents": [...], "comparison": [...]}``; a bare
    list is read as documents only.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise NeuroLitError(f"Library file is not valid JSON: {e}") from e

    if isinstance(data, list):
        data = {'documents': data}
    try:
        documents = [Document.from_dict(d) for d in data.get('documents', [])]
        comparison = data.get('comparison')
        matrix = Matrix.from_records(comparison) if comparison else None
    except (KeyError, TypeError, AttributeError) as e:
        raise NeuroLitError(f"Library file has an unexpected shape: {e!r}") from e
    return documents, matrix


SAMPLE_LIBRARY = {
    'documents': [
        {
            'id': 'p1',
            'title': 'Depressive symptoms and incident dementia in older adults',
            'fileName': 'cohort_2019.pdf',
            'summary': 'Population cohort following depressive symptoms and dementia onset.',
            'majorFindings': ['Late-life depression doubled dementia risk'],
            'methodology': 'Prospective cohort with 10-year follow-up',
            'researchGaps': ['Limited ethnic diversity'],
            'keywords': ['depression', 'dementia', 'cohort'],
        },
        {
            'id': 'p2',
            'title': 'Hippocampal atrophy in late-life depression',
            'fileName': 'mri_2021.pdf',
            'summary': 'Structural MRI study of hippocampal volume.',
            'majorFindings': ['Reduced hippocampal volume in depressed group'],
            'methodology': 'Cross-sectional MRI volumetry',
            'researchGaps': ['No longitudinal imaging'],
            'keywords': ['MRI', 'hippocampus'],
        },
        {
            'id': 'p3',
            'title': 'Chronic stress accelerates amyloid deposition in mice',
            'fileName': 'mouse_2020.pdf',
            'summary': 'Transgenic mouse model of stress and amyloid pathology.',
            'majorFindings': ['Stress increased plaque load'],
            'methodology': 'Randomized animal experiment',
            'researchGaps': ['Translation to humans unclear'],
            'keywords': ['amyloid', 'stress', 'APP/PS1'],
        },
    ],
    'comparison': [
        {
            'criteria': 'Study Design',
            'paperInsights': {
                'p1': '- Prospective **longitudinal** cohort',
                'p2': '- Cross-sectional case-control',
                'p3': '- Randomized animal experiment',
            },
        },
        {
            'criteria': 'Model/Architecture/Tools Used',
            'paperInsights': {
                'p1': '- Human Clinical Data\n- **Cox Proportional Hazards**',
                'p2': '- **MRI** volumetry\n- MMSE',
                'p3': '- Transgenic Mice (**APP/PS1**)',
            },
        },
        {
            'criteria': 'Sample Cohorts & Demographics',
            'paperInsights': {
                'p1': '- **n=2,160**, age 65+',
                'p2': '- **n=84**, age 60-85',
                'p3': '- **n=40** mice',
            },
        },
        {
            'criteria': 'Key Findings/Outcomes',
            'paperInsights': {
                'p1': '- Hazard ratio **2.0** for dementia (**p<0.001**)',
                'p2': '- Smaller left hippocampus in depressed group',
                'p3': '- Plaque load increased after chronic stress',
            },
        },
        {
            'criteria': 'Limitations/Gaps',
            'paperInsights': {
                'p1': 'Limited ethnic diversity',
                'p2': 'No follow-up imaging',
                'p3': 'Translation to humans unclear',
            },
        },
    ],
}


def sample_library() -> Tuple[List[Document], Optional[Matrix]]:
    return load_library(json.dumps(SAMPLE_LIBRARY))
