"""
CV Checker - rubric-based CV quality scoring.

Scores a CV across personal info, education, experience, skills and
certifications, and reports a grade with strengths and improvements.
"""

from .analyzer import CVFeedback, SectionFeedback, analyze_cv_quality
from .completeness import calculate_cv_completeness, get_completeness_status
from .drafts import CVDraftStore
from .grading import get_grade, get_score_color, get_score_label
from .loader import CVLoader, load_cv

__all__ = [
    "CVFeedback",
    "SectionFeedback",
    "analyze_cv_quality",
    "calculate_cv_completeness",
    "get_completeness_status",
    "CVDraftStore",
    "get_grade",
    "get_score_color",
    "get_score_label",
    "CVLoader",
    "load_cv",
]
