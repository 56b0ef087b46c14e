"""
Job Recommender - rule-based job matching.

Scores job postings against an applicant profile by category, location,
experience and skills, and ranks the best matches.
"""

from .loader import load_jobs, load_profile
from .profile import build_user_profile
from .scorer import (
    JobScorer,
    RecommendationScore,
    RecommendationSummary,
    calculate_job_score,
    get_job_recommendations,
    get_match_color,
    get_match_label,
    summarize_recommendations,
)

__all__ = [
    "load_jobs",
    "load_profile",
    "build_user_profile",
    "JobScorer",
    "RecommendationScore",
    "RecommendationSummary",
    "calculate_job_score",
    "get_job_recommendations",
    "get_match_color",
    "get_match_label",
    "summarize_recommendations",
]
