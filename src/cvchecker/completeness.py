"""
CV completeness meter shown while the CV is being built.

Unlike the quality analyzer this only checks whether each part of the CV
has been filled in at all.
"""

from typing import Optional, Union

from shared.models import CVData


def calculate_cv_completeness(cv: Union[CVData, dict, None]) -> int:
    """Return a 0-100 completeness percentage. ``None`` counts as an empty CV."""
    if cv is None:
        return 0
    if not isinstance(cv, CVData):
        cv = CVData.model_validate(cv)

    score = 0
    info = cv.personal_info

    # Personal info (max 30)
    if info.full_name and info.email:
        score += 10
    if info.phone and (info.address or info.city):
        score += 10
    if len(info.summary) > 20:
        score += 5
    if info.photo or info.linked_in or info.portfolio:
        score += 5

    # Work experience matters most to recruiters (max 25)
    if cv.work_experience:
        score += 25

    # Education (max 20)
    if cv.education:
        score += 20

    # Skills (max 15)
    if cv.skills:
        score += 10
        if len(cv.skills) >= 3:
            score += 5

    # Additional info (max 10)
    if cv.certifications:
        score += 5
    if cv.languages:
        score += 5

    return min(score, 100)


def get_completeness_status(score: Optional[int]) -> tuple[str, str]:
    """Return ``(label, css colour class)`` for a completeness percentage."""
    score = score or 0
    if score >= 80:
        return "Sangat Lengkap", "text-green-600"
    if score >= 60:
        return "Cukup Lengkap", "text-blue-600"
    if score >= 40:
        return "Perlu Dilengkapi", "text-yellow-600"
    return "Belum Lengkap", "text-red-600"
