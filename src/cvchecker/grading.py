"""
Score brackets for CV quality: letter grade, section status, overall message
and the colour/label shown next to the score.
"""

from shared.models import Grade, SectionStatus


# (lower bound, value) pairs, highest bound first
GRADE_BRACKETS = [
    (85, Grade.A),
    (70, Grade.B),
    (55, Grade.C),
    (40, Grade.D),
]

STATUS_BRACKETS = [
    (70, SectionStatus.EXCELLENT),
    (50, SectionStatus.GOOD),
    (30, SectionStatus.FAIR),
]

OVERALL_MESSAGES = [
    (
        85,
        "Wow! CV Anda sangat profesional dan lengkap. "
        "Anda siap untuk apply ke posisi yang Anda inginkan! 🎉",
    ),
    (
        70,
        "CV Anda sudah baik! Terapkan beberapa saran di bawah "
        "untuk membuat CV lebih menawan. 👍",
    ),
    (
        55,
        "CV Anda cukup baik, tapi masih bisa ditingkatkan. "
        "Ikuti saran-saran di bawah untuk hasil optimal. 💪",
    ),
    (
        40,
        "Ada beberapa bagian yang perlu diperbaiki. "
        "Lengkapi semua section dan ikuti saran-saran kami. 📝",
    ),
]
FALLBACK_MESSAGE = (
    "CV Anda masih memerlukan banyak perbaikan. "
    "Mulai dengan mengisi section yang masih kosong. 🚀"
)

SCORE_COLORS = [
    (85, "#22c55e"),  # green-500
    (70, "#3b82f6"),  # blue-500
    (55, "#f59e0b"),  # amber-500
    (40, "#ef4444"),  # red-500
]
FALLBACK_COLOR = "#dc2626"  # red-600

SCORE_LABELS = [
    (85, "Excellent"),
    (70, "Good"),
    (55, "Fair"),
    (40, "Needs Improvement"),
]
FALLBACK_LABEL = "Poor"


def _bracket(score: float, brackets, fallback):
    for lower, value in brackets:
        if score >= lower:
            return value
    return fallback


def get_grade(score: float) -> Grade:
    """Letter grade for an overall 0-100 score."""
    return _bracket(score, GRADE_BRACKETS, Grade.F)


def get_status(score: float) -> SectionStatus:
    """Status bucket for a single section score."""
    return _bracket(score, STATUS_BRACKETS, SectionStatus.NEEDS_IMPROVEMENT)


def get_overall_message(score: float) -> str:
    return _bracket(score, OVERALL_MESSAGES, FALLBACK_MESSAGE)


def get_score_color(score: float) -> str:
    """Hex colour for a CV score badge."""
    return _bracket(score, SCORE_COLORS, FALLBACK_COLOR)


def get_score_label(score: float) -> str:
    return _bracket(score, SCORE_LABELS, FALLBACK_LABEL)
