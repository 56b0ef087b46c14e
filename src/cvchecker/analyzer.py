"""
CV quality analyzer.

Scores a CV across five weighted sections. Each section is a checklist of
additive checks; the section score is the capped sum of the points of the
checks that passed. The weighted section scores give the overall score,
from which the grade and overall message follow.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from loguru import logger

from shared.models import CVData, CVSection, Grade, SectionStatus
from shared.rules import DEFAULT_RULES, SOFT, TECHNICAL, RuleBook
from shared.utils import round_half_up

from .grading import get_grade, get_overall_message, get_status


# Feedback line markers
PASSED = "✓"
PARTIAL = "~"
MISSING = "⚠"
INFO = "ℹ"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MAX_SECTION_SCORE = 100
MAX_STRENGTHS = 5
STRENGTHS_PER_SECTION = 2
MAX_IMPROVEMENTS = 4


@dataclass
class Check:
    """
    One rubric item.

    ``feedback`` is recorded when the check passes, ``suggestion`` when it
    fails. ``advice`` is a suggestion recorded even though the check passed,
    for partial-credit tiers.
    """

    passed: bool
    points: int
    feedback: Optional[str] = None
    suggestion: Optional[str] = None
    advice: Optional[str] = None


@dataclass
class SectionFeedback:
    """Score and commentary for one CV section."""

    section: CVSection
    score: int
    status: SectionStatus
    feedback: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "section": self.section.value,
            "score": self.score,
            "status": self.status.value,
            "feedback": list(self.feedback),
            "suggestions": list(self.suggestions),
        }


@dataclass
class CVFeedback:
    """Overall CV quality report."""

    score: int
    grade: Grade
    strengths: list[str]
    improvements: list[str]
    sections: list[SectionFeedback]
    overall_message: str

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "grade": self.grade.value,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "sections": [s.to_dict() for s in self.sections],
            "overallMessage": self.overall_message,
        }


def first_passing(*checks: Check) -> Check:
    """Pick the first passing tier; the last tier is the fallback."""
    for check in checks:
        if check.passed:
            return check
    return checks[-1]


def run_checklist(section: CVSection, checks: list[Check]) -> SectionFeedback:
    """Sum a checklist into a capped section score with ordered commentary."""
    score = 0
    feedback: list[str] = []
    suggestions: list[str] = []

    for check in checks:
        if check.passed:
            score += check.points
            if check.feedback:
                feedback.append(check.feedback)
            if check.advice:
                suggestions.append(check.advice)
        elif check.suggestion:
            suggestions.append(check.suggestion)

    score = min(score, MAX_SECTION_SCORE)
    return SectionFeedback(
        section=section,
        score=score,
        status=get_status(score),
        feedback=feedback,
        suggestions=suggestions,
    )


def _filled(value: str) -> bool:
    return len(value.strip()) > 0


def _all(items: list, predicate: Callable[[Any], bool]) -> bool:
    return sum(1 for item in items if predicate(item)) == len(items)


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


# -----------------------------------------------------------------------------
# Sections
# -----------------------------------------------------------------------------


def analyze_personal_info(cv: CVData, rules: RuleBook = DEFAULT_RULES) -> SectionFeedback:
    info = cv.personal_info
    return run_checklist(
        CVSection.PERSONAL,
        [
            Check(
                len(info.full_name.strip()) >= 3,
                15,
                feedback=f"{PASSED} Nama lengkap sudah diisi dengan baik",
                suggestion="Tambahkan nama lengkap yang jelas dan profesional",
            ),
            Check(
                bool(info.email) and is_valid_email(info.email),
                15,
                feedback=f"{PASSED} Email valid dan profesional",
                suggestion="Gunakan email profesional (contoh: nama@email.com)",
            ),
            Check(
                len(info.phone) >= 10,
                15,
                feedback=f"{PASSED} Nomor telepon tersedia",
                suggestion="Tambahkan nomor telepon yang valid",
            ),
            Check(
                _filled(info.address),
                10,
                feedback=f"{PASSED} Alamat sudah diisi",
                suggestion="Tambahkan kota/provinsi tempat tinggal Anda",
            ),
            Check(
                _filled(info.linked_in),
                15,
                feedback=f"{PASSED} LinkedIn profile tersedia",
                suggestion="Tambahkan profil LinkedIn untuk meningkatkan kredibilitas",
            ),
            Check(
                _filled(info.portfolio),
                15,
                feedback=f"{PASSED} Portfolio/website tersedia",
                suggestion="Jika memiliki portfolio, tambahkan linknya",
            ),
            Check(
                len(info.summary.strip()) > 50,
                15,
                feedback=f"{PASSED} Professional summary / bio tersedia",
                suggestion="Tulis summary singkat (50+ karakter) tentang diri Anda dan tujuan karir",
            ),
        ],
    )


def analyze_education(cv: CVData, rules: RuleBook = DEFAULT_RULES) -> SectionFeedback:
    education = cv.education

    # Mandatory section: nothing to score without entries
    if not education:
        return SectionFeedback(
            section=CVSection.EDUCATION,
            score=0,
            status=SectionStatus.NEEDS_IMPROVEMENT,
            feedback=[f"{MISSING} Belum ada riwayat pendidikan"],
            suggestions=["Tambahkan riwayat pendidikan Anda (Universitas, Sekolah)"],
        )

    described = sum(1 for e in education if _filled(e.description))
    return run_checklist(
        CVSection.EDUCATION,
        [
            Check(True, 30, feedback=f"{PASSED} {len(education)} institusi pendidikan tercatat"),
            Check(
                _all(education, lambda e: _filled(e.degree)),
                30,
                feedback=f"{PASSED} Semua pendidikan memiliki gelar/jenjang yang jelas",
                suggestion="Pastikan setiap pendidikan memiliki gelar/jenjang yang jelas (S1, D3, dll)",
            ),
            Check(
                _all(education, lambda e: _filled(e.field)),
                20,
                feedback=f"{PASSED} Bidang studi/jurusan sudah lengkap",
                suggestion="Tambahkan jurusan/bidang studi untuk setiap pendidikan",
            ),
            Check(
                _all(education, lambda e: bool(e.start_year) and bool(e.end_year)),
                20,
                feedback=f"{PASSED} Tahun masuk dan lulus sudah tercatat",
                suggestion="Pastikan tahun masuk dan lulus sudah lengkap",
            ),
            Check(
                described >= len(education) * 0.5,
                10,
                feedback=f"{PASSED} Beberapa pencapaian akademik tercatat",
                suggestion="Tambahkan deskripsi tentang pencapaian, GPA, atau aktivitas akademik",
            ),
        ],
    )


def analyze_experience(cv: CVData, rules: RuleBook = DEFAULT_RULES) -> SectionFeedback:
    jobs = cv.work_experience

    # Fresh graduates have no work history; that is acceptable
    if not jobs:
        return SectionFeedback(
            section=CVSection.EXPERIENCE,
            score=40,
            status=SectionStatus.FAIR,
            feedback=[f"{INFO} Belum ada riwayat pekerjaan (OK untuk fresh graduate)"],
            suggestions=["Jika sudah memiliki pengalaman kerja, tambahkan detail pengalaman Anda"],
        )

    detailed = sum(1 for j in jobs if len(j.description.strip()) > 50)
    return run_checklist(
        CVSection.EXPERIENCE,
        [
            Check(True, 20, feedback=f"{PASSED} {len(jobs)} pengalaman kerja tercatat"),
            Check(
                _all(jobs, lambda j: _filled(j.position)),
                15,
                feedback=f"{PASSED} Semua posisi pekerjaan jelas dan spesifik",
                suggestion="Gunakan nama posisi yang spesifik dan jelas",
            ),
            Check(
                _all(jobs, lambda j: _filled(j.company)),
                15,
                feedback=f"{PASSED} Nama perusahaan lengkap",
                suggestion="Pastikan nama perusahaan sudah diisi untuk setiap pengalaman",
            ),
            Check(
                _all(jobs, lambda j: bool(j.start_date) and bool(j.end_date)),
                15,
                feedback=f"{PASSED} Durasi pekerjaan sudah tercatat",
                suggestion="Lengkapi tanggal mulai dan berakhir untuk setiap pekerjaan",
            ),
            first_passing(
                Check(
                    detailed >= len(jobs) * 0.7,
                    20,
                    feedback=f"{PASSED} Pencapaian dan tanggung jawab dijelaskan dengan baik",
                ),
                Check(
                    detailed > 0,
                    10,
                    feedback=f"{PARTIAL} Beberapa pencapaian tercatat",
                    advice=(
                        "Tambahkan deskripsi achievement/responsibility untuk setiap posisi "
                        "(gunakan action verbs)"
                    ),
                ),
                Check(
                    False,
                    0,
                    suggestion="Jelaskan tanggung jawab dan pencapaian Anda di setiap posisi dengan detail",
                ),
            ),
            Check(
                any(j.is_current_job for j in jobs),
                5,
                feedback=f"{PASSED} Pekerjaan saat ini sudah ditandai",
            ),
        ],
    )


def analyze_skills(cv: CVData, rules: RuleBook = DEFAULT_RULES) -> SectionFeedback:
    skills = cv.skills

    # Mandatory section: nothing to score without entries
    if not skills:
        return SectionFeedback(
            section=CVSection.SKILLS,
            score=0,
            status=SectionStatus.NEEDS_IMPROVEMENT,
            feedback=[f"{MISSING} Belum ada skill yang tercatat"],
            suggestions=["Tambahkan minimal 5-10 skill yang Anda miliki"],
        )

    categories = [rules.skill_categories(s) for s in skills]
    has_technical = any(TECHNICAL in c for c in categories)
    has_soft = any(SOFT in c for c in categories)

    return run_checklist(
        CVSection.SKILLS,
        [
            Check(True, 30, feedback=f"{PASSED} {len(skills)} skill sudah tercatat"),
            first_passing(
                Check(len(skills) >= 5, 20, feedback=f"{PASSED} Jumlah skill cukup (5+)"),
                Check(
                    len(skills) >= 3,
                    10,
                    feedback=f"{PARTIAL} Tambahkan lebih banyak skill untuk lebih menarik",
                ),
                Check(
                    False,
                    0,
                    suggestion="Tambahkan lebih banyak skill (target: minimal 5-10 skill)",
                ),
            ),
            first_passing(
                Check(
                    has_technical and has_soft,
                    25,
                    feedback=f"{PASSED} Seimbang antara hard skills dan soft skills",
                ),
                Check(
                    has_technical or has_soft,
                    15,
                    advice="Tambahkan skill dari kategori yang belum ada untuk keseimbangan yang lebih baik",
                ),
                Check(True, 10),
            ),
            Check(
                _all(skills, lambda s: len(s.strip()) >= 3),
                15,
                feedback=f"{PASSED} Semua skill tertulis dengan jelas",
                suggestion="Pastikan setiap skill ditulis lengkap dan jelas",
            ),
        ],
    )


def analyze_certifications(cv: CVData, rules: RuleBook = DEFAULT_RULES) -> SectionFeedback:
    certifications = cv.certifications

    # Optional section: an empty list keeps a neutral baseline
    if not certifications:
        return SectionFeedback(
            section=CVSection.CERTIFICATIONS,
            score=50,
            status=SectionStatus.FAIR,
            feedback=[f"{INFO} Belum ada sertifikasi (opsional tapi bagus untuk ditambahkan)"],
            suggestions=[
                "Jika memiliki sertifikasi profesional, tambahkan untuk meningkatkan CV Anda"
            ],
        )

    return run_checklist(
        CVSection.CERTIFICATIONS,
        [
            Check(True, 60, feedback=f"{PASSED} {len(certifications)} sertifikasi tercatat"),
            Check(
                _all(certifications, lambda c: _filled(c.name)),
                15,
                feedback=f"{PASSED} Nama sertifikasi lengkap",
                suggestion="Pastikan nama sertifikasi sudah diisi dengan jelas",
            ),
            Check(
                _all(certifications, lambda c: _filled(c.issuer)),
                15,
                feedback=f"{PASSED} Penerbit sertifikasi dicatat",
                suggestion="Tambahkan penerbit/organisasi untuk setiap sertifikasi",
            ),
            Check(
                _all(certifications, lambda c: _filled(c.year)),
                10,
                feedback=f"{PASSED} Tahun sertifikasi tercatat",
            ),
        ],
    )


# Scoring order and weights (sum to 1.0)
SECTION_WEIGHTS: list[tuple[Callable[[CVData, RuleBook], SectionFeedback], float]] = [
    (analyze_personal_info, 0.2),
    (analyze_education, 0.2),
    (analyze_experience, 0.25),
    (analyze_skills, 0.2),
    (analyze_certifications, 0.15),
]


# -----------------------------------------------------------------------------
# Summary
# -----------------------------------------------------------------------------


def extract_strengths(sections: list[SectionFeedback]) -> list[str]:
    """Up to two passed checks per section, five overall."""
    strengths: list[str] = []
    for section in sections:
        positives = [
            line.replace(f"{PASSED} ", "", 1)
            for line in section.feedback
            if line.startswith(PASSED)
        ]
        strengths.extend(positives[:STRENGTHS_PER_SECTION])
    return strengths[:MAX_STRENGTHS]


def extract_improvements(sections: list[SectionFeedback]) -> list[str]:
    """The first suggestion of each section, four overall."""
    improvements = [s.suggestions[0] for s in sections if s.suggestions]
    return improvements[:MAX_IMPROVEMENTS]


def analyze_cv_quality(
    cv: Union[CVData, dict, None],
    rules: Optional[RuleBook] = None,
) -> CVFeedback:
    """
    Analyze a CV and produce a quality report.

    Args:
        cv: CV document, or a mapping in either the web client or backend shape
        rules: Rule tables for skill classification (built-in defaults if None)

    Returns:
        CVFeedback with the overall score, grade and per-section commentary
    """
    if not isinstance(cv, CVData):
        cv = CVData.model_validate(cv or {})
    rules = rules or DEFAULT_RULES

    sections: list[SectionFeedback] = []
    total = 0.0
    for analyze, weight in SECTION_WEIGHTS:
        section = analyze(cv, rules)
        sections.append(section)
        total += section.score * weight

    score = round_half_up(total)
    grade = get_grade(score)

    logger.debug(
        f"CV scored {score} ({grade.value}): "
        + ", ".join(f"{s.section.value}={s.score}" for s in sections)
    )

    return CVFeedback(
        score=score,
        grade=grade,
        strengths=extract_strengths(sections),
        improvements=extract_improvements(sections),
        sections=sections,
        overall_message=get_overall_message(score),
    )
