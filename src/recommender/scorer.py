"""
Rule-based job recommendation scoring.

Scores how well a job posting fits an applicant profile from four weighted
factors (category 30, location 25, experience 25, skills 20) plus small
bonuses for urgent and remote jobs. A factor whose profile field is missing
is skipped: it neither adds points nor produces a reason.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from loguru import logger

from shared.models import Job, UserProfile
from shared.rules import DEFAULT_RULES, RuleBook
from shared.utils import clamp, format_years, round_half_up


CATEGORY_WEIGHT = 30
LOCATION_WEIGHT = 25
EXPERIENCE_WEIGHT = 25
SKILL_WEIGHT = 20

URGENT_BONUS = 5
REMOTE_BONUS = 2

NATIONWIDE_CREDIT = 0.5  # profile location is "Indonesia" rather than a province
NEAR_MISS_RATIO = 0.75  # experience within 75% of the requirement...
NEAR_MISS_CREDIT = 0.7  # ...earns 70% of the experience weight

MAX_MATCH_REASONS = 3
MAX_MISMATCH_REASONS = 2
MAX_LISTED_SKILLS = 3
MAX_LISTED_GAPS = 2

DEFAULT_LIMIT = 10
DEFAULT_MIN_SCORE = 30

FLEXIBLE_LOCATION_REASON = "Lokasi fleksibel - Work from anywhere"
URGENT_REASON = "Lowongan urgent - kesempatan lebih besar"
REMOTE_REASON = "Tersedia opsi work from home"


@dataclass
class FactorResult:
    """Points and explanations produced by one scoring factor."""

    points: float = 0.0
    match_reason: Optional[str] = None
    mismatch_reason: Optional[str] = None


@dataclass
class RecommendationScore:
    """Match score of one job for one profile."""

    job: Job
    score: int
    match_reasons: list[str] = field(default_factory=list)
    mismatch_reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "job": self.job.model_dump(),
            "score": self.score,
            "matchReasons": list(self.match_reasons),
            "mismatchReasons": list(self.mismatch_reasons),
        }


@dataclass
class RecommendationSummary:
    """Ranked recommendations with the aggregate figures the job board displays."""

    recommendations: list[RecommendationScore]
    total_jobs: int
    matched_jobs: int
    average_score: float
    profile_complete: bool

    def to_dict(self) -> dict:
        return {
            "recommendations": [r.to_dict() for r in self.recommendations],
            "total_jobs": self.total_jobs,
            "matched_jobs": self.matched_jobs,
            "average_score": self.average_score,
            "profile_complete": self.profile_complete,
        }


def skills_overlap(skill: str, requirement: str) -> bool:
    """True when either text contains the other, ignoring case."""
    skill_lower = skill.lower()
    requirement_lower = requirement.lower()
    return skill_lower in requirement_lower or requirement_lower in skill_lower


def find_matched_skills(skills: Iterable[str], requirements: list[str]) -> list[str]:
    return [s for s in skills if any(skills_overlap(s, r) for r in requirements)]


def find_missing_requirements(skills: list[str], requirements: Iterable[str]) -> list[str]:
    return [r for r in requirements if not any(skills_overlap(s, r) for s in skills)]


class JobScorer:
    """Scores jobs against an applicant profile."""

    def __init__(self, rules: Optional[RuleBook] = None):
        self.rules = rules or DEFAULT_RULES

    # -------------------------------------------------------------------------
    # Factors
    # -------------------------------------------------------------------------

    def score_category(self, profile: UserProfile, job: Job) -> Optional[FactorResult]:
        if not profile.category:
            return None

        if profile.category.lower() == job.category.lower():
            return FactorResult(
                points=CATEGORY_WEIGHT,
                match_reason=f"Sesuai dengan kategori {job.category}",
            )
        return FactorResult(
            mismatch_reason=(
                f"Kategori berbeda: Anda mencari {profile.category}, lowongan ini {job.category}"
            )
        )

    def score_location(self, profile: UserProfile, job: Job) -> Optional[FactorResult]:
        if not profile.location:
            return None

        location = profile.location.lower()
        mismatch = f"Lokasi berbeda: Anda di {profile.location}, lowongan di {job.province}"

        if job.is_remote:
            return FactorResult(points=LOCATION_WEIGHT, match_reason=FLEXIBLE_LOCATION_REASON)
        if location == job.province.lower():
            return FactorResult(
                points=LOCATION_WEIGHT,
                match_reason=f"Lokasi sesuai: {job.province}",
            )
        if "indonesia" in location:
            return FactorResult(
                points=LOCATION_WEIGHT * NATIONWIDE_CREDIT,
                mismatch_reason=mismatch,
            )
        return FactorResult(mismatch_reason=mismatch)

    def score_experience(self, profile: UserProfile, job: Job) -> Optional[FactorResult]:
        if profile.experience is None:
            return None

        years = profile.experience
        required = self.rules.extract_min_experience(job.requirements)
        have = format_years(years)

        if years >= required:
            return FactorResult(
                points=EXPERIENCE_WEIGHT,
                match_reason=f"Pengalaman Anda sesuai ({have} tahun)",
            )
        if years >= required * NEAR_MISS_RATIO:
            return FactorResult(
                points=EXPERIENCE_WEIGHT * NEAR_MISS_CREDIT,
                mismatch_reason=(
                    f"Sedikit kurang pengalaman (Anda: {have} tahun, dibutuhkan: {required}+ tahun)"
                ),
            )
        return FactorResult(
            mismatch_reason=f"Kurang pengalaman (Anda: {have} tahun, dibutuhkan: {required}+ tahun)"
        )

    def score_skills(self, profile: UserProfile, job: Job) -> Optional[FactorResult]:
        if not profile.skills:
            return None

        requirements = job.requirements
        matched = find_matched_skills(profile.skills, requirements)
        missing = find_missing_requirements(profile.skills, requirements)

        result = FactorResult()
        # A job without requirements gives nothing to match against
        if requirements:
            result.points = SKILL_WEIGHT * len(matched) / len(requirements)
        if matched:
            result.match_reason = (
                f"{len(matched)} skill cocok: {', '.join(matched[:MAX_LISTED_SKILLS])}"
            )
        if missing:
            result.mismatch_reason = f"Skill kurang: {', '.join(missing[:MAX_LISTED_GAPS])}"
        return result

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def score_job(self, profile: UserProfile, job: Job) -> RecommendationScore:
        """
        Score a single job for a profile.

        Returns:
            RecommendationScore with a 0-100 score, up to three match reasons
            and up to two mismatch reasons in factor order
        """
        score = 0.0
        match_reasons: list[str] = []
        mismatch_reasons: list[str] = []

        factors = (
            self.score_category,
            self.score_location,
            self.score_experience,
            self.score_skills,
        )
        for factor in factors:
            result = factor(profile, job)
            if result is None:
                continue
            score += result.points
            if result.match_reason:
                match_reasons.append(result.match_reason)
            if result.mismatch_reason:
                mismatch_reasons.append(result.mismatch_reason)

        if job.is_urgent:
            score = min(score + URGENT_BONUS, 100)
            match_reasons.append(URGENT_REASON)

        # Remote was already credited through the location factor
        if job.is_remote and FLEXIBLE_LOCATION_REASON not in match_reasons:
            score = min(score + REMOTE_BONUS, 100)
            match_reasons.append(REMOTE_REASON)

        final = int(clamp(round_half_up(score)))
        logger.debug(f"Scored job {job.id or job.title!r}: {final}")

        return RecommendationScore(
            job=job,
            score=final,
            match_reasons=match_reasons[:MAX_MATCH_REASONS],
            mismatch_reasons=mismatch_reasons[:MAX_MISMATCH_REASONS],
        )

    def rank(
        self,
        profile: UserProfile,
        jobs: Iterable[Job],
        min_score: int = DEFAULT_MIN_SCORE,
    ) -> list[RecommendationScore]:
        """Score every job, drop those at or below ``min_score``, best first."""
        scored = [self.score_job(profile, job) for job in jobs]
        kept = [s for s in scored if s.score > min_score]
        # sorted() is stable, so ties keep input order
        return sorted(kept, key=lambda s: s.score, reverse=True)


def _as_profile(profile: Union[UserProfile, dict, None]) -> UserProfile:
    if isinstance(profile, UserProfile):
        return profile
    return UserProfile.model_validate(profile or {})


def _as_jobs(jobs: Optional[Iterable[Union[Job, dict]]]) -> list[Job]:
    return [job if isinstance(job, Job) else Job.model_validate(job) for job in jobs or []]


def calculate_job_score(
    profile: Union[UserProfile, dict],
    job: Union[Job, dict],
    rules: Optional[RuleBook] = None,
) -> RecommendationScore:
    """Score one job posting for a profile."""
    job = job if isinstance(job, Job) else Job.model_validate(job)
    return JobScorer(rules).score_job(_as_profile(profile), job)


def get_job_recommendations(
    profile: Union[UserProfile, dict],
    jobs: Iterable[Union[Job, dict]],
    limit: int = DEFAULT_LIMIT,
    min_score: int = DEFAULT_MIN_SCORE,
    rules: Optional[RuleBook] = None,
) -> list[RecommendationScore]:
    """
    Recommend the best matching jobs.

    Args:
        profile: Applicant profile
        jobs: Candidate job postings
        limit: Maximum recommendations returned
        min_score: Jobs scoring at or below this are dropped
        rules: Rule tables for experience extraction (built-in defaults if None)

    Returns:
        Up to ``limit`` recommendations sorted by score, highest first
    """
    ranked = JobScorer(rules).rank(_as_profile(profile), _as_jobs(jobs), min_score=min_score)
    return ranked[: max(limit, 0)]


def is_profile_complete(profile: UserProfile) -> bool:
    """Category, location and at least one skill are needed for useful matches."""
    return bool(profile.category and profile.location and profile.skills)


def summarize_recommendations(
    profile: Union[UserProfile, dict],
    jobs: Iterable[Union[Job, dict]],
    limit: int = DEFAULT_LIMIT,
    min_score: int = DEFAULT_MIN_SCORE,
    rules: Optional[RuleBook] = None,
) -> RecommendationSummary:
    """Rank jobs and report how many matched and their average score."""
    profile = _as_profile(profile)
    jobs = _as_jobs(jobs)

    ranked = JobScorer(rules).rank(profile, jobs, min_score=min_score)
    top = ranked[: max(limit, 0)]
    average = round(sum(r.score for r in top) / len(top), 1) if top else 0.0

    logger.info(f"Recommended {len(top)} of {len(ranked)} matching jobs ({len(jobs)} scored)")

    return RecommendationSummary(
        recommendations=top,
        total_jobs=len(jobs),
        matched_jobs=len(ranked),
        average_score=average,
        profile_complete=is_profile_complete(profile),
    )


def get_match_color(score: float) -> str:
    """Hex colour for a match percentage."""
    if score >= 80:
        return "#22c55e"  # green
    if score >= 60:
        return "#eab308"  # yellow
    if score >= 40:
        return "#f97316"  # orange
    return "#ef4444"  # red


def get_match_label(score: float) -> str:
    if score >= 85:
        return "Sangat Cocok"
    if score >= 70:
        return "Cocok"
    if score >= 50:
        return "Cukup Cocok"
    if score >= 30:
        return "Mungkin Cocok"
    return "Tidak Cocok"
