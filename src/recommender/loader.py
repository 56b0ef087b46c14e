"""
Loads job postings and applicant profiles for the recommender.
Accepts YAML or JSON exports of the web client or the REST backend.
"""

from pathlib import Path

from loguru import logger

from shared.models import Job, UserProfile
from shared.utils import read_document

from .profile import build_user_profile


def load_jobs(path: Path) -> list[Job]:
    """
    Load job postings from a file.

    The file holds either a list of jobs or a mapping with the list under
    ``jobs`` or ``data`` (the paginated API envelope).
    """
    path = Path(path)
    data = read_document(path)

    if isinstance(data, dict):
        data = data.get("jobs", data.get("data"))

    if not isinstance(data, list):
        raise ValueError(f"Jobs file must contain a list of jobs: {path}")

    jobs = [Job.model_validate(item) for item in data if isinstance(item, dict)]
    skipped = len(data) - len(jobs)
    if skipped:
        logger.warning(f"Skipped {skipped} non-mapping entries in {path}")

    logger.info(f"Loaded {len(jobs)} jobs from {path}")
    return jobs


def load_profile(path: Path) -> UserProfile:
    """
    Load an applicant profile from a file.

    A mapping with ``user`` (and optionally ``cv``) keys goes through
    ``build_user_profile``; any other mapping is read as the profile itself.
    """
    path = Path(path)
    data = read_document(path)

    if not isinstance(data, dict):
        raise ValueError(f"Profile file must contain a mapping: {path}")

    if "user" in data:
        profile = build_user_profile(data.get("user"), data.get("cv"))
    else:
        profile = UserProfile.model_validate(data)

    logger.info(f"Loaded profile for: {profile.name or profile.id or '<anonymous>'}")
    return profile
