"""
Builds the matching profile from a signed-in user and their CV data.
"""

from typing import Any, Optional

from shared.models import UserProfile
from shared.utils import pick


def build_user_profile(user: Any, cv_data: Optional[Any] = None) -> UserProfile:
    """
    Shape loosely-typed user and CV objects into a UserProfile.

    Either argument may be a mapping or an object with attributes, in the
    camelCase or snake_case convention. Skills default to an empty list and
    experience to 0 years; category and location prefer the CV over the user.
    """
    experience = pick(cv_data, "totalExperience", "total_experience", default=0)
    try:
        experience = float(experience)
    except (TypeError, ValueError):
        experience = 0.0

    return UserProfile(
        id=pick(user, "id", default=""),
        name=pick(user, "name", default=""),
        email=pick(user, "email", default=""),
        phone=pick(user, "phone"),
        skills=pick(cv_data, "skills", default=[]),
        category=(
            pick(cv_data, "preferredCategory", "preferred_category")
            or pick(user, "preferredCategory", "preferred_category")
        ),
        location=pick(cv_data, "location") or pick(user, "location"),
        experience=experience,
    )
