# Shared module for configuration, logging, data models and rule tables
from .config import Settings, get_settings
from .models import (
    Certification,
    CVData,
    CVSection,
    Education,
    Grade,
    Job,
    Language,
    PersonalInfo,
    SectionStatus,
    UserProfile,
    WorkExperience,
)
from .rules import DEFAULT_RULES, RuleBook

__all__ = [
    "Settings",
    "get_settings",
    "Certification",
    "CVData",
    "CVSection",
    "Education",
    "Grade",
    "Job",
    "Language",
    "PersonalInfo",
    "SectionStatus",
    "UserProfile",
    "WorkExperience",
    "DEFAULT_RULES",
    "RuleBook",
]
