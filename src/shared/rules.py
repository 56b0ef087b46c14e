"""
Heuristic rule tables for free-text matching.

Holds the ordered regex/keyword tables used to read a minimum experience
requirement out of job requirement text and to classify CV skills as
technical or soft. Defaults are built in; a YAML file can override any table.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import yaml
from loguru import logger


DEFAULT_EXPERIENCE_PATTERNS = [
    r"(\d+)\+?\s*tahun",
    r"minimal\s*(\d+)\s*tahun",
    r"at least\s*(\d+)\s*years?",
]

DEFAULT_TECHNICAL_PATTERN = (
    r"javascript|python|java|c\+\+|react|node|sql|aws|git|docker|kubernetes"
)
DEFAULT_SOFT_PATTERN = (
    r"leadership|communication|teamwork|problem solving|time management|creative"
)

TECHNICAL = "technical"
SOFT = "soft"


@dataclass
class LevelRule:
    """Seniority keywords implying a minimum number of years."""

    keywords: list[str]
    years: int

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


def _default_level_rules() -> list[LevelRule]:
    return [
        LevelRule(keywords=["entry", "junior"], years=0),
        LevelRule(keywords=["senior"], years=5),
        LevelRule(keywords=["lead", "manager"], years=7),
    ]


def _compile(pattern: str, flags: int = 0) -> re.Pattern:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise ValueError(f"Invalid rule pattern {pattern!r}: {e}") from e


@dataclass
class RuleBook:
    """Ordered rule tables. First match wins everywhere."""

    experience_patterns: list[re.Pattern] = field(
        default_factory=lambda: [_compile(p) for p in DEFAULT_EXPERIENCE_PATTERNS]
    )
    level_rules: list[LevelRule] = field(default_factory=_default_level_rules)
    default_min_experience: int = 2
    skill_classifiers: dict[str, re.Pattern] = field(
        default_factory=lambda: {
            TECHNICAL: _compile(DEFAULT_TECHNICAL_PATTERN, re.IGNORECASE),
            SOFT: _compile(DEFAULT_SOFT_PATTERN, re.IGNORECASE),
        }
    )

    def extract_min_experience(self, requirements: Iterable[str]) -> int:
        """
        Read the minimum years of experience a job asks for.

        Tries each regex against the lowercased, space-joined requirements
        (capture group 1 is the year count), then the seniority keywords,
        then falls back to ``default_min_experience``.
        """
        text = " ".join(requirements).lower()

        for pattern in self.experience_patterns:
            match = pattern.search(text)
            if match:
                return int(match.group(1))

        for rule in self.level_rules:
            if rule.matches(text):
                return rule.years

        return self.default_min_experience

    def skill_categories(self, skill: str) -> set[str]:
        """Return every classifier name whose pattern occurs in ``skill``."""
        return {name for name, pattern in self.skill_classifiers.items() if pattern.search(skill)}

    @classmethod
    def from_yaml(cls, path: Optional[Path]) -> "RuleBook":
        """Load rule overrides from a YAML file, keeping defaults for anything omitted."""
        rules = cls()
        if path is None:
            return rules

        path = Path(path)
        if not path.exists():
            logger.warning(f"Rules file not found: {path}, using built-in rules")
            return rules

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Rules file must contain a mapping: {path}")

        experience = data.get("experience") or {}
        if "patterns" in experience:
            rules.experience_patterns = [_compile(str(p)) for p in experience["patterns"]]
        if "levels" in experience:
            rules.level_rules = [
                LevelRule(
                    keywords=[str(k).lower() for k in level.get("keywords", [])],
                    years=int(level.get("years", 0)),
                )
                for level in experience["levels"]
            ]
        if "default_years" in experience:
            rules.default_min_experience = int(experience["default_years"])

        skills = data.get("skills") or {}
        if skills:
            rules.skill_classifiers = {
                str(name): _compile(str(pattern), re.IGNORECASE)
                for name, pattern in skills.items()
            }

        logger.info(
            f"Loaded rules from {path}: {len(rules.experience_patterns)} experience patterns, "
            f"{len(rules.level_rules)} level rules, {len(rules.skill_classifiers)} skill classifiers"
        )
        return rules


DEFAULT_RULES = RuleBook()
