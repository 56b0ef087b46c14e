"""
Pydantic models for CVs, job postings and applicant profiles.

Every model accepts both the camelCase shape used by the web client
(``fullName``, ``workExperience``, ``isCurrentJob``) and the snake_case
shape returned by the REST backend (``full_name``, ``experience``,
``is_current``). Missing or null values collapse to empty strings and
empty lists so the scoring engines never have to guard against them.
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, model_validator


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _to_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return []


def _to_bool(value: Any) -> bool:
    return bool(value)


def _skill_names(value: Any) -> list[str]:
    """Backend skills are ``{name, level, category}`` objects; the client sends strings."""
    names = []
    for item in _to_list(value):
        if isinstance(item, dict):
            item = item.get("name")
        if item is None:
            continue
        names.append(str(item))
    return names


def _to_optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _optional_skill_names(value: Any) -> Optional[list[str]]:
    return None if value is None else _skill_names(value)


Text = Annotated[str, BeforeValidator(_to_text)]
OptionalText = Annotated[Optional[str], BeforeValidator(_to_optional_text)]
Flag = Annotated[bool, BeforeValidator(_to_bool)]
SkillList = Annotated[list[str], BeforeValidator(_skill_names)]


class CVSection(str, Enum):
    """CV sections in scoring order."""

    PERSONAL = "personal"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"


class SectionStatus(str, Enum):
    """Qualitative bucket for a section score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs-improvement"


class Grade(str, Enum):
    """Letter grade for an overall CV score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# -----------------------------------------------------------------------------
# CV
# -----------------------------------------------------------------------------


class PersonalInfo(_Record):
    """Contact details and summary."""

    full_name: Text = Field(default="", validation_alias=AliasChoices("fullName", "full_name"))
    email: Text = ""
    phone: Text = ""
    address: Text = ""
    city: Text = ""
    province: Text = ""
    linked_in: Text = Field(
        default="", validation_alias=AliasChoices("linkedIn", "linkedin", "linked_in")
    )
    portfolio: Text = ""
    summary: Text = ""
    photo: Text = Field(default="", validation_alias=AliasChoices("photo", "photo_url", "photoUrl"))


class Education(_Record):
    """Education entry."""

    institution: Text = ""
    degree: Text = ""
    field: Text = Field(default="", validation_alias=AliasChoices("field", "field_of_study"))
    start_year: Text = Field(default="", validation_alias=AliasChoices("startYear", "start_year", "start_date"))
    end_year: Text = Field(default="", validation_alias=AliasChoices("endYear", "end_year", "end_date"))
    description: Text = ""


class WorkExperience(_Record):
    """Work experience entry."""

    company: Text = ""
    position: Text = ""
    start_date: Text = Field(default="", validation_alias=AliasChoices("startDate", "start_date"))
    end_date: Text = Field(default="", validation_alias=AliasChoices("endDate", "end_date"))
    is_current_job: Flag = Field(
        default=False, validation_alias=AliasChoices("isCurrentJob", "is_current_job", "is_current")
    )
    description: Text = ""


class Certification(_Record):
    """Certification entry."""

    name: Text = ""
    issuer: Text = ""
    year: Text = Field(default="", validation_alias=AliasChoices("year", "issue_date", "issueDate"))
    credential_id: Text = Field(
        default="", validation_alias=AliasChoices("credentialId", "credential_id")
    )


class Language(_Record):
    """Spoken language entry (backend CV only)."""

    name: Text = ""
    proficiency: Text = ""


class CVData(_Record):
    """Complete CV document as edited in the CV builder."""

    personal_info: PersonalInfo = Field(
        default_factory=PersonalInfo,
        validation_alias=AliasChoices("personalInfo", "personal_info"),
    )
    education: Annotated[list[Education], BeforeValidator(_to_list)] = Field(default_factory=list)
    work_experience: Annotated[list[WorkExperience], BeforeValidator(_to_list)] = Field(
        default_factory=list,
        validation_alias=AliasChoices("workExperience", "work_experience", "experience"),
    )
    skills: SkillList = Field(default_factory=list)
    certifications: Annotated[list[Certification], BeforeValidator(_to_list)] = Field(
        default_factory=list
    )
    languages: Annotated[list[Language], BeforeValidator(_to_list)] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _null_personal_info(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for key in ("personalInfo", "personal_info"):
                if key in data and not isinstance(data[key], (dict, PersonalInfo)):
                    data = {k: v for k, v in data.items() if k != key}
        return data

    def to_dict(self) -> dict:
        """Serialize with the web client's camelCase keys."""
        info = self.personal_info
        return {
            "personalInfo": {
                "fullName": info.full_name,
                "email": info.email,
                "phone": info.phone,
                "address": info.address,
                "city": info.city,
                "province": info.province,
                "linkedIn": info.linked_in,
                "portfolio": info.portfolio,
                "summary": info.summary,
                "photo": info.photo,
            },
            "education": [
                {
                    "institution": e.institution,
                    "degree": e.degree,
                    "field": e.field,
                    "startYear": e.start_year,
                    "endYear": e.end_year,
                    "description": e.description,
                }
                for e in self.education
            ],
            "workExperience": [
                {
                    "company": w.company,
                    "position": w.position,
                    "startDate": w.start_date,
                    "endDate": w.end_date,
                    "isCurrentJob": w.is_current_job,
                    "description": w.description,
                }
                for w in self.work_experience
            ],
            "skills": list(self.skills),
            "languages": [
                {"name": lang.name, "proficiency": lang.proficiency} for lang in self.languages
            ],
            "certifications": [
                {
                    "name": c.name,
                    "issuer": c.issuer,
                    "year": c.year,
                    "credentialId": c.credential_id,
                }
                for c in self.certifications
            ],
        }


# -----------------------------------------------------------------------------
# Jobs and profiles
# -----------------------------------------------------------------------------


class Job(_Record):
    """Job posting as consumed by the recommender."""

    id: Text = ""
    title: Text = ""
    company: Text = ""
    category: Text = ""
    province: Text = ""
    city: Text = ""
    location: Text = ""
    is_remote: Flag = Field(default=False, validation_alias=AliasChoices("isRemote", "is_remote"))
    is_urgent: Flag = Field(default=False, validation_alias=AliasChoices("isUrgent", "is_urgent"))
    requirements: Annotated[list[str], BeforeValidator(_to_list)] = Field(default_factory=list)
    salary_min: Optional[float] = Field(default=None, validation_alias=AliasChoices("salaryMin", "salary_min"))
    salary_max: Optional[float] = Field(default=None, validation_alias=AliasChoices("salaryMax", "salary_max"))
    description: Text = ""
    experience_level: Text = Field(
        default="", validation_alias=AliasChoices("experienceLevel", "experience_level")
    )

    @model_validator(mode="before")
    @classmethod
    def _flatten_backend_shape(cls, data: Any) -> Any:
        """Unpack the nested ``location``/``salary``/``company`` objects of the REST API."""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        location = data.get("location")
        if isinstance(location, dict):
            city = location.get("city") or ""
            province = location.get("province") or ""
            data.setdefault("city", city)
            data.setdefault("province", province)
            data.setdefault("is_remote", location.get("is_remote", False))
            data["location"] = f"{city}, {province}" if city or province else ""

        salary = data.get("salary")
        if isinstance(salary, dict):
            data.setdefault("salary_min", salary.get("min"))
            data.setdefault("salary_max", salary.get("max"))

        company = data.get("company")
        if isinstance(company, dict):
            data["company"] = company.get("name", "")

        requirements = data.get("requirements")
        if isinstance(requirements, str):
            data["requirements"] = [
                line.strip(" \t-•*") for line in requirements.splitlines() if line.strip(" \t-•*")
            ]
        elif isinstance(requirements, (list, tuple)):
            data["requirements"] = [str(r) for r in requirements if r is not None]

        return data


class UserProfile(_Record):
    """Applicant preferences used for matching. ``None`` fields are not scored."""

    id: Text = ""
    name: Text = ""
    email: Text = ""
    phone: OptionalText = None
    skills: Annotated[Optional[list[str]], BeforeValidator(_optional_skill_names)] = None
    category: OptionalText = None
    location: OptionalText = None
    experience: Optional[float] = None
