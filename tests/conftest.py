"""
Pytest configuration and shared fixtures for the CV checker and recommender tests
"""
from pathlib import Path

import pytest
from loguru import logger

from shared.config import get_settings
from shared.models import CVData, Job, UserProfile

REPO_ROOT = Path(__file__).parent.parent
RULES_FILE = REPO_ROOT / "config" / "rules.yaml"

LONG_DESCRIPTION = (
    "Mengembangkan layanan backend untuk aplikasi pembayaran dan "
    "meningkatkan performa API sebesar 40 persen."
)


@pytest.fixture
def complete_cv_data() -> dict:
    """A CV in the web client shape that passes nearly every check"""
    return {
        "personalInfo": {
            "fullName": "Budi Santoso",
            "email": "budi.santoso@example.com",
            "phone": "081234567890",
            "address": "Jl. Merdeka No. 10, Bandung",
            "linkedIn": "https://linkedin.com/in/budisantoso",
            "portfolio": "https://budi.dev",
            "summary": (
                "Software engineer dengan lima tahun pengalaman membangun "
                "aplikasi web skala besar untuk industri fintech."
            ),
        },
        "education": [
            {
                "institution": "Institut Teknologi Bandung",
                "degree": "S1",
                "field": "Teknik Informatika",
                "startYear": "2013",
                "endYear": "2017",
                "description": "IPK 3.8, asisten laboratorium",
            }
        ],
        "workExperience": [
            {
                "company": "PT Bayar Cepat",
                "position": "Senior Backend Engineer",
                "startDate": "2020-01",
                "endDate": "Sekarang",
                "isCurrentJob": True,
                "description": LONG_DESCRIPTION,
            },
            {
                "company": "PT Toko Daring",
                "position": "Backend Engineer",
                "startDate": "2017-08",
                "endDate": "2019-12",
                "isCurrentJob": False,
                "description": LONG_DESCRIPTION,
            },
        ],
        "skills": ["JavaScript", "React", "Python", "Leadership", "Communication"],
        "certifications": [
            {
                "name": "AWS Certified Developer",
                "issuer": "Amazon Web Services",
                "year": "2022",
                "credentialId": "AWS-123",
            }
        ],
    }


@pytest.fixture
def complete_cv(complete_cv_data) -> CVData:
    return CVData.model_validate(complete_cv_data)


@pytest.fixture
def empty_cv() -> CVData:
    return CVData()


@pytest.fixture
def tech_profile() -> UserProfile:
    """Profile with only category and location set"""
    return UserProfile(id="u1", name="Budi", category="Teknologi", location="DKI Jakarta")


@pytest.fixture
def make_job():
    """Factory for jobs with neutral defaults"""

    def _make(**overrides) -> Job:
        data = {
            "id": "job",
            "title": "Backend Engineer",
            "company": "PT Contoh",
            "category": "Teknologi",
            "province": "DKI Jakarta",
            "isRemote": False,
            "isUrgent": False,
            "requirements": [],
        }
        data.update(overrides)
        return Job.model_validate(data)

    return _make


@pytest.fixture
def quiet_settings(monkeypatch):
    """Fresh settings with logging turned down so CLI output stays parseable"""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger.remove()
