import pytest

from recommender.scorer import (
    FLEXIBLE_LOCATION_REASON,
    REMOTE_REASON,
    URGENT_REASON,
    JobScorer,
    calculate_job_score,
    get_match_color,
    get_match_label,
)
from shared.models import UserProfile
from shared.rules import RuleBook


class TestCategory:
    def test_exact_match_only(self, make_job):
        """Category alone gives its full weight and nothing else fires"""
        result = calculate_job_score(UserProfile(category="Teknologi"), make_job())

        assert result.score == 30
        assert result.match_reasons == ["Sesuai dengan kategori Teknologi"]
        assert result.mismatch_reasons == []

    def test_case_insensitive(self, make_job):
        assert calculate_job_score(UserProfile(category="teknologi"), make_job()).score == 30

    def test_mismatch(self, make_job):
        result = calculate_job_score(UserProfile(category="Marketing"), make_job())

        assert result.score == 0
        assert result.mismatch_reasons == [
            "Kategori berbeda: Anda mencari Marketing, lowongan ini Teknologi"
        ]

    def test_skipped_without_category(self, make_job):
        result = calculate_job_score(UserProfile(), make_job(category="Marketing"))

        assert result.score == 0
        assert result.match_reasons == []
        assert result.mismatch_reasons == []


class TestLocation:
    def test_remote_overrides_location(self, make_job):
        job = make_job(category=None, isRemote=True, province="DKI Jakarta")
        result = calculate_job_score(UserProfile(location="Bali"), job)

        # full location weight, and no separate remote bonus
        assert result.score == 25
        assert result.match_reasons == [FLEXIBLE_LOCATION_REASON]
        assert REMOTE_REASON not in result.match_reasons
        assert result.mismatch_reasons == []

    def test_same_province(self, make_job):
        result = calculate_job_score(UserProfile(location="jawa barat"), make_job(province="Jawa Barat"))

        assert result.score == 25
        assert result.match_reasons == ["Lokasi sesuai: Jawa Barat"]

    def test_nationwide_preference_gets_half(self, make_job):
        result = calculate_job_score(UserProfile(location="Indonesia"), make_job(province="Bali"))

        # 12.5 rounds half up
        assert result.score == 13
        assert result.match_reasons == []
        assert result.mismatch_reasons == ["Lokasi berbeda: Anda di Indonesia, lowongan di Bali"]

    def test_other_province(self, make_job):
        result = calculate_job_score(UserProfile(location="Bali"), make_job(province="Banten"))

        assert result.score == 0
        assert result.mismatch_reasons == ["Lokasi berbeda: Anda di Bali, lowongan di Banten"]


class TestExperience:
    REQUIREMENTS = ["Minimal 3 tahun pengalaman"]

    def test_meets_requirement(self, make_job):
        result = calculate_job_score(UserProfile(experience=3), make_job(requirements=self.REQUIREMENTS))

        assert result.score == 25
        assert result.match_reasons == ["Pengalaman Anda sesuai (3 tahun)"]

    def test_under_qualified(self, make_job):
        # 2 < 3 * 0.75
        result = calculate_job_score(UserProfile(experience=2), make_job(requirements=self.REQUIREMENTS))

        assert result.score == 0
        assert result.mismatch_reasons == ["Kurang pengalaman (Anda: 2 tahun, dibutuhkan: 3+ tahun)"]

    def test_slightly_under(self, make_job):
        result = calculate_job_score(UserProfile(experience=2.5), make_job(requirements=self.REQUIREMENTS))

        # 70% of 25 = 17.5, rounded half up
        assert result.score == 18
        assert result.mismatch_reasons == [
            "Sedikit kurang pengalaman (Anda: 2.5 tahun, dibutuhkan: 3+ tahun)"
        ]

    def test_zero_years_is_still_scored(self, make_job):
        result = calculate_job_score(UserProfile(experience=0), make_job(requirements=["Junior staff"]))

        assert result.score == 25
        assert result.match_reasons == ["Pengalaman Anda sesuai (0 tahun)"]

    def test_default_requirement_is_two_years(self, make_job):
        result = calculate_job_score(UserProfile(experience=1), make_job(requirements=["Menguasai Excel"]))

        assert result.mismatch_reasons == ["Kurang pengalaman (Anda: 1 tahun, dibutuhkan: 2+ tahun)"]

    def test_custom_rules(self, make_job, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("experience:\n  default_years: 0\n")
        rules = RuleBook.from_yaml(path)

        result = calculate_job_score(UserProfile(experience=0), make_job(requirements=["Menguasai Excel"]), rules)

        assert result.score == 25


class TestSkills:
    def test_partial_overlap(self, make_job):
        profile = UserProfile(skills=["Python", "Docker", "Figma"])
        job = make_job(requirements=["Python", "Docker & Kubernetes", "PostgreSQL", "REST API"])
        result = calculate_job_score(profile, job)

        # 20 * 2 / 4
        assert result.score == 10
        assert result.match_reasons == ["2 skill cocok: Python, Docker"]
        assert result.mismatch_reasons == ["Skill kurang: PostgreSQL, REST API"]

    def test_requirement_inside_skill(self, make_job):
        """Containment works in both directions"""
        profile = UserProfile(skills=["Microsoft Excel"])
        result = calculate_job_score(profile, make_job(requirements=["Excel"]))

        assert result.score == 20
        assert result.mismatch_reasons == []

    def test_lists_at_most_three_matches(self, make_job):
        profile = UserProfile(skills=["SQL", "Python", "Excel", "Tableau"])
        job = make_job(requirements=["SQL", "Python", "Excel", "Tableau"])
        result = calculate_job_score(profile, job)

        assert result.match_reasons == ["4 skill cocok: SQL, Python, Excel"]

    def test_job_without_requirements(self, make_job):
        result = calculate_job_score(UserProfile(skills=["Python"]), make_job(requirements=[]))

        assert result.score == 0
        assert result.match_reasons == []
        assert result.mismatch_reasons == []

    def test_empty_skill_list_is_skipped(self, make_job):
        result = calculate_job_score(UserProfile(skills=[]), make_job(requirements=["Python"]))

        assert result.mismatch_reasons == []


class TestBonuses:
    def test_urgent(self, make_job):
        result = calculate_job_score(UserProfile(category="Teknologi"), make_job(isUrgent=True))

        assert result.score == 35
        assert result.match_reasons == ["Sesuai dengan kategori Teknologi", URGENT_REASON]

    def test_remote_without_location_preference(self, make_job):
        result = calculate_job_score(UserProfile(), make_job(isRemote=True))

        assert result.score == 2
        assert result.match_reasons == [REMOTE_REASON]

    def test_capped_at_100(self, make_job):
        profile = UserProfile(
            category="Teknologi", location="DKI Jakarta", experience=5, skills=["Python", "SQL"]
        )
        job = make_job(requirements=["Python", "SQL"], isUrgent=True)
        result = calculate_job_score(profile, job)

        assert result.score == 100
        # five reasons fired; only the first three are kept
        assert result.match_reasons == [
            "Sesuai dengan kategori Teknologi",
            "Lokasi sesuai: DKI Jakarta",
            "Pengalaman Anda sesuai (5 tahun)",
        ]


class TestReasonLimits:
    def test_mismatches_keep_first_two(self, make_job):
        profile = UserProfile(category="Marketing", location="Bali", experience=0, skills=["Canva"])
        job = make_job(requirements=["Senior SEO specialist"])
        result = calculate_job_score(profile, job)

        assert result.score == 0
        assert result.mismatch_reasons == [
            "Kategori berbeda: Anda mencari Marketing, lowongan ini Teknologi",
            "Lokasi berbeda: Anda di Bali, lowongan di DKI Jakarta",
        ]


class TestInputs:
    def test_accepts_mappings(self):
        result = calculate_job_score(
            {"category": "Desain"},
            {"id": 9, "category": "Desain", "province": "Bali", "requirements": None},
        )

        assert result.score == 30
        assert result.job.id == "9"

    def test_does_not_mutate_inputs(self, make_job):
        profile = UserProfile(skills=["Python"], location="Bali")
        job = make_job(requirements=["Python"])
        before = (profile.model_dump(), job.model_dump())

        JobScorer().score_job(profile, job)

        assert (profile.model_dump(), job.model_dump()) == before

    def test_to_dict(self, make_job):
        data = calculate_job_score(UserProfile(category="Teknologi"), make_job()).to_dict()

        assert data["score"] == 30
        assert data["job"]["category"] == "Teknologi"
        assert data["matchReasons"] == ["Sesuai dengan kategori Teknologi"]
        assert data["mismatchReasons"] == []


class TestPresentation:
    @pytest.mark.parametrize(
        "score,color,label",
        [
            (90, "#22c55e", "Sangat Cocok"),
            (75, "#eab308", "Cocok"),
            (55, "#f97316", "Cukup Cocok"),
            (35, "#ef4444", "Mungkin Cocok"),
            (10, "#ef4444", "Tidak Cocok"),
        ],
    )
    def test_color_and_label(self, score, color, label):
        assert get_match_color(score) == color
        assert get_match_label(score) == label
