"""Tests for API schema aliases, defaults and validation."""

import pytest
from pydantic import ValidationError

from app.exceptions import ConstraintError
from app.schemas import (
    AchievementData,
    ChatRequest,
    ChatResponse,
    DemographicConstraint,
    GenderConstraint,
    MedicalCaseData,
    PatientProfile,
)
from app.schemas.demographics import Gender, check_age_bounds


class TestDemographicConstraint:
    """Tests for DemographicConstraint."""

    def test_defaults(self):
        constraint = DemographicConstraint()

        assert constraint.gender == GenderConstraint.ANY
        assert constraint.min_age == 17
        assert constraint.max_age == 60
        assert constraint.is_pregnant is False

    def test_camel_case_input(self):
        constraint = DemographicConstraint.model_validate(
            {"gender": "Female", "minAge": 20, "maxAge": 35, "isPregnant": True}
        )

        assert constraint.gender == GenderConstraint.FEMALE
        assert constraint.min_age == 20
        assert constraint.is_pregnant is True

    def test_equal_bounds_allowed(self):
        assert DemographicConstraint(min_age=30, max_age=30).min_age == 30

    @pytest.mark.parametrize(
        "bounds",
        [{"minAge": 40, "maxAge": 30}, {"minAge": 0}, {"minAge": -1, "maxAge": 5}],
    )
    def test_bad_bounds_rejected(self, bounds):
        with pytest.raises(ValidationError):
            DemographicConstraint.model_validate(bounds)

    def test_unknown_gender_rejected(self):
        with pytest.raises(ValidationError):
            DemographicConstraint.model_validate({"gender": "Unknown"})

    def test_pregnant_male_is_warning_not_error(self):
        constraint = DemographicConstraint(gender=GenderConstraint.MALE, is_pregnant=True)

        assert constraint.warnings() == ["isPregnant is set but gender is Male"]

    def test_pregnant_any_warns_gender_may_resolve_male(self):
        constraint = DemographicConstraint(gender=GenderConstraint.ANY, is_pregnant=True)

        assert constraint.warnings() == ["isPregnant is set but gender may resolve to Male"]

    def test_pregnant_female_has_no_warning(self):
        assert DemographicConstraint(gender=GenderConstraint.FEMALE, is_pregnant=True).warnings() == []

    def test_not_pregnant_any_has_no_warning(self):
        assert DemographicConstraint(gender=GenderConstraint.ANY).warnings() == []


class TestCheckAgeBounds:
    def test_valid(self):
        check_age_bounds(1, 1)

    def test_messages(self):
        with pytest.raises(ConstraintError, match=r"minAge \(9\) is greater than maxAge \(3\)"):
            check_age_bounds(9, 3)
        with pytest.raises(ConstraintError, match="minAge must be positive, got 0"):
            check_age_bounds(0, 3)


class TestPatientProfile:
    def test_age_must_be_positive(self):
        with pytest.raises(ValidationError):
            PatientProfile(name="Budi", age=0, gender=Gender.MALE, is_pregnant=False)

    def test_any_is_not_a_patient_gender(self):
        with pytest.raises(ValidationError):
            PatientProfile.model_validate(
                {"name": "Budi", "age": 30, "gender": "Any", "isPregnant": False}
            )


class TestMedicalCaseData:
    """Tests for the Indonesian wire names of a case."""

    def test_dump_uses_client_field_names(self):
        case = MedicalCaseData(case_id="C-1", disease_name="Karies", correct_diagnosis="Karies Dentin")

        payload = case.model_dump(by_alias=True)

        assert payload["caseId"] == "C-1"
        assert payload["namaPenyakit"] == "Karies"
        assert payload["diagnosisBenar"] == "Karies Dentin"
        assert payload["tingkatKesulitan"] == "Easy"
        assert payload["pemeriksaanFisik"]["perkusi"] == "Negatif (-)"
        assert payload["assets"] == {"intraoral": None, "radiograf": None}
        assert payload["kategori"] == "General Dentistry"

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(ValidationError):
            MedicalCaseData.model_validate({"caseId": "C-1", "tingkatKesulitan": "Extreme"})

    def test_negative_reward_rejected(self):
        with pytest.raises(ValidationError):
            MedicalCaseData.model_validate({"caseId": "C-1", "rewards": {"xp": -10}})


class TestCatalogSchemas:
    def test_achievement_reward_xp_alias(self):
        achievement = AchievementData.model_validate({"achieveId": "a", "rewardXP": 25})

        assert achievement.reward_xp == 25
        assert achievement.model_dump(by_alias=True)["rewardXP"] == 25


class TestChatSchemas:
    def test_request_aliases(self):
        request = ChatRequest.model_validate(
            {"robloxId": 77, "pesan": "Halo", "konteksPenyakit": "Pulpitis"}
        )

        assert request.roblox_id == "77"
        assert request.message == "Halo"
        assert request.disease_context == "Pulpitis"
        assert request.patient_profile is None

    def test_response_alias(self):
        response = ChatResponse(answer="Iya dok.", tags={"NAMA": "Budi"})

        assert response.model_dump(by_alias=True) == {"jawaban": "Iya dok.", "tags": {"NAMA": "Budi"}}
