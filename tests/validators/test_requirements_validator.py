"""Tests for requirements validation."""

from tdd_scaffold.requirements.models import Requirements
from tdd_scaffold.validators.requirements import validate_requirements


class TestValidateRequirements:
    def test_valid(self, login_requirements):
        result = validate_requirements(login_requirements)
        assert result.valid
        assert result.errors == []

    def test_none(self):
        result = validate_requirements(None)
        assert result.errors == ["Requirements object is required"]
        assert result.error_issues[0].code == "REQUIREMENTS_MISSING"

    def test_no_scenarios(self):
        result = validate_requirements(Requirements(narrative="As a user"))
        assert not result.valid
        assert result.error_issues[0].code == "NO_SCENARIOS"

    def test_blank_narrative(self):
        result = validate_requirements(Requirements(narrative="   ", edge_cases=["x"]))
        assert result.errors == ["User story is required"]

    def test_both_missing_in_order(self):
        result = validate_requirements(Requirements())
        assert [i.code for i in result.error_issues] == ["NO_SCENARIOS", "NARRATIVE_MISSING"]

    def test_single_scenario_list_is_enough(self):
        for field in ("acceptance_criteria", "happy_path", "edge_cases", "error_cases"):
            req = Requirements(narrative="As a user", **{field: ["x"]})
            assert validate_requirements(req).valid

    def test_errors_only(self):
        result = validate_requirements(Requirements())
        assert not result.has_warnings
