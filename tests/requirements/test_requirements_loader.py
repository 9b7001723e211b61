"""Tests for requirements loading and parsing."""

import pytest

from tdd_scaffold.requirements.errors import RequirementsLoadError, RequirementsSchemaError
from tdd_scaffold.requirements.loader import (
    load_requirements,
    load_yaml,
    parse_requirements_from_string,
)


class TestLoadYaml:
    def test_load_valid_file(self, examples_dir):
        data = load_yaml(examples_dir / "login_form.yaml")
        assert "user_story" in data

    def test_load_nonexistent_file(self):
        with pytest.raises(RequirementsLoadError) as exc_info:
            load_yaml("/nonexistent/file.yaml")
        assert "File not found" in str(exc_info.value)

    def test_load_directory(self, tmp_path):
        with pytest.raises(RequirementsLoadError) as exc_info:
            load_yaml(tmp_path)
        assert "Not a file" in str(exc_info.value)

    def test_load_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("happy_path: [unclosed\n")
        with pytest.raises(RequirementsLoadError) as exc_info:
            load_yaml(path)
        assert "Invalid YAML" in str(exc_info.value)

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}

    def test_load_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(RequirementsLoadError) as exc_info:
            load_yaml(path)
        assert "Expected YAML mapping at root" in str(exc_info.value)


class TestLoadRequirements:
    def test_load_login_example(self, examples_dir):
        req = load_requirements(examples_dir / "login_form.yaml")
        assert req.narrative.startswith("As a registered user")
        assert len(req.acceptance_criteria) == 3
        assert req.happy_path == ['User enters valid credentials and clicks "Log in"']
        assert req.props == "initialEmail: string, loading: boolean"
        assert req.events == "submit, forgot-password"

    def test_load_json_with_camel_case(self, examples_dir):
        req = load_requirements(examples_dir / "minimal.json")
        assert req.narrative.startswith("As a visitor")
        assert req.happy_path == [
            "Greeting text is displayed",
            "Greeting includes the visitor name",
        ]

    def test_schema_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("happy_path: 42\n")
        with pytest.raises(RequirementsSchemaError) as exc_info:
            load_requirements(path)
        assert exc_info.value.errors
        assert exc_info.value.errors[0]["loc"].startswith("happy_path")


class TestParseRequirementsFromString:
    def test_parse(self, login_requirements_yaml):
        req = parse_requirements_from_string(login_requirements_yaml)
        assert req.edge_cases == ["Empty email field"]
        assert req.error_cases == ["Invalid password shows error"]

    def test_parse_empty_string(self):
        req = parse_requirements_from_string("")
        assert not req.has_scenarios

    def test_parse_invalid_yaml(self):
        with pytest.raises(RequirementsLoadError):
            parse_requirements_from_string("key: [unclosed")

    def test_parse_non_mapping(self):
        with pytest.raises(RequirementsLoadError):
            parse_requirements_from_string("just a string")
