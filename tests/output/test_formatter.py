"""Tests for validation result formatting."""

import json

from tdd_scaffold.output.formatter import format_validation_result
from tdd_scaffold.validators.base import FullValidationResult, ValidationResult, ValidationSummary


def make_result(errors=(), warnings=()):
    result = ValidationResult()
    for code, message in errors:
        result.add_error(code, message)
    for code, message in warnings:
        result.add_warning(code, message)
    return result


class TestTextFormat:
    def test_passed(self):
        output = format_validation_result(make_result())
        assert "ERRORS:\n  (none)" in output
        assert "WARNINGS:\n  (none)" in output
        assert output.endswith("Validation passed")

    def test_passed_with_warnings(self):
        output = format_validation_result(make_result(warnings=[("NO_TODO_COMMENTS", "No TODO")]))
        assert "⚠ NO_TODO_COMMENTS: No TODO" in output
        assert output.endswith("Validation passed with 1 warning(s)")

    def test_failed(self):
        output = format_validation_result(
            make_result(errors=[("EMPTY_CONTENT", "Test content is empty")], warnings=[("W", "w")])
        )
        assert "✘ EMPTY_CONTENT: Test content is empty" in output
        assert output.endswith("Validation failed: 1 error(s), 1 warning(s)")

    def test_summary_block(self):
        result = FullValidationResult(
            summary=ValidationSummary(has_accessibility_tests=True, follows_red_phase=True)
        )
        output = format_validation_result(result)
        assert "SUMMARY:" in output
        assert "  Accessibility tests: yes" in output
        assert "  TODO guidance: no" in output
        assert "  Red phase: yes" in output

    def test_no_summary_for_plain_result(self):
        assert "SUMMARY:" not in format_validation_result(make_result())


class TestJsonFormat:
    def test_structure(self):
        result = make_result(errors=[("E", "error")], warnings=[("W", "warning")])
        data = json.loads(format_validation_result(result, "json"))

        assert data["valid"] is False
        assert data["error_count"] == 1
        assert data["warning_count"] == 1
        assert data["issues"][0] == {
            "code": "E",
            "message": "error",
            "severity": "error",
            "details": {},
        }
        assert "summary" not in data

    def test_summary(self):
        result = FullValidationResult(summary=ValidationSummary(total_warnings=2))
        data = json.loads(format_validation_result(result, "json"))
        assert data["valid"] is True
        assert data["summary"]["total_warnings"] == 2
        assert data["summary"]["follows_red_phase"] is False
