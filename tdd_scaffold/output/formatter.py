"""Output formatting for validation results."""

import json
from dataclasses import asdict
from typing import Literal

from ..validators.base import FullValidationResult, Severity, ValidationIssue, ValidationResult


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    errors = result.error_issues
    warnings = result.warning_issues

    lines.append("ERRORS:")
    if errors:
        for issue in errors:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("WARNINGS:")
    if warnings:
        for issue in warnings:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    if isinstance(result, FullValidationResult):
        summary = result.summary
        lines.append("")
        lines.append("SUMMARY:")
        lines.append(f"  Accessibility tests: {_yes_no(summary.has_accessibility_tests)}")
        lines.append(f"  TODO guidance: {_yes_no(summary.has_todo_comments)}")
        lines.append(f"  Red phase: {_yes_no(summary.follows_red_phase)}")

    lines.append("")
    if result.valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    return f"{symbol} {issue.code}: {issue.message}"


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "valid": result.valid,
        "error_count": len(result.error_issues),
        "warning_count": len(result.warning_issues),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    if isinstance(result, FullValidationResult):
        data["summary"] = asdict(result.summary)
    return json.dumps(data, indent=2)
