"""Post-generation quality checks for test source text."""

import re

from ..constants import (
    ACCESSIBILITY_SECTION,
    COMPONENT_FILE_SUFFIX,
    RED_PHASE_SENTINEL,
    SECTION_TITLES,
    TODO_MARKER,
)
from .base import FullValidationResult, ValidationResult, ValidationSummary

REQUIRED_TOKENS = ("describe", "it", "expect", "render")

DESCRIBE_CALL = re.compile(r"describe\(")
IT_CALL = re.compile(r"\bit\(")
DESCRIBE_NAME = re.compile(r"describe\(['\"](.+?)['\"]")
TEST_NAME = re.compile(r"\bit\(['\"]should\s+(.*?)['\"]")
ASYNC_TEST = re.compile(r"\bit\([^,]+,\s*async\s*\(")
AWAIT_USAGE = re.compile(r"\bawait\s+")

MIN_TEST_NAME_LENGTH = 10


def validate_content(text: str, subject_name: str) -> ValidationResult:
    """Check generated test source for required tokens and good practice.

    Missing declarations, tokens or the component import are errors; style
    and completeness problems are warnings.

    Args:
        text: The generated test source.
        subject_name: The component under test.

    Returns:
        ValidationResult with content issues.
    """
    result = ValidationResult()

    if not text or not text.strip():
        result.add_error("EMPTY_CONTENT", "Test content is empty")
        return result

    for token in (*REQUIRED_TOKENS, subject_name):
        if token not in text:
            result.add_error(
                "MISSING_TOKEN", f"Missing required import or usage: {token}", token=token
            )

    if not DESCRIBE_CALL.search(text):
        result.add_error("NO_DESCRIBE", "No describe blocks found")

    if not IT_CALL.search(text):
        result.add_error("NO_TEST_CASES", "No test cases (it blocks) found")

    if RED_PHASE_SENTINEL not in text:
        result.add_warning(
            "NO_RED_PHASE",
            "Tests may not follow TDD red phase pattern (no intentionally failing assertions)",
        )

    if text.count(TODO_MARKER) == 0:
        result.add_warning(
            "NO_TODO_COMMENTS",
            "No TODO comments found - developers may lack implementation guidance",
        )

    if "render(" in text and "const { user }" not in text:
        result.add_warning(
            "NO_USER_EVENT",
            "Consider using Testing Library user-event for better user interaction testing",
        )

    if ACCESSIBILITY_SECTION not in text:
        result.add_warning("NO_ACCESSIBILITY", "No accessibility test section found")

    async_tests = len(ASYNC_TEST.findall(text))
    awaits = len(AWAIT_USAGE.findall(text))
    if async_tests > awaits:
        result.add_warning(
            "MISSING_AWAIT",
            "Some async tests may be missing await statements",
            async_tests=async_tests,
            awaits=awaits,
        )

    if "vi." in text and "afterEach" not in text:
        result.add_warning(
            "MISSING_TEARDOWN",
            "Using vi (mocks) but missing afterEach cleanup - may cause test interference",
        )

    escaped = re.escape(subject_name)
    suffix = re.escape(COMPONENT_FILE_SUFFIX)
    import_pattern = re.compile(rf"import {escaped} from '\./{escaped}{suffix}'")
    if not import_pattern.search(text):
        result.add_error(
            "IMPORT_PATH_MISMATCH",
            f"Component import path doesn't match expected pattern: "
            f"./{subject_name}{COMPONENT_FILE_SUFFIX}",
        )

    return result


def validate_structure(text: str) -> ValidationResult:
    """Check section grouping and test naming conventions.

    Produces warnings only.
    """
    result = ValidationResult()

    if not DESCRIBE_NAME.search(text or ""):
        result.add_warning("NO_DESCRIBE_BLOCKS", "No describe blocks found")
        return result

    missing = [title for title in SECTION_TITLES if f"describe('{title}'," not in text]
    if missing:
        result.add_warning(
            "MISSING_SECTIONS",
            f"Consider adding test sections: {', '.join(missing)}",
            sections=missing,
        )

    names = TEST_NAME.findall(text)
    short = [name for name in names if len(name) < MIN_TEST_NAME_LENGTH or " " not in name]
    if short:
        result.add_warning(
            "NON_DESCRIPTIVE_NAMES",
            f"{len(short)} test(s) have very short or non-descriptive names",
            names=short,
        )

    return result


def full_validate(text: str, subject_name: str) -> FullValidationResult:
    """Run content and structure validation and summarise the findings."""
    content = validate_content(text, subject_name)
    structure = validate_structure(text)

    result = FullValidationResult()
    result.merge(content)
    result.merge(structure)

    text = text or ""
    result.summary = ValidationSummary(
        total_errors=len(result.errors),
        total_warnings=len(result.warnings),
        has_accessibility_tests=ACCESSIBILITY_SECTION in text,
        has_todo_comments=TODO_MARKER in text,
        follows_red_phase=RED_PHASE_SENTINEL in text,
    )
    return result
