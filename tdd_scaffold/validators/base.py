"""Base classes for validation results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    code: str
    message: str
    severity: Severity
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.severity.value.upper()}: {self.code} - {self.message}"


@dataclass
class ValidationResult:
    """Result of running a validation check."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def error_issues(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warning_issues(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def errors(self) -> list[str]:
        """Error messages, in the order they were found."""
        return [i.message for i in self.error_issues]

    @property
    def warnings(self) -> list[str]:
        """Warning messages, in the order they were found."""
        return [i.message for i in self.warning_issues]

    @property
    def has_errors(self) -> bool:
        return len(self.error_issues) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warning_issues) > 0

    @property
    def valid(self) -> bool:
        """True when no error-level issue was found."""
        return not self.has_errors

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def add_error(self, code: str, message: str, **details: Any) -> None:
        """Add an error issue."""
        self.issues.append(
            ValidationIssue(code=code, message=message, severity=Severity.ERROR, details=details)
        )

    def add_warning(self, code: str, message: str, **details: Any) -> None:
        """Add a warning issue."""
        self.issues.append(
            ValidationIssue(code=code, message=message, severity=Severity.WARNING, details=details)
        )

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)


@dataclass
class ValidationSummary:
    """Quality signals gathered from a generated test file."""

    total_errors: int = 0
    total_warnings: int = 0
    has_accessibility_tests: bool = False
    has_todo_comments: bool = False
    follows_red_phase: bool = False


@dataclass
class FullValidationResult(ValidationResult):
    """Combined content and structure validation with a summary."""

    summary: ValidationSummary = field(default_factory=ValidationSummary)
