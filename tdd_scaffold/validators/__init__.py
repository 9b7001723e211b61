"""Validators for requirements and generated test content."""

from .base import (
    FullValidationResult,
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationSummary,
)
from .content import full_validate, validate_content, validate_structure
from .requirements import validate_requirements

__all__ = [
    "FullValidationResult",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSummary",
    "full_validate",
    "validate_content",
    "validate_structure",
    "validate_requirements",
]
