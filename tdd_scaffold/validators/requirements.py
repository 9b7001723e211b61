"""Pre-generation checks on a Requirements value."""

from ..requirements.models import Requirements
from .base import ValidationResult

MISSING_REQUIREMENTS_MESSAGE = "Requirements object is required"
NO_SCENARIOS_MESSAGE = (
    "At least one test scenario is required "
    "(acceptance criteria, happy path, edge case, or error case)"
)
MISSING_NARRATIVE_MESSAGE = "User story is required"


def validate_requirements(model: Requirements | None) -> ValidationResult:
    """Check that requirements carry a user story and at least one scenario.

    Only errors are produced; a result without errors may be passed to the
    assembler.

    Args:
        model: The requirements to check, or None.

    Returns:
        ValidationResult with one error per failed check.
    """
    result = ValidationResult()

    if model is None:
        result.add_error("REQUIREMENTS_MISSING", MISSING_REQUIREMENTS_MESSAGE)
        return result

    if not model.has_scenarios:
        result.add_error("NO_SCENARIOS", NO_SCENARIOS_MESSAGE)

    if not model.narrative or not model.narrative.strip():
        result.add_error("NARRATIVE_MISSING", MISSING_NARRATIVE_MESSAGE)

    return result
