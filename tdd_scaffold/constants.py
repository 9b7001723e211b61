"""Literals shared by the generators and the content validator."""

# Always-failing assertion placed at the end of every local scaffold
RED_PHASE_SENTINEL = "expect(true).toBe(false)"
RED_PHASE_ASSERTION = f"{RED_PHASE_SENTINEL}; // This should fail (TDD - Red phase)"

TODO_MARKER = "// TODO:"

ACCEPTANCE_SECTION = "Acceptance Criteria"
HAPPY_PATH_SECTION = "Happy Path"
EDGE_CASES_SECTION = "Edge Cases"
ERROR_HANDLING_SECTION = "Error Handling"
ACCESSIBILITY_SECTION = "Accessibility"

# Canonical output order
SECTION_TITLES = (
    ACCEPTANCE_SECTION,
    HAPPY_PATH_SECTION,
    EDGE_CASES_SECTION,
    ERROR_HANDLING_SECTION,
    ACCESSIBILITY_SECTION,
)

TEST_FILE_SUFFIX = ".test.ts"
COMPONENT_FILE_SUFFIX = ".vue"
RENDER_HELPER_MODULE = "@/test/helpers/testing-library"
