"""Grouping of test cases into labelled describe() sections."""

from typing import TYPE_CHECKING

from ..constants import ACCESSIBILITY_SECTION
from ..requirements.models import GenerationOptions, Requirements
from .models import AccessibilityFocus, CaseCategory, CaseContext
from .orchestrator import build_case

if TYPE_CHECKING:
    from ..remote.generator import RemoteGenerator

SECTION_INDENT = " " * 2

# (description, scenario, focus) for the mandatory accessibility cases
ACCESSIBILITY_CASES = (
    (
        "be accessible to screen readers",
        "Component should have proper ARIA labels and semantic HTML",
        AccessibilityFocus.SCREEN_READER,
    ),
    (
        "be keyboard navigable",
        "User should be able to navigate and interact using keyboard only",
        AccessibilityFocus.KEYBOARD,
    ),
)


def build_section(
    title: str,
    scenarios: list[str],
    subject_name: str,
    category: CaseCategory,
    options: GenerationOptions,
    requirements: Requirements | None = None,
    remote: "RemoteGenerator | None" = None,
) -> str:
    """Build one section with a test case per scenario, in input order.

    Callers skip empty scenario lists.

    Args:
        title: Section label, e.g. "Happy Path".
        scenarios: Scenario sentences.
        subject_name: Component under test.
        category: Category shared by all scenarios.
        options: Generation options.
        requirements: Source requirements, used for props/events and context.
        remote: Remote generator shared across cases.

    Returns:
        The indented ``describe()`` block.
    """
    contexts = [
        CaseContext.from_scenario(subject_name, scenario, category, requirements)
        for scenario in scenarios
    ]
    return _render_section(title, contexts, options, remote)


def build_accessibility_section(
    subject_name: str,
    options: GenerationOptions,
    requirements: Requirements | None = None,
    remote: "RemoteGenerator | None" = None,
) -> str:
    """Build the mandatory accessibility section with its two fixed cases."""
    contexts = [
        CaseContext.from_scenario(
            subject_name,
            scenario,
            CaseCategory.ACCESSIBILITY,
            requirements,
            description=description,
            focus=focus,
        )
        for description, scenario, focus in ACCESSIBILITY_CASES
    ]
    return _render_section(ACCESSIBILITY_SECTION, contexts, options, remote)


def _render_section(
    title: str,
    contexts: list[CaseContext],
    options: GenerationOptions,
    remote: "RemoteGenerator | None",
) -> str:
    cases = [build_case(ctx, options, remote) for ctx in contexts]
    return "\n".join(
        [
            f"{SECTION_INDENT}describe('{title}', () => {{",
            "\n\n".join(cases),
            f"{SECTION_INDENT}}});",
        ]
    )
