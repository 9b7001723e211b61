"""Data models for test case generation."""

import re
from dataclasses import dataclass
from enum import Enum

from ..constants import (
    ACCEPTANCE_SECTION,
    ACCESSIBILITY_SECTION,
    EDGE_CASES_SECTION,
    ERROR_HANDLING_SECTION,
    HAPPY_PATH_SECTION,
)
from ..requirements.models import Requirements
from .naming import normalize_test_name


class CaseCategory(Enum):
    """Category of a scenario; selects the scaffold sub-variant."""

    ACCEPTANCE = "acceptance"
    HAPPY = "happy"
    EDGE = "edge"
    ERROR = "error"
    ACCESSIBILITY = "accessibility"

    @property
    def label(self) -> str:
        """Label used in the per-case comment and the remote prompt."""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    CaseCategory.ACCEPTANCE: "Acceptance Criteria",
    CaseCategory.HAPPY: "Happy Path",
    CaseCategory.EDGE: "Edge Case",
    CaseCategory.ERROR: "Error Handling",
    CaseCategory.ACCESSIBILITY: "Accessibility",
}

# Section titles in output order
SECTION_TITLES = {
    CaseCategory.ACCEPTANCE: ACCEPTANCE_SECTION,
    CaseCategory.HAPPY: HAPPY_PATH_SECTION,
    CaseCategory.EDGE: EDGE_CASES_SECTION,
    CaseCategory.ERROR: ERROR_HANDLING_SECTION,
    CaseCategory.ACCESSIBILITY: ACCESSIBILITY_SECTION,
}

# Categories whose description reads "handle <scenario>"
HANDLE_CATEGORIES = frozenset({CaseCategory.EDGE, CaseCategory.ERROR})


class AccessibilityFocus(Enum):
    """Sub-variant of an accessibility test."""

    KEYBOARD = "keyboard"
    SCREEN_READER = "screen_reader"
    GENERAL = "general"


KEYBOARD_PATTERN = re.compile(r"keyboard", re.IGNORECASE)
SCREEN_READER_PATTERN = re.compile(r"screen[\s-]?readers?|\baria\b", re.IGNORECASE)


def infer_accessibility_focus(*texts: str) -> AccessibilityFocus:
    """Infer the accessibility sub-variant from free text.

    Keyboard wins over screen reader when both are mentioned.
    """
    combined = " ".join(t for t in texts if t)
    if KEYBOARD_PATTERN.search(combined):
        return AccessibilityFocus.KEYBOARD
    if SCREEN_READER_PATTERN.search(combined):
        return AccessibilityFocus.SCREEN_READER
    return AccessibilityFocus.GENERAL


# Description used when a scenario has no letters or digits
UNNAMED_SCENARIO = "unnamed scenario"


def single_line(text: str | None) -> str:
    """Collapse all whitespace, newlines included, to single spaces.

    Every context string is emitted inside ``//`` line comments.
    """
    return " ".join((text or "").split())


@dataclass(frozen=True)
class CaseContext:
    """Everything needed to generate one test case."""

    subject_name: str
    scenario: str
    category: CaseCategory
    description: str
    props: str | None = None
    events: str | None = None
    narrative: str | None = None
    acceptance_criteria: tuple[str, ...] = ()
    focus: AccessibilityFocus | None = None

    @classmethod
    def from_scenario(
        cls,
        subject_name: str,
        scenario: str,
        category: CaseCategory,
        requirements: Requirements | None = None,
        description: str | None = None,
        focus: AccessibilityFocus | None = None,
    ) -> "CaseContext":
        """Build a context, deriving the description from the scenario text."""
        scenario = single_line(scenario)
        if description is None:
            description = normalize_test_name(scenario) or UNNAMED_SCENARIO
            if category in HANDLE_CATEGORIES:
                description = f"handle {description}"

        if requirements is None:
            return cls(
                subject_name=subject_name,
                scenario=scenario,
                category=category,
                description=description,
                focus=focus,
            )

        return cls(
            subject_name=subject_name,
            scenario=scenario,
            category=category,
            description=description,
            props=single_line(requirements.props) or None,
            events=single_line(requirements.events) or None,
            narrative=single_line(requirements.narrative) or None,
            acceptance_criteria=tuple(
                single_line(criterion) for criterion in requirements.acceptance_criteria
            ),
            focus=focus,
        )

    @property
    def resolved_focus(self) -> AccessibilityFocus:
        """Explicit focus if given, otherwise inferred from the text."""
        if self.focus is not None:
            return self.focus
        return infer_accessibility_focus(self.description, self.scenario)
