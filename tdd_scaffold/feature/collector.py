"""Sequential collection of a feature request from an operator."""

from dataclasses import dataclass
from typing import Callable

from ..requirements.models import Requirements

Ask = Callable[[str], str]


@dataclass(frozen=True)
class FeatureRequest:
    """Answers gathered by the feature wizard."""

    component_name: str
    description: str
    user_type: str
    feature: str
    benefit: str
    requirements: Requirements


def build_narrative(user_type: str, feature: str, benefit: str) -> str:
    """Compose an "As a / I want / so that" user story."""
    return f"As a {user_type}, I want {feature} so that {benefit}"


def collect_list(ask: Ask, question: str = "  - ") -> list[str]:
    """Ask repeatedly until a blank answer and return the non-blank answers."""
    answers = []
    while True:
        answer = ask(question).strip()
        if not answer:
            return answers
        answers.append(answer)


def collect_requirements(ask: Ask) -> FeatureRequest:
    """Ask every wizard question in order and build the feature request.

    Args:
        ask: Callable that shows a question and returns the answer text.

    Returns:
        The collected FeatureRequest.
    """
    component_name = ask("Component name (PascalCase)").strip()
    description = ask("Brief description").strip()
    user_type = ask("User type (e.g., user, admin, guest)").strip()
    feature = ask("What feature do they want?").strip()
    benefit = ask("What benefit does it provide?").strip()

    acceptance_criteria = collect_list(ask, "Acceptance criterion (blank to finish)")

    props = ask('Props (e.g., "value: string, disabled: boolean")').strip()
    events = ask('Events (e.g., "change, submit, cancel")').strip()

    happy_path = collect_list(ask, "Happy path scenario (blank to finish)")
    edge_cases = collect_list(ask, "Edge case (blank to finish)")
    error_cases = collect_list(ask, "Error case (blank to finish)")

    requirements = Requirements(
        narrative=build_narrative(user_type, feature, benefit),
        acceptance_criteria=acceptance_criteria,
        happy_path=happy_path,
        edge_cases=edge_cases,
        error_cases=error_cases,
        props=props or None,
        events=events or None,
    )
    return FeatureRequest(
        component_name=component_name,
        description=description,
        user_type=user_type,
        feature=feature,
        benefit=benefit,
        requirements=requirements,
    )
