"""Pydantic models for feature requirements and generation options."""

import re

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Leading list markers such as "- ", "* ", "1. " or "- [ ] " copied from issue bodies
BULLET_PATTERN = re.compile(r"^\s*(?:[-*+]|\d+[.)])?\s*(?:\[[ xX]?\]\s*)?")

SCENARIO_FIELDS = ("acceptance_criteria", "happy_path", "edge_cases", "error_cases")


def _split_scenarios(value: str) -> list[str]:
    """Split a multi-line scenario block into one scenario per line."""
    scenarios = []
    for line in value.splitlines():
        cleaned = BULLET_PATTERN.sub("", line, count=1).strip()
        if cleaned:
            scenarios.append(cleaned)
    return scenarios


class Requirements(BaseModel):
    """A feature request: user story, criteria and test scenarios."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    narrative: str = Field(
        default="",
        validation_alias=AliasChoices("narrative", "user_story", "userStory"),
    )
    acceptance_criteria: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("acceptance_criteria", "acceptanceCriteria"),
    )
    happy_path: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("happy_path", "happyPath"),
    )
    edge_cases: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("edge_cases", "edgeCases"),
    )
    error_cases: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("error_cases", "errorCases"),
    )
    props: str | None = None
    events: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_scenarios(cls, data: dict) -> dict:
        """Accept multi-line strings and nulls for scenario lists."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for key, value in list(data.items()):
            if value is None and _is_scenario_key(key):
                data[key] = []
            elif isinstance(value, str) and _is_scenario_key(key):
                data[key] = _split_scenarios(value)
            elif isinstance(value, list) and _is_scenario_key(key):
                data[key] = [str(item).strip() for item in value if str(item).strip()]

        # Empty descriptors are treated as absent
        for key in ("props", "events"):
            if isinstance(data.get(key), str) and not data[key].strip():
                data[key] = None

        return data

    @property
    def has_scenarios(self) -> bool:
        """Check if at least one scenario list is populated."""
        return any(getattr(self, name) for name in SCENARIO_FIELDS)

    @property
    def total_scenarios(self) -> int:
        """Number of scenarios across all lists."""
        return sum(len(getattr(self, name)) for name in SCENARIO_FIELDS)


def _is_scenario_key(key: str) -> bool:
    snake = re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()
    return snake in SCENARIO_FIELDS


class IssueRef(BaseModel):
    """Reference to the tracker issue a test file is generated from."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str


class GenerationOptions(BaseModel):
    """Per-call configuration for test generation.

    Tier selection:
        use_remote=True   remote model first, local scaffold on failure
        assistant_mode    local tier is the assistant scaffold (else standard)
    """

    model_config = ConfigDict(frozen=True)

    issue: IssueRef | None = None
    use_remote: bool = False
    assistant_mode: bool = False
