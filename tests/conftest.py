"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from tdd_scaffold.requirements.loader import parse_requirements_from_string
from tdd_scaffold.requirements.models import Requirements


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep credentials and mode switches from the host out of every test."""
    for name in ("OPENAI_API_KEY", "GITHUB_TOKEN", "TDD_REMOTE_GENERATE", "TDD_ASSISTANT_MODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def login_requirements_yaml() -> str:
    """Return the login form requirements as YAML."""
    return """
narrative: As a user, I want to log in so that I can access my account
acceptance_criteria:
  - User can enter email and password
happy_path:
  - User logs in with valid credentials
edge_cases:
  - Empty email field
error_cases:
  - Invalid password shows error
props: "email: string, password: string"
events: "submit, cancel"
"""


@pytest.fixture
def login_requirements(login_requirements_yaml) -> Requirements:
    """Return the parsed login form requirements."""
    return parse_requirements_from_string(login_requirements_yaml)


@pytest.fixture
def happy_only_requirements() -> Requirements:
    """Return requirements with a single happy path scenario."""
    return Requirements(
        narrative="As a visitor, I want to see a greeting so that I feel welcome",
        happy_path=["Greeting text is displayed"],
    )
