"""Tests for the feature wizard and issue rendering."""

import pytest

from tdd_scaffold.feature.collector import build_narrative, collect_list, collect_requirements
from tdd_scaffold.feature.issue import issue_title, render_issue_body, render_issue_document


def scripted(answers):
    """Return an ask callable that replays answers and records questions."""
    remaining = list(answers)
    questions = []

    def ask(question):
        questions.append(question)
        return remaining.pop(0)

    ask.questions = questions
    return ask


LOGIN_ANSWERS = [
    "LoginForm",
    "Email and password login",
    "user",
    "to log in",
    "I can access my account",
    "User can enter email",
    "User can submit",
    "",
    "email: string",
    "submit, cancel",
    "User logs in",
    "",
    "",
    "Wrong password",
    "",
]


@pytest.fixture
def login_request():
    return collect_requirements(scripted(LOGIN_ANSWERS))


class TestCollector:
    def test_build_narrative(self):
        assert build_narrative("admin", "reports", "I save time") == (
            "As a admin, I want reports so that I save time"
        )

    def test_collect_list_stops_at_blank(self):
        ask = scripted(["one", "  two  ", "   ", "never asked"])
        assert collect_list(ask, "Item") == ["one", "two"]
        assert ask.questions == ["Item", "Item", "Item"]

    def test_collect_requirements(self, login_request):
        req = login_request.requirements
        assert login_request.component_name == "LoginForm"
        assert login_request.description == "Email and password login"
        assert req.narrative == "As a user, I want to log in so that I can access my account"
        assert req.acceptance_criteria == ["User can enter email", "User can submit"]
        assert req.happy_path == ["User logs in"]
        assert req.edge_cases == []
        assert req.error_cases == ["Wrong password"]
        assert req.props == "email: string"
        assert req.events == "submit, cancel"

    def test_blank_props_are_absent(self):
        answers = list(LOGIN_ANSWERS)
        answers[8] = ""
        answers[9] = ""
        request = collect_requirements(scripted(answers))
        assert request.requirements.props is None
        assert request.requirements.events is None

    def test_question_order(self):
        ask = scripted(LOGIN_ANSWERS)
        collect_requirements(ask)
        assert ask.questions[0] == "Component name (PascalCase)"
        assert ask.questions[8].startswith("Props")
        assert len(ask.questions) == len(LOGIN_ANSWERS)


class TestIssue:
    def test_title(self, login_request):
        assert issue_title(login_request) == "[FEATURE] LoginForm - Email and password login"

    def test_body(self, login_request):
        body = render_issue_body(login_request)
        assert "## User Story\nAs a user, I want to log in" in body
        assert "- [ ] User can enter email\n- [ ] User can submit" in body
        assert "**Component Name**: LoginForm" in body
        assert "**Props**: email: string" in body
        assert "**Events**: @submit, @cancel" in body
        assert "### Edge Cases\n- [ ] _None specified_" in body
        assert "### Error Cases\n- [ ] Wrong password" in body

    def test_document_front_matter(self, login_request):
        document = render_issue_document(login_request)
        assert document.startswith(
            "---\ntitle: [FEATURE] LoginForm - Email and password login\n"
            "labels: feature-request, tdd, enhancement\n---\n\n## User Story"
        )
