"""Tests for assistant-oriented scaffold bodies."""

import pytest

from tdd_scaffold.constants import RED_PHASE_ASSERTION, RED_PHASE_SENTINEL
from tdd_scaffold.generator.assistant import generate_assistant_scaffold
from tdd_scaffold.generator.models import AccessibilityFocus, CaseCategory, CaseContext


@pytest.fixture
def happy_context(login_requirements):
    return CaseContext.from_scenario(
        "LoginForm",
        "User logs in with valid credentials",
        CaseCategory.HAPPY,
        requirements=login_requirements,
    )


class TestContextHeader:
    def test_scenario_story_and_criteria(self, happy_context):
        body = generate_assistant_scaffold(happy_context)
        lines = body.splitlines()
        assert lines[0] == "// Scenario: User logs in with valid credentials"
        assert lines[1] == "// User Story: As a user, I want to log in so that I can access my account"
        assert lines[2] == "// Acceptance Criteria:"
        assert lines[3] == "//   - User can enter email and password"

    def test_props_and_events(self, happy_context):
        body = generate_assistant_scaffold(happy_context)
        assert "// Component props: email: string, password: string" in body
        assert "// Component events: submit, cancel" in body

    def test_minimal_header(self):
        ctx = CaseContext.from_scenario("LoginForm", "Shows form", CaseCategory.HAPPY)
        lines = generate_assistant_scaffold(ctx).splitlines()
        assert lines[0] == "// Scenario: Shows form"
        assert lines[1] == "//"

    def test_accessibility_header_omits_props(self, login_requirements):
        ctx = CaseContext.from_scenario(
            "LoginForm",
            "Works with keyboard",
            CaseCategory.ACCESSIBILITY,
            requirements=login_requirements,
            focus=AccessibilityFocus.KEYBOARD,
        )
        body = generate_assistant_scaffold(ctx)
        assert "// User Story:" in body
        assert "Component props" not in body


class TestAssistantBodies:
    def test_standard_steps(self, happy_context):
        body = generate_assistant_scaffold(happy_context)
        assert "// ASSISTANT INSTRUCTIONS:" in body
        assert "// STEP 1: Arrange" in body
        assert "// STEP 2: Act" in body
        assert "// STEP 3: Assert" in body
        assert "// TODO: Add props based on: email: string, password: string" in body
        assert "until the component is implemented." in body

    def test_error_steps(self, login_requirements):
        ctx = CaseContext.from_scenario(
            "LoginForm", "Invalid password", CaseCategory.ERROR, requirements=login_requirements
        )
        body = generate_assistant_scaffold(ctx)
        assert "ERROR HANDLING test" in body
        assert "const mockErrorHandler = vi.fn();" in body
        assert "onError: mockErrorHandler," in body
        assert "until error handling is implemented." in body

    @pytest.mark.parametrize(
        "focus, marker, closing",
        [
            (AccessibilityFocus.KEYBOARD, "KEYBOARD ACCESSIBILITY", "keyboard support is implemented"),
            (AccessibilityFocus.SCREEN_READER, "SCREEN READER ACCESSIBILITY", "accessibility attributes are added"),
            (AccessibilityFocus.GENERAL, "general ACCESSIBILITY", "accessibility is implemented"),
        ],
    )
    def test_accessibility_variants(self, focus, marker, closing):
        ctx = CaseContext.from_scenario(
            "LoginForm", "Is accessible", CaseCategory.ACCESSIBILITY, focus=focus
        )
        body = generate_assistant_scaffold(ctx)
        assert marker in body
        assert f"until {closing}." in body

    def test_ends_with_red_phase(self, happy_context):
        body = generate_assistant_scaffold(happy_context)
        assert body.endswith(RED_PHASE_ASSERTION)
        assert body.count(RED_PHASE_SENTINEL) == 1
        assert "// Remove the assertion below once the test is implemented." in body

    def test_differs_from_standard(self, happy_context):
        from tdd_scaffold.generator.scaffold import generate_scaffold

        assert generate_assistant_scaffold(happy_context) != generate_scaffold(happy_context)
