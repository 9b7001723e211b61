"""Tests for standard scaffold bodies."""

import pytest

from tdd_scaffold.constants import RED_PHASE_ASSERTION, RED_PHASE_SENTINEL
from tdd_scaffold.generator.models import AccessibilityFocus, CaseCategory, CaseContext
from tdd_scaffold.generator.scaffold import generate_scaffold


def make_context(category=CaseCategory.HAPPY, scenario="User logs in", focus=None, **kwargs):
    return CaseContext(
        subject_name="LoginForm",
        scenario=scenario,
        category=category,
        description=kwargs.pop("description", "user logs in"),
        focus=focus,
        **kwargs,
    )


class TestStandardScaffold:
    @pytest.mark.parametrize(
        "category", [CaseCategory.ACCEPTANCE, CaseCategory.HAPPY, CaseCategory.EDGE]
    )
    def test_arrange_act_assert(self, category):
        body = generate_scaffold(make_context(category))
        assert "// Arrange" in body
        assert "// Act" in body
        assert "// Assert" in body
        assert "const { user } = render(LoginForm, {" in body
        assert "// User logs in" in body
        assert "// TODO: Add assertions to verify: User logs in" in body

    def test_ends_with_red_phase_assertion(self):
        body = generate_scaffold(make_context())
        assert body.endswith("\n\n" + RED_PHASE_ASSERTION)

    def test_props_hint(self):
        body = generate_scaffold(make_context(props="email: string"))
        assert "// Required props: email: string" in body
        assert "// TODO: Add required props if needed" not in body

    def test_missing_props_todo(self):
        body = generate_scaffold(make_context())
        assert "// TODO: Add required props if needed" in body

    def test_events_hint(self):
        body = generate_scaffold(make_context(events="submit, cancel"))
        assert "// Available events: submit, cancel" in body

    def test_no_events_line_without_events(self):
        assert "Available events" not in generate_scaffold(make_context())

    def test_not_indented(self):
        body = generate_scaffold(make_context())
        assert body.splitlines()[0] == "// Arrange"


class TestErrorScaffold:
    def test_mock_error_handler(self):
        body = generate_scaffold(make_context(CaseCategory.ERROR))
        assert body.startswith("const mockErrorHandler = vi.fn();")
        assert "onError: mockErrorHandler," in body
        assert "// Act - Trigger error condition" in body
        assert "// Assert - Verify error handling" in body
        assert "waitFor" in body

    def test_props_hint_kept(self):
        body = generate_scaffold(make_context(CaseCategory.ERROR, props="email: string"))
        assert "// Required props: email: string" in body


class TestAccessibilityScaffold:
    def test_keyboard(self):
        body = generate_scaffold(
            make_context(CaseCategory.ACCESSIBILITY, focus=AccessibilityFocus.KEYBOARD)
        )
        assert "const { user } = render(LoginForm);" in body
        assert "await user.tab();" in body
        assert "{Escape}" in body

    def test_screen_reader(self):
        body = generate_scaffold(
            make_context(CaseCategory.ACCESSIBILITY, focus=AccessibilityFocus.SCREEN_READER)
        )
        assert "render(LoginForm);" in body
        assert "toHaveAccessibleName" in body
        assert "const { user }" not in body

    def test_general(self):
        body = generate_scaffold(
            make_context(CaseCategory.ACCESSIBILITY, scenario="Has good contrast")
        )
        assert "// Assert - Check accessibility" in body
        assert "Color contrast meets WCAG AA" in body

    def test_props_ignored(self):
        body = generate_scaffold(
            make_context(
                CaseCategory.ACCESSIBILITY,
                focus=AccessibilityFocus.KEYBOARD,
                props="email: string",
            )
        )
        assert "Required props" not in body


@pytest.mark.parametrize("category", list(CaseCategory))
def test_every_body_has_single_sentinel(category):
    body = generate_scaffold(make_context(category))
    assert body.count(RED_PHASE_SENTINEL) == 1
    assert body.rstrip().endswith(RED_PHASE_ASSERTION)


def test_deterministic():
    ctx = make_context(CaseCategory.ERROR, props="a: string", events="b")
    assert generate_scaffold(ctx) == generate_scaffold(ctx)
