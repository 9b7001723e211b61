"""Standard Arrange/Act/Assert test scaffolds."""

from ..constants import RED_PHASE_ASSERTION
from .models import AccessibilityFocus, CaseCategory, CaseContext


def generate_scaffold(ctx: CaseContext) -> str:
    """Generate a scaffold test body for one case.

    The body is not indented and not wrapped in an ``it()`` declaration.
    It always ends with the red-phase assertion.

    Args:
        ctx: The case to generate.

    Returns:
        The test body source.
    """
    if ctx.category == CaseCategory.ACCESSIBILITY:
        lines = _accessibility_lines(ctx)
    elif ctx.category == CaseCategory.ERROR:
        lines = _error_lines(ctx)
    else:
        lines = _standard_lines(ctx)

    lines.extend(["", RED_PHASE_ASSERTION])
    return "\n".join(lines)


def _arrange_lines(ctx: CaseContext, extra_props: list[str] | None = None) -> list[str]:
    """Render call with a props hint, shared by the standard and error bodies."""
    if ctx.props:
        props_hint = f"// Required props: {ctx.props}"
    else:
        props_hint = "// TODO: Add required props if needed"

    lines = [
        "// Arrange",
        f"const {{ user }} = render({ctx.subject_name}, {{",
        "  props: {",
        f"    {props_hint}",
        *(f"    {line}" for line in extra_props or []),
        "  }",
        "});",
    ]
    if ctx.events:
        lines.append(f"// Available events: {ctx.events}")
    return lines


def _standard_lines(ctx: CaseContext) -> list[str]:
    return [
        *_arrange_lines(ctx),
        "",
        "// Act",
        "// TODO: Implement user interactions based on scenario:",
        f"// {ctx.scenario}",
        "// Examples:",
        "//   await user.click(screen.getByRole('button', { name: /submit/i }));",
        "//   await user.type(screen.getByLabelText('Email'), 'test@example.com');",
        "//   await user.selectOptions(screen.getByLabelText('Country'), 'US');",
        "",
        "// Assert",
        f"// TODO: Add assertions to verify: {ctx.scenario}",
        "// Examples:",
        "//   expect(screen.getByText('Success!')).toBeInTheDocument();",
        "//   expect(screen.queryByText('Error')).not.toBeInTheDocument();",
        "//   expect(screen.getByRole('alert')).toHaveTextContent('Saved');",
    ]


def _error_lines(ctx: CaseContext) -> list[str]:
    return [
        "const mockErrorHandler = vi.fn();",
        "",
        *_arrange_lines(ctx, extra_props=["onError: mockErrorHandler,"]),
        "",
        "// Act - Trigger error condition",
        "// TODO: Trigger the error scenario:",
        f"// {ctx.scenario}",
        "// Examples:",
        "//   await user.type(screen.getByLabelText('Email'), 'invalid-email');",
        "//   await user.click(screen.getByRole('button', { name: /submit/i }));",
        "//",
        "// For async errors, wait for the UI to settle:",
        "//   await waitFor(() => {",
        "//     expect(screen.getByRole('alert')).toBeInTheDocument();",
        "//   });",
        "",
        "// Assert - Verify error handling",
        "// TODO: Verify error is handled correctly:",
        "// Examples:",
        "//   expect(screen.getByRole('alert')).toHaveTextContent('Invalid email');",
        "//   expect(screen.getByText(/error/i)).toBeInTheDocument();",
        "//   expect(mockErrorHandler).toHaveBeenCalledWith(expect.any(Error));",
    ]


def _accessibility_lines(ctx: CaseContext) -> list[str]:
    focus = ctx.resolved_focus

    if focus == AccessibilityFocus.KEYBOARD:
        return [
            "// Arrange",
            f"const {{ user }} = render({ctx.subject_name});",
            "",
            "// Act - Test keyboard navigation",
            "// TODO: Test keyboard interactions:",
            f"// {ctx.scenario}",
            "// Examples:",
            "//   await user.tab();",
            "//   expect(screen.getByRole('button')).toHaveFocus();",
            "//",
            "//   await user.keyboard('{Enter}');",
            "//   expect(screen.getByText('Action completed')).toBeInTheDocument();",
            "//",
            "//   await user.keyboard('{Escape}');",
            "//   expect(screen.queryByRole('dialog')).not.toBeInTheDocument();",
            "",
            "// Assert - Verify keyboard accessibility",
            f"// TODO: Verify keyboard accessibility: {ctx.description}",
        ]

    if focus == AccessibilityFocus.SCREEN_READER:
        return [
            "// Arrange",
            f"render({ctx.subject_name});",
            "",
            "// Assert - Check accessibility attributes",
            "// TODO: Verify screen reader accessibility:",
            f"// {ctx.scenario}",
            "// Examples:",
            "//   const button = screen.getByRole('button', { name: /submit/i });",
            "//   expect(button).toHaveAccessibleName('Submit form');",
            "//   expect(button).toHaveAccessibleDescription('Click to submit the form');",
            "//",
            "//   const heading = screen.getByRole('heading', { level: 1 });",
            "//   expect(heading).toHaveTextContent('Page Title');",
            "//",
            "//   const input = screen.getByLabelText('Email address');",
            "//   expect(input).toBeRequired();",
            "//   expect(input).toHaveAttribute('aria-invalid', 'false');",
        ]

    return [
        "// Arrange",
        f"render({ctx.subject_name});",
        "",
        "// Assert - Check accessibility",
        "// TODO: Verify accessibility requirement:",
        f"// {ctx.scenario}",
        "// Examples:",
        "//   // Semantic HTML",
        "//   expect(screen.getByRole('button')).toBeInTheDocument();",
        "//   expect(screen.getByRole('heading', { level: 2 })).toBeInTheDocument();",
        "//",
        "//   // ARIA attributes",
        "//   expect(screen.getByRole('navigation')).toHaveAttribute('aria-label', 'Main');",
        "//",
        "//   // Manual checks",
        "//   // - Focus indicator is visible",
        "//   // - Color contrast meets WCAG AA",
    ]
