"""Richly annotated scaffolds for in-editor completion assistants.

Completion assistants suggest better code when the surrounding comments spell
out the intent. These bodies restate the user story and acceptance criteria,
list numbered steps and give several worked examples per step before each
TODO, so accepting a suggestion at the TODO usually yields a usable test.
"""

from ..constants import RED_PHASE_ASSERTION
from .models import AccessibilityFocus, CaseCategory, CaseContext


def generate_assistant_scaffold(ctx: CaseContext) -> str:
    """Generate an assistant-oriented test body for one case.

    Same contract as ``generate_scaffold``: unindented, unwrapped, ending
    with the red-phase assertion.
    """
    lines = _context_header(ctx)

    if ctx.category == CaseCategory.ACCESSIBILITY:
        focus = ctx.resolved_focus
        if focus == AccessibilityFocus.KEYBOARD:
            lines.extend(_keyboard_lines(ctx))
            closing = "keyboard support is implemented"
        elif focus == AccessibilityFocus.SCREEN_READER:
            lines.extend(_screen_reader_lines(ctx))
            closing = "accessibility attributes are added"
        else:
            lines.extend(_general_accessibility_lines(ctx))
            closing = "accessibility is implemented"
    elif ctx.category == CaseCategory.ERROR:
        lines.extend(_error_lines(ctx))
        closing = "error handling is implemented"
    else:
        lines.extend(_standard_lines(ctx))
        closing = "the component is implemented"

    lines.extend(
        [
            "",
            f"// TDD Red Phase: this should fail until {closing}.",
            "// Remove the assertion below once the test is implemented.",
            RED_PHASE_ASSERTION,
        ]
    )
    return "\n".join(lines)


def _context_header(ctx: CaseContext) -> list[str]:
    lines = [f"// Scenario: {ctx.scenario}"]
    if ctx.narrative:
        lines.append(f"// User Story: {ctx.narrative}")
    if ctx.acceptance_criteria:
        lines.append("// Acceptance Criteria:")
        lines.extend(f"//   - {criterion}" for criterion in ctx.acceptance_criteria)
    if ctx.category != CaseCategory.ACCESSIBILITY:
        if ctx.props:
            lines.append(f"// Component props: {ctx.props}")
        if ctx.events:
            lines.append(f"// Component events: {ctx.events}")
    lines.append("//")
    return lines


def _standard_lines(ctx: CaseContext) -> list[str]:
    props_source = ctx.props or "component requirements"
    return [
        "// ASSISTANT INSTRUCTIONS:",
        f"// 1. Render the {ctx.subject_name} component with appropriate props",
        f'// 2. Simulate user interactions that match the scenario: "{ctx.scenario}"',
        "// 3. Assert that the expected outcome is achieved",
        "//",
        "// Testing Library practices:",
        "// - Prefer getByRole() for semantic queries",
        "// - Use getByLabelText() for form inputs",
        "// - Use getByText() for text content",
        "// - Use user.click(), user.type(), user.keyboard() for interactions",
        "// - Use waitFor() for async state changes",
        "//",
        "// TDD: this test FAILS first (Red), the implementation makes it pass (Green)",
        "",
        "// STEP 1: Arrange - Set up the test environment",
        "// Render the component with the required props and take the user helper",
        f"const {{ user }} = render({ctx.subject_name}, {{",
        "  props: {",
        f"    // TODO: Add props based on: {props_source}",
        "    // Example for a button: label: 'Click me', disabled: false",
        "    // Example for a form: initialValue: '', onSubmit: vi.fn()",
        "  }",
        "});",
        "",
        "// STEP 2: Act - Simulate user interactions",
        f'// Perform the actions described in the scenario: "{ctx.scenario}"',
        "// Common patterns:",
        "//   - Click a button: await user.click(screen.getByRole('button', { name: /text/i }))",
        "//   - Type in input: await user.type(screen.getByLabelText('Label'), 'value')",
        "//   - Select option: await user.selectOptions(screen.getByLabelText('Label'), 'value')",
        "//   - Check checkbox: await user.click(screen.getByRole('checkbox', { name: /text/i }))",
        "//   - Tab navigation: await user.tab()",
        "",
        "// TODO: Implement user interactions here",
        "",
        "// STEP 3: Assert - Verify the expected outcome",
        f'// Check that the scenario requirement is met: "{ctx.scenario}"',
        "// Common assertions:",
        "//   - Element visible: expect(screen.getByText('text')).toBeInTheDocument()",
        "//   - Element hidden: expect(screen.queryByText('text')).not.toBeInTheDocument()",
        "//   - Element text: expect(screen.getByRole('alert')).toHaveTextContent('message')",
        "//   - Function called: expect(mockFn).toHaveBeenCalledWith(expectedArgs)",
        "//   - Element class: expect(element).toHaveClass('className')",
        "//   - Element disabled: expect(screen.getByRole('button')).toBeDisabled()",
        "",
        f"// TODO: Add assertions to verify: {ctx.description}",
    ]


def _error_lines(ctx: CaseContext) -> list[str]:
    props_source = ctx.props or "component requirements"
    return [
        "// ASSISTANT INSTRUCTIONS:",
        "// This is an ERROR HANDLING test - the component must fail gracefully",
        f'// 1. Set up conditions that trigger the error: "{ctx.scenario}"',
        "// 2. Verify the component displays an appropriate error message",
        "// 3. Ensure the component remains usable after the error",
        "//",
        "// Error testing patterns:",
        "// - Invalid form input",
        "// - Network request failures (mock rejected promises)",
        "// - Missing required props",
        "// - Boundary values (empty arrays, null values)",
        "//",
        "// TDD: this test FAILS first (Red)",
        "",
        "// STEP 1: Arrange - Set up error conditions",
        "// Mock callbacks or pass props that will trigger the error",
        "const mockErrorHandler = vi.fn();",
        f"const {{ user }} = render({ctx.subject_name}, {{",
        "  props: {",
        f"    // TODO: Add props that may trigger errors: {props_source}",
        "    onError: mockErrorHandler,",
        "  }",
        "});",
        "",
        "// STEP 2: Act - Trigger the error condition",
        f'// Perform the actions that cause the error: "{ctx.scenario}"',
        "// Common error triggers:",
        "//   - Submit invalid form data",
        "//   - Reject a mocked API call: vi.fn().mockRejectedValue(new Error('Network error'))",
        "//   - Provide out-of-range values",
        "//   - Remove required data",
        "",
        f"// TODO: Trigger error scenario: {ctx.scenario}",
        "",
        "// For async errors, use waitFor:",
        "// await waitFor(() => {",
        "//   expect(screen.getByRole('alert')).toBeInTheDocument();",
        "// });",
        "",
        "// STEP 3: Assert - Verify error handling",
        f'// Check that the error is handled gracefully: "{ctx.description}"',
        "// Error handling assertions:",
        "//   - Message shown: expect(screen.getByRole('alert')).toHaveTextContent('Error message')",
        "//   - Callback invoked: expect(mockErrorHandler).toHaveBeenCalledWith(expect.objectContaining({ message: 'error' }))",
        "//   - Fallback UI: expect(screen.getByText('Something went wrong')).toBeInTheDocument()",
        "//   - Validation error: expect(screen.getByText(/invalid/i)).toBeInTheDocument()",
        "//   - Still interactive: expect(screen.getByRole('button')).not.toBeDisabled()",
        "",
        f"// TODO: Verify error handling: {ctx.description}",
    ]


def _keyboard_lines(ctx: CaseContext) -> list[str]:
    return [
        "// ASSISTANT INSTRUCTIONS:",
        "// This is a KEYBOARD ACCESSIBILITY test",
        f'// Verify that: "{ctx.scenario}"',
        "//",
        "// Keyboard testing patterns:",
        "// - Tab navigation: user.tab() moves focus to the next interactive element",
        "// - Activation: user.keyboard('{Enter}') or user.keyboard(' ')",
        "// - Escape: user.keyboard('{Escape}') closes dialogs and menus",
        "// - Arrow keys: user.keyboard('{ArrowDown}') for lists and dropdowns",
        "// - Focus order: focus moves logically through the component",
        "//",
        "// WCAG 2.1 AA: all interactive elements must be keyboard accessible",
        "",
        "// STEP 1: Arrange - Render the component",
        f"const {{ user }} = render({ctx.subject_name});",
        "",
        "// STEP 2: Act - Navigate with the keyboard",
        f'// Navigate through the component using only the keyboard: "{ctx.scenario}"',
        "// Examples:",
        "//   await user.tab();",
        "//   expect(screen.getByRole('button')).toHaveFocus();",
        "//",
        "//   await user.keyboard('{Enter}');",
        "//   expect(screen.getByText('Action completed')).toBeInTheDocument();",
        "//",
        "//   await user.keyboard('{Escape}');",
        "//   expect(screen.queryByRole('dialog')).not.toBeInTheDocument();",
        "//",
        "//   await user.keyboard('{ArrowDown}');",
        "//   expect(screen.getByRole('option', { selected: true })).toHaveTextContent('Option 2');",
        "",
        f"// TODO: Implement keyboard navigation test: {ctx.scenario}",
        "",
        "// STEP 3: Assert - Verify keyboard accessibility",
        "// Common assertions:",
        "//   - Element receives focus: expect(element).toHaveFocus()",
        "//   - Tab order is logical: tab repeatedly and check each focused element",
        "//   - Enter/Space activates buttons: the expected action occurs",
        "",
        f"// TODO: Verify keyboard accessibility: {ctx.description}",
    ]


def _screen_reader_lines(ctx: CaseContext) -> list[str]:
    return [
        "// ASSISTANT INSTRUCTIONS:",
        "// This is a SCREEN READER ACCESSIBILITY test",
        f'// Verify that: "{ctx.scenario}"',
        "//",
        "// Screen reader patterns:",
        "// - Semantic HTML and a proper heading hierarchy (h1, h2, h3)",
        "// - ARIA labels: aria-label, aria-labelledby, aria-describedby",
        "// - Form labels: every input has an associated label",
        "// - Alt text: images have meaningful alt attributes",
        "// - Live regions: aria-live announces dynamic content",
        "//",
        "// WCAG 2.1 AA: interactive elements need accessible names",
        "",
        "// STEP 1: Arrange - Render the component",
        f"render({ctx.subject_name});",
        "",
        "// STEP 2 & 3: Assert - Check accessibility attributes",
        f'// Verify screen reader accessibility: "{ctx.scenario}"',
        "// Accessible queries mirror what a screen reader exposes:",
        "//",
        "// 1. Accessible names:",
        "//   const button = screen.getByRole('button', { name: /submit/i });",
        "//   expect(button).toHaveAccessibleName('Submit form');",
        "//",
        "// 2. Semantic HTML:",
        "//   const heading = screen.getByRole('heading', { level: 1 });",
        "//   expect(heading).toHaveTextContent('Page Title');",
        "//",
        "// 3. Form labels:",
        "//   const input = screen.getByLabelText('Email address');",
        "//   expect(input).toHaveAttribute('aria-invalid', 'false');",
        "//",
        "// 4. Live regions:",
        "//   const alert = screen.getByRole('alert');",
        "//   expect(alert).toHaveAttribute('aria-live', 'polite');",
        "//",
        "// 5. Image alt text:",
        "//   expect(screen.getByRole('img', { name: /profile photo/i })).toBeInTheDocument();",
        "",
        f"// TODO: Verify screen reader accessibility: {ctx.description}",
    ]


def _general_accessibility_lines(ctx: CaseContext) -> list[str]:
    return [
        "// ASSISTANT INSTRUCTIONS:",
        "// This is a general ACCESSIBILITY test",
        f'// Verify that: "{ctx.scenario}"',
        "//",
        "// Checklist:",
        "// - Semantic HTML elements (button, nav, main, header)",
        "// - Heading hierarchy (h1 -> h2 -> h3)",
        "// - Form labels and ARIA attributes",
        "// - Keyboard navigation and visible focus",
        "//",
        "// WCAG 2.1 AA principles: perceivable, operable, understandable, robust",
        "",
        "// STEP 1: Arrange - Render the component",
        f"render({ctx.subject_name});",
        "",
        "// STEP 2 & 3: Assert - Check the accessibility requirement",
        f'// Verify accessibility: "{ctx.scenario}"',
        "//",
        "// 1. Semantic HTML:",
        "//   expect(screen.getByRole('navigation')).toBeInTheDocument();",
        "//",
        "// 2. ARIA attributes:",
        "//   expect(screen.getByRole('region')).toHaveAttribute('aria-label', 'Main content');",
        "//",
        "// 3. Form accessibility:",
        "//   expect(screen.getByLabelText('Email')).toHaveAccessibleName('Email');",
        "//",
        "// 4. Interactive element states:",
        "//   expect(screen.getByRole('button')).toHaveAttribute('aria-pressed', 'false');",
        "//",
        "// Manual checks: color contrast, focus visibility, screen reader announcements",
        "",
        f"// TODO: Verify accessibility requirement: {ctx.description}",
    ]
