"""Prompt templates for remote test generation."""

from ..generator.models import CaseContext

SYSTEM_PROMPT = (
    "You are an expert Vue.js test engineer. Generate clean, maintainable test code "
    "following Testing Library and TDD best practices."
)


def build_generation_prompt(ctx: CaseContext) -> str:
    """Build the user prompt for one test case.

    Args:
        ctx: The case to generate.

    Returns:
        The prompt string.
    """
    parts = [
        "Generate a Vue 3 component test using Vitest and Testing Library.",
        "",
        f"Component: {ctx.subject_name}",
        f"Test Type: {ctx.category.label}",
        f"Scenario: {ctx.scenario}",
    ]

    if ctx.narrative:
        parts.append(f"User Story: {ctx.narrative}")
    if ctx.props:
        parts.append(f"Props: {ctx.props}")
    if ctx.events:
        parts.append(f"Events: {ctx.events}")
    if ctx.acceptance_criteria:
        parts.append("Acceptance Criteria:")
        parts.extend(f"- {criterion}" for criterion in ctx.acceptance_criteria)

    return "\n".join(parts) + f"""

Requirements:
- Use Testing Library queries (prefer getByRole, getByLabelText, getByText)
- Use user-event for interactions (the user object returned by render())
- Include proper async/await handling
- Write clear, descriptive assertions
- Follow accessibility-first testing practices
- Use the Arrange/Act/Assert pattern with comments
- Return ONLY the test body (the content of the it() callback)
- Do NOT include the it() declaration itself
- Do NOT include surrounding describe() blocks
- Start with an // Arrange comment
- Use proper TypeScript types

Example format:
// Arrange
const {{ user }} = render({ctx.subject_name}, {{
  props: {{ /* props here */ }}
}});

// Act
await user.click(screen.getByRole('button', {{ name: /submit/i }}));

// Assert
expect(screen.getByText('Success!')).toBeInTheDocument();

Generate the test implementation:"""
