"""Per-case strategy selection and test declaration wrapping."""

import logging
from typing import TYPE_CHECKING

from ..requirements.models import GenerationOptions
from .assistant import generate_assistant_scaffold
from .models import CaseContext
from .scaffold import generate_scaffold

if TYPE_CHECKING:
    from ..remote.generator import RemoteGenerator

logger = logging.getLogger(__name__)

CASE_INDENT = " " * 4
BODY_INDENT = " " * 6


def build_case(
    ctx: CaseContext,
    options: GenerationOptions,
    remote: "RemoteGenerator | None" = None,
) -> str:
    """Build one complete ``it()`` declaration.

    Tier order: remote (when ``options.use_remote``), then the assistant
    scaffold (when ``options.assistant_mode``) or the standard scaffold.
    A remote failure yields exactly the local-only output.

    Args:
        ctx: The case to generate.
        options: Generation options.
        remote: Remote generator to use; one is created if remote generation
            is requested and none is given.

    Returns:
        The indented test declaration.
    """
    if options.use_remote:
        body = _generate_remote(ctx, remote)
        if body is not None:
            logger.debug("Remote body used for %r", ctx.description)
            return wrap_case(ctx, body)
        logger.debug("Falling back to local scaffold for %r", ctx.description)

    if options.assistant_mode:
        body = generate_assistant_scaffold(ctx)
    else:
        body = generate_scaffold(ctx)
    return wrap_case(ctx, body)


def _generate_remote(ctx: CaseContext, remote: "RemoteGenerator | None") -> str | None:
    if remote is not None:
        return remote.generate(ctx)

    from ..remote.generator import RemoteGenerator

    with RemoteGenerator() as generator:
        return generator.generate(ctx)


def wrap_case(ctx: CaseContext, body: str) -> str:
    """Wrap a test body in a named ``it()`` declaration."""
    lines = [
        f"{CASE_INDENT}it('should {ctx.description}', async () => {{",
        f"{BODY_INDENT}// {ctx.category.label}: {ctx.scenario}",
        indent_block(body, BODY_INDENT),
        f"{CASE_INDENT}}});",
    ]
    return "\n".join(lines)


def indent_block(text: str, prefix: str) -> str:
    """Indent every non-blank line; blank lines stay empty."""
    return "\n".join(prefix + line if line.strip() else "" for line in text.splitlines())
