"""Extraction of a clean test body from model output.

Rules, applied in order:
1. Remove Markdown code-fence delimiter lines (```, ```ts, ```typescript ...).
2. If a full ``it(...)``/``test(...)`` declaration remains, keep only the
   callback body, dedented.
3. Trim surrounding whitespace.
"""

import re
import textwrap

FENCE_PATTERN = re.compile(r"^[ \t]*```[\w+-]*[ \t]*(?:\n|$)", re.MULTILINE)

# name(<title>, [async] (<args>) => { <body> }) at the end of the text
DECLARATION_PATTERN = re.compile(
    r"\b(?:it|test)\(\s*"
    r"(?:'[^']*'|\"[^\"]*\"|`[^`]*`|[^,]+),\s*"
    r"(?:async\s*)?\([^)]*\)\s*=>\s*"
    r"\{(?P<body>.*)\}\s*\)\s*;?\s*$",
    re.DOTALL,
)


def strip_code_fences(text: str) -> str:
    """Remove Markdown fence delimiter lines, keeping their content."""
    return FENCE_PATTERN.sub("", text)


def unwrap_declaration(code: str) -> str:
    """Return the callback body if ``code`` ends with a test declaration."""
    match = DECLARATION_PATTERN.search(code)
    if not match:
        return code
    body = match.group("body").strip("\n")
    return textwrap.dedent(body)


def extract_test_code(text: str) -> str:
    """Apply the extraction rules to raw model output."""
    code = strip_code_fences(text.strip())
    code = unwrap_declaration(code.strip())
    return code.strip()
