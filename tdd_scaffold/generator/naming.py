"""Name helpers for generated tests and components."""

import re

COMPONENT_NAME_PATTERN = re.compile(r"[A-Z][a-zA-Z0-9]*")

_DISALLOWED = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_test_name(scenario: str) -> str:
    """Turn a scenario sentence into a test description fragment.

    >>> normalize_test_name('User clicks the "Submit" button!')
    'user clicks the submit button'
    """
    name = _DISALLOWED.sub("", scenario.lower())
    return _WHITESPACE.sub(" ", name).strip()


def is_valid_component_name(name: str) -> bool:
    """Check a component name is PascalCase (letters and digits only)."""
    return bool(COMPONENT_NAME_PATTERN.fullmatch(name or ""))
