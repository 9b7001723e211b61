"""Output formatting for command-line reports."""

from .formatter import format_validation_result

__all__ = ["format_validation_result"]
