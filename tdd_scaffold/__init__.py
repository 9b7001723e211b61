"""tdd-scaffold: red-phase test scaffolds for Vue components."""

__version__ = "0.1.0"
