"""Requirements-related exceptions."""


class RequirementsLoadError(Exception):
    """Raised when a requirements file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class RequirementsSchemaError(Exception):
    """Raised when requirements data fails schema validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class InvalidRequirementsError(ValueError):
    """Raised when requirements are structurally valid but unusable for generation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid requirements: " + "; ".join(self.errors))


class InvalidComponentNameError(ValueError):
    """Raised when a component name is not PascalCase."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid component name {name!r}. Must be PascalCase (e.g., MyComponent): "
            "letters and digits only, starting with an uppercase letter."
        )
