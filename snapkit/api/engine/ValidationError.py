"""Render request validation error."""


class ValidationError(Exception):
    """Raised when a RenderRequest is invalid, carrying every violation found."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        super().__init__(f"Invalid parameters: {', '.join(errors)}")
