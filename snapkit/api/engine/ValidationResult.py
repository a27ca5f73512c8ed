from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a render request."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
