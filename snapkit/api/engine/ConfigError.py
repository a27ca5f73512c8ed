"""Engine configuration error."""


class ConfigError(Exception):
    """Raised when an EngineConfig is invalid. Not retryable."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Engine configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
