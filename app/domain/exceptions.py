"""Domain-specific exceptions. Pure domain layer — no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SerializationError(DomainError):
    """Raised when a value cannot be represented as canonical JSON (e.g. circular references)."""
