"""Error taxonomy shared by stores, services and the API layer."""


class CareerPathError(Exception):
    """Base class for all errors raised by the core."""


class ValidationError(CareerPathError, ValueError):
    """Malformed input: empty title, out-of-range timeline or proficiency, ..."""


class NotFoundError(CareerPathError, LookupError):
    """Referenced entity is absent or not owned by the caller.

    The message only echoes what the caller supplied, so a lookup against
    another user's record reveals nothing about it.
    """

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")


class StoreError(CareerPathError):
    """The underlying persistence operation failed."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Store operation '{operation}' failed: {reason}")
