"""Custom exception types raised by smoothline."""

__all__ = [
    "SmoothlineValidationError",
    "InvalidParameterError",
]


class SmoothlineValidationError(ValueError):
    """Base class for all smoothline validation errors."""
    pass


class InvalidParameterError(SmoothlineValidationError):
    """Raised when an indicator parameter value is invalid."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(f"invalid {name}={value!r}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason
