"""Custom exceptions for constraintkit.

Building and rendering constraints never raises for any value: absent values
and inapplicable render modes are plain ``None`` results. The exceptions below
cover precondition violations (an empty field name), invalid configuration and
artifacts a compiler cannot express.
"""

from typing import Any, Dict


class ConstraintKitError(Exception):
    """Base exception for all constraintkit errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., field, operation, value)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Validation exceptions
class ValidationError(ConstraintKitError):
    """Raised when a constraint or artifact is structurally invalid.

    Example:
        >>> raise ValidationError("Invalid constraint", field="price")
    """


class MissingFieldError(ValidationError):
    """Raised when a constraint is built without a field name.

    Example:
        >>> raise MissingFieldError("Field name must not be empty", field="", operation="equal")
    """


class InvalidFieldError(ValidationError):
    """Raised when a compiler meets an operator it cannot express.

    Example:
        >>> raise InvalidFieldError("Operator $regex is not supported", field="name", operation="compile")
    """


# Configuration exceptions
class ConfigurationError(ConstraintKitError):
    """Raised when configuration is invalid or missing.

    Example:
        >>> raise ConfigurationError("Invalid configuration", setting="TIME_ZONE")
    """


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid.

    Example:
        >>> raise InvalidConfigError("Unknown time zone", config_key="TIME_ZONE", value="Mars/Olympus")
    """
