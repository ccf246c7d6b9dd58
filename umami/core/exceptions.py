"""Shared exceptions module."""

from typing import Optional

from pydantic import ValidationError


class UmamiException(Exception):
    """Base exception for the Umami client."""

    def __init__(self, message: Optional[str] = None):
        """Create a new UmamiException instance.

        Args:
        ----
            message (str, optional): The error message.

        """
        self.message = message
        super().__init__(self.message)


class InvalidPayloadError(UmamiException):
    """Raised when a tracking call receives neither an event name nor a payload.

    The message is fixed so callers can match on it.
    """

    MESSAGE = "Invalid payload."

    def __init__(self):
        """Create a new InvalidPayloadError instance."""
        super().__init__(self.MESSAGE)


class InvalidEventDataError(UmamiException):
    """Raised when reserved event data keys carry unusable values."""

    def __init__(self, field_name: str, message: str = "Invalid event data"):
        """Create a new InvalidEventDataError instance.

        Args:
        ----
            field_name (str): The offending event data key.
            message (str, optional): The error message. Has default message.

        """
        self.field_name = field_name
        super().__init__(f"{message}: {field_name}")


class ConfigurationError(UmamiException):
    """Raised when client options fail validation."""

    def __init__(self, message: Optional[str] = "Invalid client configuration"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "ConfigurationError":
        """Summarize a pydantic ValidationError into a single message."""
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in error.errors())
        return cls(f"Invalid client configuration: {fields}")
