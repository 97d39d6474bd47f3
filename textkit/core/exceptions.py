"""
Custom exception hierarchy for textkit.

Separates configuration problems from contract violations at the call
boundary of the text helpers.
"""


class TextKitError(Exception):
    """Base exception for all textkit errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TextKitError):
    """Raised when configuration is invalid or missing."""
    pass


class InvalidInputError(TextKitError, TypeError):
    """Raised when a text helper receives an argument of the wrong type."""

    def __init__(self, message: str, argument: str = None, details: dict = None):
        """
        Initialize input error.

        Args:
            message: Error description.
            argument: Name of the offending argument.
            details: Additional context.
        """
        super().__init__(message, details)
        self.argument = argument


if __name__ == "__main__":
    try:
        raise ConfigurationError("Config file not found", {"path": "/config/config.json"})
    except TextKitError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise InvalidInputError("Expected str", argument="text", details={"received": "int"})
    except TypeError as e:
        print(f"Bad argument: {e.argument}")
