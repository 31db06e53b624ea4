"""
Base exception classes for the Coffee House API.
"""


class CoffeeHouseException(Exception):
    """
    Base exception for all Coffee House errors.

    Services raise subclasses of this; routers translate them into HTTP
    responses through utils.error_handler.

    Attributes:
        message: Human-readable error message, safe to show to API clients
        details: Optional dict with additional context (entity IDs, logins, etc.)
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.details:
            details_str = ', '.join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.__class__.__name__}('{self.message}', {details_str})"
        return f"{self.__class__.__name__}('{self.message}')"
