"""
Token-related exceptions.
"""

from .base import CoffeeHouseException


class AuthException(CoffeeHouseException):
    """Base exception for authentication errors."""
    pass


class InvalidTokenException(AuthException):
    """Raised when an access token is malformed, tampered with or expired."""

    def __init__(self, reason: str = "invalid signature"):
        super().__init__(f"Invalid or expired token: {reason}", details={'reason': reason})
        self.reason = reason
