"""
User-related exceptions.
"""

from .base import CoffeeHouseException


class UserException(CoffeeHouseException):
    """Base exception for user-related errors."""
    pass


class PasswordMismatchException(UserException):
    """Raised when password and confirmPassword differ at registration."""

    def __init__(self):
        super().__init__("Passwords do not match")


class UserAlreadyExistsException(UserException):
    """Raised when registering a login that is already taken."""

    def __init__(self, login: str):
        super().__init__(
            "User with this login already exists",
            details={'login': login}
        )
        self.login = login


class InvalidCredentialsException(UserException):
    """
    Raised when login fails.

    Unknown login and wrong password share this message so callers
    cannot probe which logins exist.
    """

    def __init__(self, login: str | None = None):
        super().__init__("Invalid credentials", details={'login': login} if login else None)
        self.login = login
