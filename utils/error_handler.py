"""
Error Handler Utility for API Routers

Converts service exceptions into HTTPExceptions with a consistent policy:
- Known exception types keep their message and get a specific status code
- Anything else becomes a 500 with a generic, operation-specific message

Usage in routers:
    from utils.error_handler import handle_service_error

    try:
        result = await SomeService.some_method(...)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Some operation failed")
"""

import logging

from fastapi import HTTPException, status

from exceptions import (
    CoffeeHouseException,
    PasswordMismatchException,
    UserAlreadyExistsException,
    InvalidCredentialsException,
    InvalidTokenException,
    ProductNotFoundException,
)

logger = logging.getLogger(__name__)

ERROR_STATUS_MAPPING: dict[type[CoffeeHouseException], int] = {
    # User exceptions
    PasswordMismatchException: status.HTTP_400_BAD_REQUEST,
    UserAlreadyExistsException: status.HTTP_409_CONFLICT,
    InvalidCredentialsException: status.HTTP_401_UNAUTHORIZED,

    # Auth exceptions
    InvalidTokenException: status.HTTP_401_UNAUTHORIZED,

    # Product exceptions
    ProductNotFoundException: status.HTTP_404_NOT_FOUND,
}


def handle_service_error(exception: CoffeeHouseException, fallback_message: str) -> HTTPException:
    """
    Convert service exception to an HTTPException.

    Args:
        exception: The custom exception raised by a service
        fallback_message: Message used when the exception type is not mapped

    Returns:
        HTTPException to raise from the router
    """
    status_code = ERROR_STATUS_MAPPING.get(type(exception))

    if status_code is None:
        logger.error(f"Unmapped exception type: {type(exception).__name__} - {exception!r}")
        return handle_unexpected_error(exception, fallback_message)

    logger.warning(f"Service error handled: {type(exception).__name__} - {str(exception)}")
    return HTTPException(status_code=status_code, detail=exception.message)


def handle_unexpected_error(exception: Exception, fallback_message: str) -> HTTPException:
    """
    Handle unexpected exceptions. The exception text is logged, never returned.
    """
    logger.error(f"Unexpected error: {type(exception).__name__}: {exception}", exc_info=exception)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=fallback_message)
