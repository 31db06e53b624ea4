"""
Custom exceptions for the Coffee House API.

Exception Hierarchy:
--------------------
CoffeeHouseException (base)
├── UserException
│   ├── PasswordMismatchException      -> 400
│   ├── UserAlreadyExistsException     -> 409
│   └── InvalidCredentialsException    -> 401
├── AuthException
│   └── InvalidTokenException          -> 401
├── ProductException
│   └── ProductNotFoundException       -> 404
└── SimulatedApiErrorException         -> 500 (test payload)

Usage:
------
Services raise specific exceptions:
    raise ProductNotFoundException(product_id=42)

Routers translate them into HTTP errors:
    try:
        product = await ProductService.get_product_by_id(product_id, session)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Failed to fetch product")
"""

from .base import CoffeeHouseException
from .auth import AuthException, InvalidTokenException
from .product import ProductException, ProductNotFoundException
from .simulation import SimulatedApiErrorException
from .user import (
    UserException,
    PasswordMismatchException,
    UserAlreadyExistsException,
    InvalidCredentialsException,
)

__all__ = [
    # Base
    'CoffeeHouseException',

    # Auth
    'AuthException',
    'InvalidTokenException',

    # Product
    'ProductException',
    'ProductNotFoundException',

    # Simulation
    'SimulatedApiErrorException',

    # User
    'UserException',
    'PasswordMismatchException',
    'UserAlreadyExistsException',
    'InvalidCredentialsException',
]
