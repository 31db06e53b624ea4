"""
Models Package

This file ensures all SQLAlchemy models are imported and registered
on Base.metadata before tables are created.
"""

from models.base import Base
from models.user import User
from models.product import Product

__all__ = [
    'Base',
    'User',
    'Product',
]
