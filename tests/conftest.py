"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import sys
import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Must be set before config is imported anywhere (load_dotenv does not override them)
os.environ["RUNTIME_ENVIRONMENT"] = "test"
os.environ["DB_NAME"] = "test_shop.db"
os.environ["TOKEN_SECRET"] = "test_token_secret_1234567890abcdef1234567890abcdef"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"  # Lowest bcrypt cost, keeps tests fast
os.environ["ERROR_SIMULATION_PROBABILITY"] = "0"
os.environ["CORS_ALLOWED_ORIGINS"] = "http://localhost:3001"


SAMPLE_PRODUCTS = [
    {
        "name": "Irish coffee",
        "description": "Black coffee with whiskey and whipped milk",
        "price": "7.00",
        "category": "coffee",
        "sizes": {
            "s": {"size": "200 ml", "price": "7.00"},
            "m": {"size": "300 ml", "price": "7.50", "discountPrice": "7.00"},
        },
        "additives": [{"name": "Sugar", "price": "0.50"}],
    },
    {
        "name": "Kahlua coffee",
        "description": "Coffee with milk and Kahlua liqueur",
        "price": "7.00",
        "discountPrice": "6.50",
        "category": "coffee",
        "sizes": {"s": {"size": "200 ml", "price": "7.00"}},
        "additives": [],
    },
    {
        "name": "Honey raf",
        "description": "Espresso with cream and honey",
        "price": "5.50",
        "discountPrice": None,
        "category": "coffee",
        "sizes": {"s": {"size": "200 ml", "price": "5.50"}},
        "additives": [{"name": "Cinnamon", "price": "0.50"}],
    },
    {
        "name": "Ice cappuccino",
        "description": "Cappuccino with ice",
        "price": "5.00",
        "category": "coffee",
        "sizes": {"s": {"size": "200 ml", "price": "5.00"}},
        "additives": [],
    },
    {
        "name": "Ginger tea",
        "description": "Black tea with ginger and lemon",
        "price": "4.50",
        "category": "tea",
        "sizes": {"s": {"size": "200 ml", "price": "4.50"}},
        "additives": [{"name": "Sugar", "price": "0.50"}],
    },
    {
        "name": "Marble cheesecake",
        "description": "Cheesecake with chocolate swirls",
        "price": "3.50",
        "category": "dessert",
        "sizes": {"s": {"size": "50 g", "price": "3.50"}},
        "additives": [],
    },
]


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine (in-memory SQLite shared by all sessions)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Import and create all tables
    from db import Base
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_maker(test_engine, monkeypatch):
    """Point db.get_db_session (and everything built on it) at the test engine."""
    import db

    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    monkeypatch.setattr(db, "engine", test_engine)
    monkeypatch.setattr(db, "session_maker", async_session_maker)
    return async_session_maker


@pytest_asyncio.fixture
async def test_session(test_session_maker):
    """Create test database session."""
    async with test_session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def sample_products(test_session):
    """Insert SAMPLE_PRODUCTS and return them as ProductDTOs."""
    from services.product import ProductService
    from services.seed import to_product_create_dto

    return await ProductService.create_many_products(
        [to_product_create_dto(entry) for entry in SAMPLE_PRODUCTS],
        test_session
    )


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def client(test_session_maker):
    """
    HTTP client bound to the app and the in-memory database.

    The lifespan does not run here: tables come from test_engine and
    products from sample_products.
    """
    from app import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def register_payload():
    return {
        "login": "john123",
        "password": "password123",
        "confirmPassword": "password123",
        "city": "Minsk",
        "street": "Nezavisimosti",
        "houseNumber": 12,
        "paymentMethod": "card",
    }
