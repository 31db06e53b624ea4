"""
Seed Service

Populates the products table from the bundled menu fixture on first boot.
Restarts are idempotent: once any product exists the fixture is never read.
"""

import logging
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

import config
from db import get_db_session
from models.product import ProductCreateDTO
from services.product import ProductService
from utils.json_utils import safe_json_parse

logger = logging.getLogger(__name__)


def get_products_fixture_path() -> Path:
    path = Path(config.PRODUCTS_FIXTURE_PATH)
    if not path.is_absolute():
        # Relative to project root, like the other bundled data files
        path = Path(__file__).parent.parent / path
    return path


def to_product_create_dto(entry: dict) -> ProductCreateDTO:
    return ProductCreateDTO(
        name=entry["name"],
        description=entry["description"],
        price=entry["price"],
        # Fixture uses both null and a missing key for "no discount"
        discount_price=entry.get("discountPrice") or None,
        category=entry["category"],
        sizes=entry.get("sizes") or {},
        additives=entry.get("additives") or [],
    )


class SeedService:

    @staticmethod
    async def seed_products(session: AsyncSession) -> None:
        try:
            existing_products_count = await ProductService.count(session)
            if existing_products_count > 0:
                logger.info("[Seed] Products already exist in database, skipping seed")
                return

            products_file_path = get_products_fixture_path()
            if not products_file_path.exists():
                logger.error(f"[Seed] Products file not found at path: {products_file_path}")
                return

            products = safe_json_parse(products_file_path.read_text(encoding="utf-8"))
            if not isinstance(products, list):
                logger.error("[Seed] Products data is invalid or failed to parse")
                return

            try:
                product_dtos = [to_product_create_dto(entry) for entry in products]
            except (KeyError, TypeError, AttributeError, ValidationError) as e:
                logger.error(f"[Seed] Products data has an unexpected shape: {e}")
                return

            await ProductService.create_many_products(product_dtos, session)
            logger.info(f"[Seed] Successfully seeded {len(product_dtos)} products")
        except Exception as e:
            logger.error(f"[Seed] Error seeding products: {e}", exc_info=True)
            raise

    @staticmethod
    async def seed_all() -> None:
        logger.info("[Seed] Starting database seeding...")
        async with get_db_session() as session:
            await SeedService.seed_products(session)
        logger.info("[Seed] Database seeding completed")
