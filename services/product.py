import random

from sqlalchemy.ext.asyncio import AsyncSession

from db import session_commit
from exceptions.product import ProductNotFoundException
from models.product import ProductDTO, ProductListItemDTO, ProductCreateDTO
from repositories.product import ProductRepository

FAVORITES_CATEGORY = "coffee"
FAVORITES_LIMIT = 3


class ProductService:

    @staticmethod
    async def get_random_coffee_products(session: AsyncSession) -> list[ProductListItemDTO]:
        """Up to three coffee products in random order, for the landing page."""
        coffee_products = await ProductRepository.get_by_category(FAVORITES_CATEGORY, session)
        if len(coffee_products) == 0:
            return []
        return random.sample(coffee_products, k=min(FAVORITES_LIMIT, len(coffee_products)))

    @staticmethod
    async def get_all_products(session: AsyncSession) -> list[ProductListItemDTO]:
        return await ProductRepository.get_all_list_items(session)

    @staticmethod
    async def get_product_by_id(product_id: int, session: AsyncSession) -> ProductDTO:
        product = await ProductRepository.get_by_id(product_id, session)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    async def create_product(product_dto: ProductCreateDTO, session: AsyncSession) -> ProductDTO:
        product = await ProductRepository.create(product_dto, session)
        await session_commit(session)
        return product

    @staticmethod
    async def create_many_products(product_dtos: list[ProductCreateDTO], session: AsyncSession) -> list[ProductDTO]:
        products = await ProductRepository.create_many(product_dtos, session)
        await session_commit(session)
        return products

    @staticmethod
    async def count(session: AsyncSession) -> int:
        return await ProductRepository.count(session)
