from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from db import session_execute, session_flush
from models.product import Product, ProductDTO, ProductListItemDTO, ProductCreateDTO

# SQLite INTEGER is a signed 64-bit value; the driver overflows on anything wider
SQLITE_MIN_INTEGER = -2 ** 63
SQLITE_MAX_INTEGER = 2 ** 63 - 1

LIST_ITEM_COLUMNS = (
    Product.id,
    Product.name,
    Product.description,
    Product.price,
    Product.discount_price,
    Product.category,
)


def _to_orm(product_dto: ProductCreateDTO) -> Product:
    return Product(
        name=product_dto.name,
        description=product_dto.description,
        price=product_dto.price,
        discount_price=product_dto.discount_price,
        category=product_dto.category,
        # JSON columns keep the wire shape (camelCase, absent discountPrice omitted)
        sizes={code: size.model_dump(by_alias=True, exclude_none=True)
               for code, size in product_dto.sizes.items()},
        additives=[additive.model_dump(by_alias=True, exclude_none=True)
                   for additive in product_dto.additives],
    )


class ProductRepository:
    @staticmethod
    async def get_by_category(category: str, session: AsyncSession) -> list[ProductListItemDTO]:
        stmt = select(*LIST_ITEM_COLUMNS).where(Product.category == category).order_by(Product.id)
        products = await session_execute(stmt, session)
        return [ProductListItemDTO.model_validate(row, from_attributes=True) for row in products.all()]

    @staticmethod
    async def get_all_list_items(session: AsyncSession) -> list[ProductListItemDTO]:
        stmt = select(*LIST_ITEM_COLUMNS).order_by(Product.id)
        products = await session_execute(stmt, session)
        return [ProductListItemDTO.model_validate(row, from_attributes=True) for row in products.all()]

    @staticmethod
    async def get_by_id(product_id: int, session: AsyncSession) -> ProductDTO | None:
        if not SQLITE_MIN_INTEGER <= product_id <= SQLITE_MAX_INTEGER:
            return None
        stmt = select(Product).where(Product.id == product_id)
        product = await session_execute(stmt, session)
        product = product.scalar()
        if product is None:
            return None
        return ProductDTO.model_validate(product, from_attributes=True)

    @staticmethod
    async def create(product_dto: ProductCreateDTO, session: AsyncSession) -> ProductDTO:
        product = _to_orm(product_dto)
        session.add(product)
        await session_flush(session)
        return ProductDTO.model_validate(product, from_attributes=True)

    @staticmethod
    async def create_many(product_dtos: list[ProductCreateDTO], session: AsyncSession) -> list[ProductDTO]:
        products = [_to_orm(product_dto) for product_dto in product_dtos]
        session.add_all(products)
        await session_flush(session)
        return [ProductDTO.model_validate(product, from_attributes=True) for product in products]

    @staticmethod
    async def count(session: AsyncSession) -> int:
        stmt = select(func.count(Product.id))
        products_count = await session_execute(stmt, session)
        return products_count.scalar_one()
