from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import Column, Integer, String, JSON

from models.base import Base


class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    # Prices are decimal strings ("5.99"), kept verbatim from the menu data
    price = Column(String, nullable=False)
    discount_price = Column(String, nullable=True)
    category = Column(String, nullable=False, index=True)
    # size code (s/m/l/xl/xxl) -> {size, price, discountPrice?}
    sizes = Column(JSON, nullable=False, default=dict)
    additives = Column(JSON, nullable=False, default=list)


class ProductSizeDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    size: str
    price: str
    discount_price: str | None = None


class ProductAdditiveDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    price: str
    discount_price: str | None = None


class ProductListItemDTO(BaseModel):
    """Menu projection of a product: no sizes, no additives."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    description: str
    price: str
    discount_price: str | None = None
    category: str


class ProductDTO(ProductListItemDTO):
    sizes: dict[str, ProductSizeDTO] = {}
    additives: list[ProductAdditiveDTO] = []


class ProductCreateDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: str
    price: str
    discount_price: str | None = None
    category: str
    sizes: dict[str, ProductSizeDTO] = {}
    additives: list[ProductAdditiveDTO] = []
