"""
Product catalog endpoints.

Read-only: products are created by the seed routine at startup.
List endpoints return the projected shape (no sizes/additives);
GET /products/{product_id} returns the full record.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import CoffeeHouseException
from services.product import ProductService
from utils.error_handler import handle_service_error, handle_unexpected_error
from web.dependencies import get_session
from web.responses import envelope

product_router = APIRouter(prefix="/products", tags=["products"])


# Declared before /{product_id} so "favorites" is not parsed as an id
@product_router.get("/favorites")
async def get_favorite_products(session: AsyncSession = Depends(get_session)):
    try:
        products = await ProductService.get_random_coffee_products(session)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Failed to fetch favorite products")
    except Exception as e:
        raise handle_unexpected_error(e, "Failed to fetch favorite products")
    return envelope(data=products)


@product_router.get("")
async def get_all_products(session: AsyncSession = Depends(get_session)):
    try:
        products = await ProductService.get_all_products(session)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Failed to fetch products")
    except Exception as e:
        raise handle_unexpected_error(e, "Failed to fetch products")
    return envelope(data=products)


@product_router.get("/{product_id}")
async def get_product_by_id(product_id: int, session: AsyncSession = Depends(get_session)):
    try:
        product = await ProductService.get_product_by_id(product_id, session)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Failed to fetch product")
    except Exception as e:
        raise handle_unexpected_error(e, "Failed to fetch product")
    return envelope(data=product)
