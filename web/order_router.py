"""
Order confirmation endpoints.

/orders/confirm attributes the order to the caller when a valid bearer
token is sent and to "Anonymous" otherwise; /orders/confirm-auth requires
the token. Both may fail on purpose when error simulation is enabled.
"""

from fastapi import APIRouter, Depends, status

from exceptions import CoffeeHouseException
from models.order import OrderDTO
from models.user import UserPublicDTO
from services.order import OrderService
from utils.error_handler import handle_service_error, handle_unexpected_error
from utils.error_simulation import simulate_random_error
from web.dependencies import get_optional_user, get_current_user
from web.responses import envelope

order_router = APIRouter(prefix="/orders", tags=["orders"])


async def _confirm(order_dto: OrderDTO, user: UserPublicDTO | None) -> dict:
    # Raised outside the try block: the app-level handler renders it with isTestError
    simulate_random_error()
    try:
        confirmation = await OrderService.confirm_order(order_dto, user)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Failed to confirm order")
    except Exception as e:
        raise handle_unexpected_error(e, "Failed to confirm order")
    return envelope(data=confirmation)


@order_router.post("/confirm", status_code=status.HTTP_201_CREATED)
async def confirm_order(order_dto: OrderDTO, user: UserPublicDTO | None = Depends(get_optional_user)):
    return await _confirm(order_dto, user)


@order_router.post("/confirm-auth", status_code=status.HTTP_201_CREATED)
async def confirm_order_authenticated(order_dto: OrderDTO, user: UserPublicDTO = Depends(get_current_user)):
    return await _confirm(order_dto, user)
