import logging
import uuid
from datetime import datetime, timezone

from models.order import OrderDTO, OrderConfirmationDTO
from models.user import UserPublicDTO

logger = logging.getLogger(__name__)

ORDER_CONFIRMED_MESSAGE = "Your order is confirmed"


class OrderService:

    @staticmethod
    async def confirm_order(order_dto: OrderDTO, user: UserPublicDTO | None = None) -> OrderConfirmationDTO:
        """
        Acknowledge an order.

        Placeholder for a real order pipeline: nothing is persisted and
        products, prices and stock are not checked. The order is only logged
        and a fresh random id is returned.
        """
        order_id = str(uuid.uuid4())

        # TODO: persist orders and verify totalPrice against product prices once an orders table exists
        logger.info("New order received: %s", {
            "orderId": order_id,
            "user": user.login if user is not None else "Anonymous",
            "items": [item.model_dump(by_alias=True) for item in order_dto.items],
            "totalPrice": order_dto.total_price,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

        return OrderConfirmationDTO(message=ORDER_CONFIRMED_MESSAGE, order_id=order_id)
