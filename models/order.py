from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderItemDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    product_id: int = Field(..., strict=True)
    size: str
    additives: list[str]
    quantity: int = Field(..., ge=1, strict=True)


class OrderDTO(BaseModel):
    """
    Body of POST /orders/confirm and /orders/confirm-auth.

    Orders are not persisted: the shape is validated, the order is logged
    and a confirmation id is handed back.
    """
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    items: list[OrderItemDTO]
    total_price: float = Field(..., ge=0, strict=True)


class OrderConfirmationDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    order_id: str
