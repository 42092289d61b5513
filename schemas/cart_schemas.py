from datetime import datetime
from schemas.base import CamelModel


class AddCartItemRequest(CamelModel):
    user_id: int
    product_id: int
    quantity: int


class CartItemResponse(CamelModel):
    id: int
    user_id: int
    product_id: int
    quantity: int
    created_at: datetime
    updated_at: datetime
