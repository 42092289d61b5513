from datetime import datetime
from schemas.base import CamelModel, Money


class PlaceOrderRequest(CamelModel):
    user_id: int
    total_amount: Money


class OrderResponse(CamelModel):
    id: int
    user_id: int
    total_amount: Money
    status: str
    created_at: datetime
    updated_at: datetime
