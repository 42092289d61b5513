from datetime import datetime
from typing import Optional
from schemas.base import CamelModel, Money


class ProductResponse(CamelModel):
    id: int
    name: str
    price: Money
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
