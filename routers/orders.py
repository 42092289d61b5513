from fastapi import APIRouter
from starlette import status
from schemas.order_schemas import OrderResponse, PlaceOrderRequest
from services.order_service import OrderService
from utils.deps import db_dependency
from utils.identifiers import parse_id


router = APIRouter(
    prefix="/orders",
    tags=["orders"]
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, db: db_dependency):
    """
    Place an order and clear the user's cart.

    Not atomic: a failure while clearing the cart returns 500 but leaves the
    order in place.
    """
    return OrderService.place_order(db, body)


@router.get("/{user_id}", response_model=list[OrderResponse])
async def list_orders(user_id: str, db: db_dependency):
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        return []

    return OrderService.list_orders(db, parsed_id)
