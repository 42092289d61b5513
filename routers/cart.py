from fastapi import APIRouter, Response
from starlette import status
from core.exceptions import NotFoundError
from schemas.cart_schemas import AddCartItemRequest, CartItemResponse
from services.cart_service import CartService
from utils.deps import db_dependency
from utils.identifiers import parse_id


router = APIRouter(
    prefix="/cart",
    tags=["cart"]
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CartItemResponse)
async def add_to_cart(body: AddCartItemRequest, db: db_dependency):
    return CartService.add_item(db, body)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_cart(item_id: str, db: db_dependency):
    parsed_id = parse_id(item_id)
    if parsed_id is None:
        raise NotFoundError("Cart item not found")

    CartService.remove_item(db, parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}", response_model=list[CartItemResponse])
async def list_cart(user_id: str, db: db_dependency):
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        return []

    return CartService.list_items(db, parsed_id)
