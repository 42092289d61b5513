from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.exceptions import InternalError, NotFoundError
from models.cart_items import CartItem
from schemas.cart_schemas import AddCartItemRequest
from utils.logger import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Per-user cart ledger.

    Every add inserts a new row, even for a product already in the cart.
    User and product ids are taken as given, nothing checks they exist.
    """

    @staticmethod
    def add_item(db: Session, request: AddCartItemRequest) -> CartItem:
        item = CartItem(
            user_id=request.user_id,
            product_id=request.product_id,
            quantity=request.quantity
        )

        try:
            db.add(item)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise InternalError("Could not add cart item") from exc

        db.refresh(item)

        logger.info(
            "Cart item added",
            extra={"cart_item_id": item.id, "user_id": item.user_id, "product_id": item.product_id}
        )
        return item

    @staticmethod
    def remove_item(db: Session, item_id: int) -> None:
        try:
            deleted = db.query(CartItem).filter(CartItem.id == item_id).delete()
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise InternalError("Could not remove cart item") from exc

        if not deleted:
            raise NotFoundError("Cart item not found")

        logger.info("Cart item removed", extra={"cart_item_id": item_id})

    @staticmethod
    def list_items(db: Session, user_id: int) -> list[CartItem]:
        return db.query(CartItem).filter(CartItem.user_id == user_id).order_by(CartItem.id).all()

    @staticmethod
    def clear_cart(db: Session, user_id: int) -> int:
        """Deletes every cart row of the user and returns how many went."""
        try:
            deleted = db.query(CartItem).filter(CartItem.user_id == user_id).delete()
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise InternalError("Could not clear cart") from exc

        logger.debug("Cart cleared", extra={"user_id": user_id, "rows_deleted": deleted})
        return deleted
