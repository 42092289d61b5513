from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.exceptions import InternalError, ShopError
from models.orders import Order, ORDER_STATUS_PENDING
from schemas.order_schemas import PlaceOrderRequest
from services.cart_service import CartService
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderService:

    @staticmethod
    def place_order(db: Session, request: PlaceOrderRequest) -> Order:
        """
        Creates a pending order, then empties the user's cart.

        The two steps are separate commits. When clearing the cart fails the
        order is already stored: it is not rolled back and the cart keeps its
        rows. The failure is logged with the order id and re-raised so the
        caller sees a generic error.
        """
        order = Order(
            user_id=request.user_id,
            total_amount=request.total_amount,
            status=ORDER_STATUS_PENDING
        )

        try:
            db.add(order)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise InternalError("Could not create order") from exc

        db.refresh(order)

        try:
            CartService.clear_cart(db, request.user_id)
        except ShopError:
            logger.error(
                "Order placed but cart was not cleared",
                extra={"order_id": order.id, "user_id": order.user_id},
                exc_info=True
            )
            raise

        logger.info(
            "Order placed",
            extra={"order_id": order.id, "user_id": order.user_id, "total_amount": str(order.total_amount)}
        )
        return order

    @staticmethod
    def list_orders(db: Session, user_id: int) -> list[Order]:
        return db.query(Order).filter(Order.user_id == user_id).order_by(Order.id).all()
