from sqlalchemy.orm import Session
from core.exceptions import NotFoundError
from models.products import Product
from utils.logger import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Read-only access to the product catalog."""

    @staticmethod
    def list_products(db: Session) -> list[Product]:
        return db.query(Product).order_by(Product.id).all()

    @staticmethod
    def get_product(db: Session, product_id: int) -> Product:
        product = db.query(Product).filter(Product.id == product_id).one_or_none()

        if not product:
            logger.info("Product lookup missed", extra={"product_id": product_id})
            raise NotFoundError("Product not found")

        return product
