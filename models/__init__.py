from models.users import User
from models.products import Product
from models.cart_items import CartItem
from models.orders import Order

__all__ = ["User", "Product", "CartItem", "Order"]
