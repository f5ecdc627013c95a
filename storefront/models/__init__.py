from storefront.models.users import User
from storefront.models.product import Product
from storefront.models.cart import CartItem
from storefront.models.order import Order, OrderItem
from storefront.models.log import Log

__all__ = ["User", "Product", "CartItem", "Order", "OrderItem", "Log"]
