# storefront/models/cart.py
from sqlalchemy import Column, String, Integer, ForeignKey, DateTime, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.models.base import new_id, utcnow


# A single product + quantity line in a user's cart
class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    product = relationship("Product")

    __table_args__ = (
        # One line per (user, product); repeated adds bump the quantity instead
        UniqueConstraint("user_id", "product_id", name="uq_cartitem_user_product"),
    )
