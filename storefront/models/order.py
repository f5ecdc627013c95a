# storefront/models/order.py
from sqlalchemy import Column, String, Integer, Numeric, ForeignKey, DateTime, JSON, CheckConstraint
from sqlalchemy.orm import relationship

from storefront.database import Base
from storefront.models.base import new_id, utcnow


# Orders are insert-only: no update or delete path is exposed
class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
    total_amount = Column(Numeric(10, 2), CheckConstraint("total_amount >= 0"), nullable=False)
    status = Column(String, nullable=False, default="pending")

    # Reference issued by an external payment provider
    payment_id = Column(String, nullable=True)

    # {"name", "address", "city", "state", "zip", "country"}
    shipping_address = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)

    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)
    # Unit price captured at purchase time
    price = Column(Numeric(10, 2), CheckConstraint("price >= 0"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")
