# storefront/models/product.py
from sqlalchemy import Column, String, Integer, Numeric, DateTime, CheckConstraint

from storefront.database import Base
from storefront.models.base import new_id, utcnow


# Catalog entry. Publicly readable, never written by shoppers.
class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False)

    price = Column(Numeric(10, 2), CheckConstraint("price >= 0"), nullable=False)
    image_url = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)

    stock = Column(Integer, CheckConstraint("stock >= 0"), nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)
