# storefront/models/users.py
from sqlalchemy import Column, String, DateTime

from storefront.database import Base
from storefront.models.base import new_id, utcnow


# Represents an identity that owns carts and orders
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
