from sqlalchemy import Column, Integer, String, DateTime, JSON

from storefront.database import Base
from storefront.models.base import utcnow


# Audit trail of user actions against the API
class Log(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, index=True)

    ts = Column(DateTime(timezone=True), default=utcnow, index=True)
    user_id = Column(String(36), nullable=True, index=True)
    action = Column(String(50), index=True)
    resource = Column(String(50), index=True)
    status = Column(String(20), index=True)
    ip = Column(String(64), nullable=True)

    # JSON container for flexible context data
    meta = Column(JSON, nullable=True)
