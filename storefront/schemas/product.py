# storefront/schemas/product.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

LOW_STOCK_THRESHOLD = 10


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ProductOut(ORMBase):
    id: str
    name: str
    description: str
    price: Decimal = Field(ge=0)
    image_url: str
    category: str
    stock: int = Field(ge=0)
    created_at: Optional[datetime] = None

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @property
    def low_stock(self) -> bool:
        return 0 < self.stock < LOW_STOCK_THRESHOLD
