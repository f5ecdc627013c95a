from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from storefront.schemas.product import ORMBase, ProductOut


# Request schema for inserting a cart line
class CartItemCreate(BaseModel):
    product_id: str
    quantity: int = Field(default=1, gt=0)


# Request schema for setting a cart line quantity
class CartItemUpdate(BaseModel):
    quantity: int = Field(gt=0)


# A cart line joined with its product
class CartItemOut(ORMBase):
    id: str
    user_id: str
    product_id: str
    quantity: int = Field(gt=0)
    created_at: Optional[datetime] = None
    product: Optional[ProductOut] = None
