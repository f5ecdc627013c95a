from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from storefront.schemas.product import ORMBase, ProductOut


class ShippingAddress(BaseModel):
    name: str
    address: str
    city: str
    state: str
    zip: str
    country: str


# Input schema for a single order line
class OrderItemCreate(BaseModel):
    product_id: str
    quantity: int = Field(gt=0)
    price: Decimal = Field(ge=0, decimal_places=2)


# Input schema for an order together with all of its lines
class OrderCreate(BaseModel):
    total_amount: Decimal = Field(ge=0, decimal_places=2)
    shipping_address: ShippingAddress
    items: List[OrderItemCreate] = Field(min_length=1)

    @model_validator(mode="after")
    def total_matches_lines(self):
        lines_total = sum((it.price * it.quantity for it in self.items), Decimal("0"))
        if lines_total != self.total_amount:
            raise ValueError(
                f"total_amount {self.total_amount} does not match sum of lines {lines_total}"
            )
        return self


# Output schema for an order line joined with its product
class OrderItemOut(ORMBase):
    id: str
    order_id: str
    product_id: str
    quantity: int
    price: Decimal
    created_at: Optional[datetime] = None
    product: Optional[ProductOut] = None

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


# Output schema for an order row
class OrderOut(ORMBase):
    id: str
    user_id: str
    total_amount: Decimal
    status: str
    payment_id: Optional[str] = None
    shipping_address: ShippingAddress
    created_at: Optional[datetime] = None


# Order with its lines, returned by checkout
class OrderDetail(OrderOut):
    items: List[OrderItemOut] = []
