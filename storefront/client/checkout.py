# storefront/client/checkout.py
import logging
from decimal import Decimal
from typing import Union

from storefront.client.api import ApiClient
from storefront.client.cart import CartCoordinator, cart_total
from storefront.client.errors import AuthenticationRequired, EmptyCart
from storefront.client.session import SessionProvider
from storefront.schemas.order import OrderCreate, OrderDetail, OrderItemCreate, ShippingAddress

logger = logging.getLogger(__name__)


class CheckoutOrchestrator:
    def __init__(self, api: ApiClient, session: SessionProvider, cart: CartCoordinator):
        self.api = api
        self.session = session
        self.cart = cart

    def build_order(self, shipping_address: ShippingAddress) -> OrderCreate:
        items = list(self.cart.items)
        return OrderCreate(
            total_amount=cart_total(items),
            shipping_address=shipping_address,
            items=[
                OrderItemCreate(
                    product_id=it.product_id,
                    quantity=it.quantity,
                    # Price snapshot taken from the product as currently shown
                    price=it.product.price if it.product and it.product.price is not None else Decimal("0"),
                )
                for it in items
            ],
        )

    async def checkout(self, shipping_address: Union[ShippingAddress, dict]) -> OrderDetail:
        """Turns the current cart into an order and empties the cart.

        The order and its lines are stored by a single request which the API
        commits atomically, so a failure leaves neither behind and the cart
        untouched.
        """
        if self.session.user is None:
            raise AuthenticationRequired("Must be logged in to check out")
        if not self.cart.items:
            raise EmptyCart()

        if not isinstance(shipping_address, ShippingAddress):
            shipping_address = ShippingAddress.model_validate(shipping_address)

        order_in = self.build_order(shipping_address)
        data = await self.api.post("/orders", json=order_in.model_dump(mode="json"))
        order = OrderDetail.model_validate(data)
        logger.info(f"Order {order.id} placed with {len(order.items)} lines, total {order.total_amount}")

        await self.cart.clear_cart()
        return order
