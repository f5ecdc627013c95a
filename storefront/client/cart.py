# storefront/client/cart.py
import logging
from decimal import Decimal
from typing import List, Optional

from storefront.client.api import ApiClient
from storefront.client.errors import AuthenticationRequired, PersistenceError
from storefront.client.session import SessionProvider
from storefront.schemas.cart import CartItemOut
from storefront.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def cart_total(items: List[CartItemOut]) -> Decimal:
    # Missing product or price counts as zero
    total = Decimal("0")
    for item in items:
        price = item.product.price if item.product and item.product.price is not None else Decimal("0")
        total += price * item.quantity
    return total


class CartCoordinator:
    """In-memory view of the signed-in user's cart.

    The view is never patched locally after a write. Every mutation is
    followed by a full reload so it always reflects the persisted rows
    (read-after-write). Two actions running concurrently may interleave
    their reloads; whichever finishes last wins.

    Writes propagate :class:`PersistenceError`. Reads degrade to the
    previous view and log a warning.
    """

    def __init__(self, api: ApiClient, session: SessionProvider):
        self.api = api
        self.session = session
        self.items: List[CartItemOut] = []
        self.loading = True
        self._unsubscribe = session.subscribe(self._on_identity_change)

    async def _on_identity_change(self, user: Optional[UserResponse]):
        # Another identity's lines must never linger in the view
        self.items = []
        await self.fetch_cart()

    def close(self):
        self._unsubscribe()

    def _require_user(self) -> UserResponse:
        if self.session.user is None:
            raise AuthenticationRequired("Must be logged in to add to cart")
        return self.session.user

    async def fetch_cart(self):
        if self.session.user is None:
            self.items = []
            self.loading = False
            return

        self.loading = True
        try:
            rows = await self.api.get("/cart_items")
            self.items = [CartItemOut.model_validate(r) for r in rows]
        except PersistenceError as e:
            logger.warning(f"Cart fetch failed, keeping previous view: {e.detail}")
        finally:
            self.loading = False

    def find_line(self, product_id: str) -> Optional[CartItemOut]:
        return next((it for it in self.items if it.product_id == product_id), None)

    async def add_to_cart(self, product_id: str):
        self._require_user()

        existing = self.find_line(product_id)
        if existing:
            await self.update_quantity(existing.id, existing.quantity + 1)
            return

        await self.api.post("/cart_items", json={"product_id": product_id, "quantity": 1})
        await self.fetch_cart()

    async def update_quantity(self, item_id: str, quantity: int):
        if quantity < 1:
            await self.remove_from_cart(item_id)
            return

        await self.api.patch(f"/cart_items/{item_id}", json={"quantity": quantity})
        await self.fetch_cart()

    async def remove_from_cart(self, item_id: str):
        await self.api.delete(f"/cart_items/{item_id}")
        await self.fetch_cart()

    async def clear_cart(self):
        if self.session.user is None:
            return

        await self.api.delete("/cart_items")
        # Post-state is known, no reload needed
        self.items = []

    @property
    def total(self) -> Decimal:
        return cart_total(self.items)

    @property
    def count(self) -> int:
        return sum(item.quantity for item in self.items)

    def get_cart_total(self) -> Decimal:
        return self.total

    def get_cart_count(self) -> int:
        return self.count
