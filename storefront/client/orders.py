# storefront/client/orders.py
import asyncio
import logging
from typing import Dict, List

from storefront.client.api import ApiClient
from storefront.client.errors import PersistenceError
from storefront.client.session import SessionProvider
from storefront.schemas.order import OrderItemOut, OrderOut

logger = logging.getLogger(__name__)


class OrderHistoryReader:
    """Display-only view of the signed-in user's past orders.

    Lines are fetched with one request per order, issued concurrently.
    Fine for a handful of orders; a joined query would be the next step
    for large histories.
    """

    def __init__(self, api: ApiClient, session: SessionProvider):
        self.api = api
        self.session = session
        self.orders: List[OrderOut] = []
        self.order_items: Dict[str, List[OrderItemOut]] = {}
        self.loading = False

    def lines_for(self, order_id: str) -> List[OrderItemOut]:
        return self.order_items.get(order_id, [])

    async def _fetch_lines(self, order_id: str) -> List[OrderItemOut]:
        try:
            rows = await self.api.get(f"/orders/{order_id}/items")
        except PersistenceError as e:
            logger.warning(f"Lines for order {order_id} unavailable: {e.detail}")
            return []
        return [OrderItemOut.model_validate(r) for r in rows]

    async def fetch_orders(self) -> List[OrderOut]:
        if self.session.user is None:
            self.orders, self.order_items = [], {}
            return self.orders

        self.loading = True
        try:
            rows = await self.api.get("/orders")
        except PersistenceError as e:
            logger.warning(f"Order history fetch failed: {e.detail}")
            self.orders, self.order_items = [], {}
            self.loading = False
            return self.orders

        try:
            orders = [OrderOut.model_validate(r) for r in rows]
            lines = await asyncio.gather(*(self._fetch_lines(o.id) for o in orders))
        finally:
            self.loading = False

        self.orders = orders
        self.order_items = {o.id: items for o, items in zip(orders, lines)}
        return self.orders
