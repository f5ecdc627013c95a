# storefront/client/__init__.py
"""Async client core: session, catalog, cart, checkout and order history.

A :class:`Storefront` is the session-scoped context object. It owns one
instance of each component and the HTTP transport they share::

    async with Storefront() as shop:
        await shop.session.sign_in("ada@example.com", "secret")
        await shop.cart.add_to_cart(product_id)
        order = await shop.checkout.checkout(address)
"""
from typing import Optional

import httpx

from storefront.client.api import ApiClient
from storefront.client.cart import CartCoordinator
from storefront.client.catalog import CatalogReader
from storefront.client.checkout import CheckoutOrchestrator
from storefront.client.errors import AuthenticationRequired, EmptyCart, PersistenceError, StorefrontError
from storefront.client.orders import OrderHistoryReader
from storefront.client.session import SessionProvider


class Storefront:
    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api = ApiClient(base_url=base_url, transport=transport)
        self.session = SessionProvider(self.api)
        self.catalog = CatalogReader(self.api)
        self.cart = CartCoordinator(self.api, self.session)
        self.checkout = CheckoutOrchestrator(self.api, self.session, self.cart)
        self.orders = OrderHistoryReader(self.api, self.session)

    async def aclose(self):
        self.cart.close()
        await self.api.aclose()

    async def __aenter__(self):
        await self.cart.fetch_cart()
        return self

    async def __aexit__(self, *exc):
        await self.aclose()


__all__ = [
    "Storefront",
    "ApiClient",
    "SessionProvider",
    "CatalogReader",
    "CartCoordinator",
    "CheckoutOrchestrator",
    "OrderHistoryReader",
    "StorefrontError",
    "AuthenticationRequired",
    "PersistenceError",
    "EmptyCart",
]
