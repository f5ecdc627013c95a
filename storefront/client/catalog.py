from typing import List, Optional

from storefront.client.api import ApiClient
from storefront.schemas.product import ProductOut


class CatalogReader:
    """Read-only access to the product catalog."""

    def __init__(self, api: ApiClient):
        self.api = api

    async def fetch_products(self, category: Optional[str] = None, search: Optional[str] = None) -> List[ProductOut]:
        rows = await self.api.get("/products", category=category, q=search)
        return [ProductOut.model_validate(r) for r in rows]

    async def fetch_categories(self) -> List[str]:
        return await self.api.get("/products/categories")

    async def fetch_product(self, product_id: str) -> ProductOut:
        return ProductOut.model_validate(await self.api.get(f"/products/{product_id}"))
