# storefront/client/api.py
import logging
from typing import Optional

import httpx

from storefront.client.errors import PersistenceError
from storefront.config import settings

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


class ApiClient:
    """Thin async wrapper over the storefront API.

    Every call either returns the decoded JSON body (``None`` for empty
    responses) or raises :class:`PersistenceError`. No retries, no timeouts
    beyond httpx defaults.
    """

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or settings.API_URL
        self._http = httpx.AsyncClient(base_url=self.base_url, transport=transport)
        self.access_token: Optional[str] = None

    def _headers(self) -> dict:
        if self.access_token:
            return {"Authorization": f"Bearer {self.access_token}"}
        return {}

    async def request(self, method: str, path: str, *, json=None, params=None):
        try:
            response = await self._http.request(
                method, path, json=json, params=params, headers=self._headers()
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = _error_detail(e.response)
            logger.error(f"{method} {path} failed with {e.response.status_code}: {detail}")
            raise PersistenceError(detail, status_code=e.response.status_code) from e
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise PersistenceError(str(e)) from e

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get(self, path: str, **params):
        return await self.request("GET", path, params={k: v for k, v in params.items() if v is not None})

    async def post(self, path: str, json=None):
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json=None):
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str):
        return await self.request("DELETE", path)

    async def aclose(self):
        await self._http.aclose()
