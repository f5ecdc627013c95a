# storefront/client/session.py
import logging
from typing import Awaitable, Callable, List, Optional

from storefront.client.api import ApiClient
from storefront.client.errors import PersistenceError
from storefront.schemas.user import UserResponse

logger = logging.getLogger(__name__)

Listener = Callable[[Optional[UserResponse]], Awaitable[None]]


class SessionProvider:
    """Holds the current identity and notifies subscribers when it changes."""

    def __init__(self, api: ApiClient):
        self.api = api
        self.user: Optional[UserResponse] = None
        self._listeners: List[Listener] = []

    @property
    def access_token(self) -> Optional[str]:
        return self.api.access_token

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _notify(self):
        for listener in list(self._listeners):
            await listener(self.user)

    async def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> UserResponse:
        data = await self.api.post("/register", json={"email": email, "password": password, "full_name": full_name})
        return UserResponse.model_validate(data)

    async def sign_in(self, email: str, password: str) -> UserResponse:
        token = await self.api.post("/login", json={"email": email, "password": password})
        previous = self.api.access_token
        self.api.access_token = token["access_token"]
        try:
            me = await self.api.get("/me")
        except PersistenceError:
            self.api.access_token = previous
            raise
        self.user = UserResponse.model_validate(me)
        logger.info(f"Signed in as {self.user.email}")
        await self._notify()
        return self.user

    async def sign_out(self):
        if self.user is None and self.api.access_token is None:
            return
        self.api.access_token = None
        self.user = None
        logger.info("Signed out")
        await self._notify()
