from __future__ import annotations

from typing import Any, TypeVar

import httpx

from .auth import AuthService
from .auth_context import AuthContext
from .config_types import ClientConfig
from .errors import ArgumentError
from .items import ItemsService
from .orders import OrdersService
from .transport import Timeout, Transport

T = TypeVar("T")


class TgtgClient:
    """Too Good To Go API client.

    Pass an ``httpx.Client`` to control TLS, proxies or mocking; otherwise one is
    created (and closed by :meth:`close`).
    """

    def __init__(self, cfg: ClientConfig | None = None, *, http_client: httpx.Client | None = None):
        self.cfg = cfg or ClientConfig()
        self._t = Transport(self.cfg, http_client)
        self.auth_context = AuthContext()

        self.auth = AuthService(self)
        self.items = ItemsService(self)
        self.orders = OrdersService(self)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> TgtgClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def set_auth_context(self, access_token: str, refresh_token: str, user_id: str) -> None:
        """Restore a session saved from an earlier login."""
        self.auth_context.set(access_token, refresh_token, user_id)

    def new_request(self, method: str, path: str, body: Any | None = None) -> httpx.Request:
        return self._t.build_request(method, path, body)

    def do(self, request: httpx.Request, target: type[T] | None = None, *, timeout: Timeout = None) -> T | None:
        return self._t.execute(request, target, timeout=timeout)

    def authorize(self, request: httpx.Request) -> httpx.Request:
        request.headers["Authorization"] = f"Bearer {self.auth_context.access_token}"
        return request

    def resolve_user_id(self, given: str, argument: str, request_name: str) -> str:
        """Return ``given`` or fall back to the logged in user's id."""
        if given:
            return given
        user_id = self.auth_context.user_id
        if not user_id:
            raise ArgumentError(
                argument,
                "must not be empty - client has no user id set - please log in using the auth service first "
                f"or provide user_id in {request_name}",
            )
        return user_id
