from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import ArgumentError
from .orders_types import ActiveOrdersRequest, InactiveOrdersRequest, OrdersResponse
from .transport import Timeout

if TYPE_CHECKING:
    from .client import TgtgClient

ORDERS_BASE_PATH = "order/v6"


class OrdersService:
    def __init__(self, client: TgtgClient):
        self._client = client

    def active(self, active_orders_request: ActiveOrdersRequest | None = None, *, timeout: Timeout = None) -> OrdersResponse:
        """Orders not yet picked up. Defaults to the logged in user."""
        if active_orders_request is None:
            active_orders_request = ActiveOrdersRequest()
        user_id = self._client.resolve_user_id(
            active_orders_request.user_id, "active_orders_request.user_id", "active_orders_request"
        )
        active_orders_request = active_orders_request.model_copy(update={"user_id": user_id})

        req = self._client.new_request("POST", f"{ORDERS_BASE_PATH}/active", active_orders_request)
        self._client.authorize(req)
        return self._client.do(req, OrdersResponse, timeout=timeout)

    def inactive(self, inactive_orders_request: InactiveOrdersRequest | None, *, timeout: Timeout = None) -> OrdersResponse:
        """Past orders, one page at a time; check ``has_more`` for the next page."""
        if inactive_orders_request is None:
            raise ArgumentError("inactive_orders_request", "must not be None")
        user_id = self._client.resolve_user_id(
            inactive_orders_request.user_id, "inactive_orders_request.user_id", "inactive_orders_request"
        )
        inactive_orders_request = inactive_orders_request.model_copy(update={"user_id": user_id})

        req = self._client.new_request("POST", f"{ORDERS_BASE_PATH}/inactive", inactive_orders_request)
        self._client.authorize(req)
        return self._client.do(req, OrdersResponse, timeout=timeout)
