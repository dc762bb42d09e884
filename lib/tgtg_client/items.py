from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import ArgumentError
from .items_types import FavoriteItemRequest, GetItemRequest, GetItemResponse, ListItemsRequest, ListItemsResponse
from .transport import Timeout

if TYPE_CHECKING:
    from .client import TgtgClient

ITEMS_BASE_PATH = "item/v7"


class ItemsService:
    def __init__(self, client: TgtgClient):
        self._client = client

    def list(self, list_items_request: ListItemsRequest | None, *, timeout: Timeout = None) -> ListItemsResponse:
        """List items around ``origin``. Paging is up to the caller."""
        if list_items_request is None:
            raise ArgumentError("list_items_request", "must not be None")
        user_id = self._client.resolve_user_id(
            list_items_request.user_id, "list_items_request.user_id", "list_items_request"
        )
        list_items_request = list_items_request.model_copy(update={"user_id": user_id})

        req = self._client.new_request("POST", f"{ITEMS_BASE_PATH}/", list_items_request)
        self._client.authorize(req)
        return self._client.do(req, ListItemsResponse, timeout=timeout)

    def get(self, get_item_request: GetItemRequest | None, item_id: str, *, timeout: Timeout = None) -> GetItemResponse:
        if not item_id:
            raise ArgumentError("item_id", "must not be empty")
        if get_item_request is None:
            raise ArgumentError("get_item_request", "must not be None")
        user_id = self._client.resolve_user_id(get_item_request.user_id, "get_item_request.user_id", "get_item_request")
        get_item_request = get_item_request.model_copy(update={"user_id": user_id})

        req = self._client.new_request("POST", f"{ITEMS_BASE_PATH}/{item_id}", get_item_request)
        self._client.authorize(req)
        return self._client.do(req, GetItemResponse, timeout=timeout)

    def favorite(self, favorite_item_request: FavoriteItemRequest | None, item_id: str, *, timeout: Timeout = None) -> None:
        """Mark or unmark an item as favorite. The API answers with no body."""
        if not item_id:
            raise ArgumentError("item_id", "must not be empty")
        if favorite_item_request is None:
            raise ArgumentError("favorite_item_request", "must not be None")

        req = self._client.new_request("POST", f"{ITEMS_BASE_PATH}/{item_id}/setFavorite", favorite_item_request)
        self._client.authorize(req)
        self._client.do(req, None, timeout=timeout)
