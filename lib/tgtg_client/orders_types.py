from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .items_types import PickupInterval, PickupLocation, Price, SalesTaxes
from .models import WireModel


class ActiveOrdersRequest(WireModel):
    user_id: str = ""


class Paging(WireModel):
    page: int = 0
    size: int = 0


class InactiveOrdersRequest(WireModel):
    user_id: str = ""
    paging: Paging = Field(default_factory=Paging)


class StoreLogo(WireModel):
    picture_id: str = ""
    current_url: str = ""
    is_automatically_created: bool = False


class ItemCoverImage(WireModel):
    picture_id: str = ""
    current_url: str = ""
    is_automatically_created: bool = False


class Order(WireModel):
    order_id: str = ""
    state: str = ""
    cancel_until: datetime | None = None
    redeem_interval: PickupInterval = Field(default_factory=PickupInterval)
    pickup_interval: PickupInterval = Field(default_factory=PickupInterval)
    quantity: int = 0
    price_including_taxes: Price = Field(default_factory=Price)
    price_excluding_taxes: Price = Field(default_factory=Price)
    total_applied_taxes: Price = Field(default_factory=Price)
    sales_taxes: list[SalesTaxes] = Field(default_factory=list)
    pickup_location: PickupLocation = Field(default_factory=PickupLocation)
    is_rated: bool = False
    time_of_purchase: datetime | None = None
    store_id: str = ""
    store_name: str = ""
    store_branch: str = ""
    store_logo: StoreLogo = Field(default_factory=StoreLogo)
    item_id: str = ""
    item_name: str = ""
    item_cover_image: ItemCoverImage = Field(default_factory=ItemCoverImage)
    is_buffet: bool = False
    can_user_supply_packaging: bool = False
    packaging_option: str = ""
    is_store_we_care: bool = False
    can_show_best_before_explainer: bool = False
    show_sales_taxes: bool = False


class OrdersResponse(WireModel):
    current_time: datetime | None = None
    has_more: bool = False
    orders: list[Order] = Field(default_factory=list)
