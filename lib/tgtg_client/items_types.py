from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from .models import WireModel


class Origin(WireModel):
    latitude: float = 0.0
    longitude: float = 0.0


# Same wire shape as Origin.
Location = Origin


class Price(WireModel):
    code: str = ""
    decimals: int = 0
    minor_units: int = 0

    def amount(self) -> Decimal:
        return Decimal(self.minor_units).scaleb(-self.decimals)

    def __str__(self) -> str:
        return f"{self.amount():.{self.decimals}f} {self.code}".strip()


class Picture(WireModel):
    current_url: str = ""
    picture_id: str = ""


class AverageOverallRating(WireModel):
    average_overall_rating: float = 0.0
    month_count: int = 0
    rating_count: int = 0


class Badges(WireModel):
    badge_type: str = ""
    month_count: int = 0
    percentage: int = 0
    rating_group: str = ""
    user_count: int = 0


class SalesTaxes(WireModel):
    tax_description: str = ""
    tax_percentage: float = 0.0
    tax_amount: Price = Field(default_factory=Price)


class PickupInterval(WireModel):
    start: datetime | None = None
    end: datetime | None = None


class Country(WireModel):
    iso_code: str = ""
    name: str = ""


class Address(WireModel):
    address_line: str = ""
    city: str = ""
    country: Country = Field(default_factory=Country)
    postal_code: str = ""


class PickupLocation(WireModel):
    address: Address = Field(default_factory=Address)
    location: Location = Field(default_factory=Location)


# Same wire shape as PickupLocation.
StoreLocation = PickupLocation


class Milestones(WireModel):
    type: str = ""
    value: str = ""


class Item(WireModel):
    average_overall_rating: AverageOverallRating = Field(default_factory=AverageOverallRating)
    badges: list[Badges] = Field(default_factory=list)
    buffet: bool = False
    can_user_supply_packaging: bool = False
    collection_info: str = ""
    cover_picture: Picture = Field(default_factory=Picture)
    description: str = ""
    diet_categories: list[str] = Field(default_factory=list)
    favorite_count: int = 0
    item_category: str = ""
    item_id: str = ""
    logo_picture: Picture = Field(default_factory=Picture)
    name: str = ""
    packaging_option: str = ""
    positive_rating_reasons: list[str] = Field(default_factory=list)
    price: Price = Field(default_factory=Price)
    price_excluding_taxes: Price = Field(default_factory=Price)
    price_including_taxes: Price = Field(default_factory=Price)
    sales_taxes: list[SalesTaxes] = Field(default_factory=list)
    show_sales_taxes: bool = False
    tax_amount: Price = Field(default_factory=Price)
    taxation_policy: str = ""
    value_excluding_taxes: Price = Field(default_factory=Price)
    value_including_taxes: Price = Field(default_factory=Price)


class StoreItems(WireModel):
    display_name: str = ""
    distance: float = 0.0
    favorite: bool = False
    in_sales_window: bool = False
    item: Item = Field(default_factory=Item)
    items_available: int = 0
    new_item: bool = False
    pickup_interval: PickupInterval = Field(default_factory=PickupInterval)
    pickup_location: PickupLocation = Field(default_factory=PickupLocation)
    purchase_end: str = ""


class Store(WireModel):
    branch: str = ""
    cover_picture: Picture = Field(default_factory=Picture)
    description: str = ""
    distance: float = 0.0
    favorite_count: int = 0
    hidden: bool = False
    items: list[StoreItems] = Field(default_factory=list)
    logo_picture: Picture = Field(default_factory=Picture)
    milestones: list[Milestones] = Field(default_factory=list)
    store_id: str = ""
    store_location: StoreLocation = Field(default_factory=StoreLocation)
    store_name: str = ""
    store_time_zone: str = ""
    tax_identifier: str = ""
    we_care: bool = False
    website: str = ""


class Items(WireModel):
    """One entry of the discover/list response."""

    item: Item = Field(default_factory=Item)
    store: Store = Field(default_factory=Store)
    display_name: str = ""
    pickup_interval: PickupInterval = Field(default_factory=PickupInterval)
    pickup_location: Location = Field(default_factory=Location)
    purchase_end: datetime | None = None
    items_available: int = 0
    sold_out_at: datetime | None = None
    distance: float = 0.0
    favorite: bool = False
    in_sales_window: bool = False
    new_item: bool = False


class ListItemsRequest(WireModel):
    page_size: int = 0
    page: int = 0
    user_id: str = ""
    radius: int = 0
    origin: Origin | None = None
    item_categories: list[str] = Field(default_factory=list)
    diet_categories: list[str] = Field(default_factory=list)
    pickup_earliest: str = ""
    pickup_latest: str = ""
    search_phrase: str = ""
    discover: bool = False
    favorites_only: bool = False
    with_stock_only: bool = False
    hidden_only: bool = False
    we_care_only: bool = False


class ListItemsResponse(WireModel):
    items: list[Items] = Field(default_factory=list)


class GetItemRequest(WireModel):
    user_id: str = ""
    origin: Origin | None = None


class GetItemResponse(WireModel):
    item: Item = Field(default_factory=Item)
    store: Store = Field(default_factory=Store)
    display_name: str = ""
    distance: float = 0.0
    favorite: bool = False
    in_sales_window: bool = False
    items_available: int = 0
    new_item: bool = False
    pickup_interval: PickupInterval = Field(default_factory=PickupInterval)
    pickup_location: PickupLocation = Field(default_factory=PickupLocation)
    purchase_end: str = ""
    sharing_url: str = ""


class FavoriteItemRequest(WireModel):
    is_favorite: bool = False
