from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from tgtg_client.auth_types import PollResponse
from tgtg_client.items_types import ListItemsRequest, Origin, PickupInterval, Price
from tgtg_client.orders_types import OrdersResponse


def _load(cls, data):
    return cls.model_validate_json(json.dumps(data))


def test_unknown_and_missing_keys_are_ignored() -> None:
    out = _load(PollResponse, {"access_token": "a", "unknown": {"nested": 1}})

    assert out.access_token == "a"
    assert out.refresh_token == ""
    assert out.startup_data.user.user_id == ""


def test_null_keeps_default() -> None:
    out = _load(ListItemsRequest, {"origin": None, "item_categories": None, "page": 3, "search_phrase": None})

    assert out.origin is None
    assert out.item_categories == []
    assert out.search_phrase == ""
    assert out.page == 3


def test_null_list_items_and_body_decode_as_empty() -> None:
    out = _load(OrdersResponse, {"orders": [None, {"order_id": "o1"}]})

    assert [o.order_id for o in out.orders] == ["", "o1"]
    assert PollResponse.model_validate_json("null") == PollResponse()


def test_wrong_types_are_rejected() -> None:
    with pytest.raises(ValidationError, match="startup_data.user"):
        _load(PollResponse, {"startup_data": {"user": "1"}})
    with pytest.raises(ValidationError, match="access_token"):
        _load(PollResponse, {"access_token": 12})
    with pytest.raises(ValidationError):
        _load(PollResponse, {"access_token_ttl_seconds": "ten"})
    with pytest.raises(ValidationError):
        _load(PollResponse, ["not", "an", "object"])


def test_timestamps() -> None:
    out = _load(PickupInterval, {"start": "2021-12-01T17:00:00+01:00", "end": "2021-12-01T17:30:00Z"})

    assert out.start == datetime(2021, 12, 1, 16, 0, tzinfo=timezone.utc)
    assert out.end.tzinfo is not None

    with pytest.raises(ValidationError, match="start"):
        _load(PickupInterval, {"start": "tomorrow"})


def test_request_body_dump() -> None:
    body = ListItemsRequest(user_id="1", origin=Origin(latitude=1.0, longitude=2.0), item_categories=["MEAL"])

    out = json.loads(body.model_dump_json())

    assert out["user_id"] == "1"
    assert out["origin"] == {"latitude": 1.0, "longitude": 2.0}
    assert out["item_categories"] == ["MEAL"]
    assert out["we_care_only"] is False
    assert _load(ListItemsRequest, out) == body


def test_datetime_dumped_as_iso_string() -> None:
    start = datetime(2021, 12, 1, 17, 0, tzinfo=timezone.utc)

    out = json.loads(PickupInterval(start=start).model_dump_json())

    assert datetime.fromisoformat(out["start"]) == start
    assert out["end"] is None


def test_price_amount() -> None:
    price = Price(code="EUR", decimals=2, minor_units=399)

    assert price.amount() == Decimal("3.99")
    assert str(price) == "3.99 EUR"
    assert str(Price(code="JPY", decimals=0, minor_units=500)) == "500 JPY"
