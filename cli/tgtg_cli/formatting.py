from __future__ import annotations

from datetime import datetime, timezone

from tgtg_client.items_types import PickupInterval, Price


def _utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(value: datetime | str | None) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return text
    return _utc(dt).strftime("%Y-%m-%d %H:%M UTC")


def format_interval(interval: PickupInterval) -> str:
    if interval.start is None or interval.end is None:
        return "-"
    start, end = _utc(interval.start), _utc(interval.end)
    if start.date() == end.date():
        return f"{start:%Y-%m-%d %H:%M}-{end:%H:%M} UTC"
    return f"{format_timestamp(start)} - {format_timestamp(end)}"


def format_price(price: Price) -> str:
    if not price.code:
        return "-"
    return str(price)


def mask_token(token: str) -> str:
    if not token:
        return "-"
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}…{token[-4:]}"
