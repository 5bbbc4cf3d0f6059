"""Departure cache models.

The departure cache is a pre-computed index of tour departures that can be
searched without first creating a reservation.
"""

from datetime import date, datetime

import pydantic

from .common import ApiModel, QueryModel
from .tours import AccommodationUnit, Inventory


class DateBounds(QueryModel):
    from_: date | datetime | None = pydantic.Field(None, alias="from")
    to: date | datetime | None = None


class PriceBounds(QueryModel):
    from_: float | None = pydantic.Field(None, alias="from")
    to: float | None = None


class CacheSearchRequest(QueryModel):
    departure_setup_id: int | None = None
    service_date_range: DateBounds | None = None
    price_range: PriceBounds | None = None
    adult_count: int | None = None
    tour_name: str | None = None
    tour_code: str | None = None
    accommodation: int | None = None
    location: int | None = None
    extra: int | None = None
    tags: list[str] | None = None
    departure_points: list[int] | None = None
    locations: list[int] | None = None
    extras: list[int] | None = None
    years: list[int] | None = None
    months: list[int] | None = None
    passengercount: list[int] | None = None
    currency_code: str | None = None


class CacheStats(ApiModel):
    item_count: int = 0
    average_age_seconds: float = 0.0


class DeparturePrice(ApiModel):
    value: float = 0.0
    currency_code: str = ""


class CachedDeparture(ApiModel):
    """A departure as stored in the search cache."""

    id: str
    refresh_id: str = ""
    departure_setup_id: int | None = None
    price_set_id: int | None = None
    tour_id: int | None = None
    generated: datetime | None = None
    name: str = ""
    code: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    duration: int = 0
    inventory_summary: Inventory | None = None
    single_traveller_units: list[AccommodationUnit] = []
    group_traveller_units: list[AccommodationUnit] = []
    tour_price: DeparturePrice | None = None
    per_person_single_traveller_total_price: DeparturePrice | None = None
    per_person_group_traveller_total_price: DeparturePrice | None = None
    minimum_single_rooms: int = 0
    minimum_twin_rooms: int = 0
    minimum_triple_rooms: int = 0
    tags: list[str] = []
    is_guaranteed: bool = False
    is_cancelled: bool = False
    ttl: int = 0
