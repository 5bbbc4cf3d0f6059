"""Tour search models: searches, departures, flights and accommodation."""

from datetime import datetime

import pydantic

from .common import ApiModel, ApiWarning, DateRange, LinkedObject, Price


class TourSearchRequest(ApiModel):
    """Parameters for a departure search run against a reservation.

    ``tour_reference`` is the SKU of the tour; ``promotional_codes`` are
    applied to pricing.
    """

    reservation_id: int
    date_range: DateRange
    sales_channel: str
    tour_reference: str | None = None
    promotional_codes: list[str] | None = None


class TourSearchResponse(LinkedObject):
    """A search result set. Result ids are only valid in the context of ``id``."""

    id: str
    reservation_id: int | None = None
    tour_departures_count: int = 0


class Inventory(ApiModel):
    available: int = 0
    is_on_request: bool = False
    is_free_sell: bool = False
    is_closed: bool = False


class OverrideRules(ApiModel):
    type: str = "PerPerson"
    adult_price: Price | None = None
    child_price: Price | None = None
    infant_price: Price | None = None
    unit_price: Price | None = None


class FlightPricing(ApiModel):
    total_price: Price | None = None
    was_price: Price | None = None
    override_rules: OverrideRules | None = None


class Tour(LinkedObject):
    setup_id: int | None = None


class DeparturePricing(ApiModel):
    total_price: Price | None = None
    was_price: Price | None = None


class DepartureDuration(ApiModel):
    days: int = 0
    nights: int = pydantic.Field(0, alias="NightS")
    description: str = ""
    from_: datetime | None = pydantic.Field(None, alias="From")
    to: datetime | None = None


class TourDeparture(LinkedObject):
    id: str
    setup_id: int | None = None
    name: str = ""
    reference: str = ""
    duration: DepartureDuration | None = None
    pricing: DeparturePricing | None = None
    warnings: list[ApiWarning] = []
    tour: Tour | None = None
    start_location_id: int | None = None
    end_location_id: int | None = None
    tags: list[str] = []
    allocation_on_request: bool = False


class FlightCarrier(ApiModel):
    name: str = ""
    reference: str = ""


class FlightLeg(LinkedObject):
    id: str
    flight_number: str = ""
    setup_id: int | None = None
    departure_datetime: datetime | None = None
    departure_airport: str = ""
    arrival_airport: str = ""
    arrival_date_time: datetime | None = None
    transport_mode: str = "Flight"
    seat: str = ""
    inventory_details: Inventory | None = None
    pricing: FlightPricing | None = None
    operating_carrier: FlightCarrier | None = None
    is_mandatory: bool = False
    is_default: bool = False


class Flight(ApiModel):
    """A group of flight legs offered for a departure."""

    id: str
    master_group_id: int | None = pydantic.Field(None, alias="MasterGRoupId")
    rate_option: str = "Default"
    more_seats_enabled: bool = False
    flights: list[FlightLeg] = []


class Occupancy(ApiModel):
    from_: int = pydantic.Field(0, alias="From")
    to: int = 0


class BoardBasis(ApiModel):
    name: str = ""
    reference: str = ""
    description: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None


class Accommodation(LinkedObject):
    setup_id: int | None = None
    reference: str = ""
    name: str = ""
    type: str = ""


class AccommodationUnit(LinkedObject):
    id: str
    setup_id: int | None = None
    name: str = ""
    unit_description: str = ""
    reference: str = ""
    unit_name: str = ""
    unit_number: str = ""
    unit_type: str = ""
    bed_type: str = ""
    occupancy: Occupancy | None = None
    adult_occupancy: Occupancy | None = None
    child_occupancy: Occupancy | None = None
    infant_occupancy: Occupancy | None = None
    standard_occupancy: int = 0
    source: str = ""
    accommodation_unit_reference: str = ""
    duration: DateRange | None = None
    pricing: FlightPricing | None = None
    inventory_details: Inventory | None = None
    accommodation: Accommodation | None = None
    is_mandatory: bool = False
    is_default: bool = False
    board_basis_breakdown: list[BoardBasis] = []
