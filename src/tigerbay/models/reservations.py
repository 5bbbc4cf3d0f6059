"""Reservation (booking) models."""

from datetime import date, datetime
from typing import Literal, TypeAlias

from .common import ApiModel, LinkedObject, PassengerAssignment, Price, QueryModel

PassengerType: TypeAlias = Literal["Adult", "Child", "Infant"]


class CreateReservationRequest(ApiModel):
    """Parameters to create a new reservation.

    ``brand_channel_id`` is the brand or sales channel, ``currency_code`` the
    ISO code of the booking currency.
    """

    brand_channel_id: int
    currency_code: str


class FindReservationRequest(QueryModel):
    """Filters for searching existing reservations. Unset filters are omitted."""

    booking_reference: str | None = None
    lead_passenger_surname: str | None = None
    departure_date_minimum: date | datetime | None = None
    departure_date_maximum: date | datetime | None = None
    customer_id: int | None = None


class FindReservationResponse(LinkedObject):
    id: int
    passenger_count: int = 0
    component_count: int = 0
    quoted_by_user_id: int | None = None
    owner_user_id: int | None = None


class Reservation(LinkedObject):
    """A booking.

    Counts are per passenger class (see :data:`PassengerType`).
    ``outstanding_balance`` is the total price less payments made.
    """

    id: int
    booking_reference: str = ""
    partial_token: str = ""
    currency_code: str = ""
    customer_id: int | None = None
    agent_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    confirmed_date: datetime | None = None
    adult_count: int = 0
    child_count: int = 0
    infant_count: int = 0
    brand_channel_id: int | None = None
    balance_due: datetime | None = None
    location_id: int | None = None
    sales_channel_id: int | None = None
    conditions_accepted: bool = False
    total_price: Price | None = None
    deposit: Price | None = None
    outstanding_balance: Price | None = None
    commission: Price | None = None
    vat: Price | None = None
    agent_balance: Price | None = None
    customer_balance: Price | None = None
    quoted_by_user_id: int | None = None
    owner_user_id: int | None = None
    status: str = ""
    principal_component_id: int | None = None
    principal_component_name: str = ""


class AddPassengerRequest(ApiModel):
    type: PassengerType
    title: str
    forename: str
    surname: str
    is_lead: bool = False
    date_of_birth: date | None = None


class Passenger(ApiModel):
    id: int


class ServiceAssignmentRequest(ApiModel):
    """Assignment of passengers to services, keyed by service type.

    Example::

        ServiceAssignmentRequest(
            flight_groups=[
                PassengerAssignment(component_id="abc", passenger_ids=[1, 2])
            ]
        )
    """

    flight_groups: list[PassengerAssignment] | None = None
    accommodations: list[PassengerAssignment] | None = None


class AddComponentRequest(ApiModel):
    cache_id: str
    parent_component_id: int | None = None
    replace_component_id: int | None = None
