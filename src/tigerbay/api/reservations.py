"""Reservation API actions."""

from collections.abc import Sequence
from typing import Any

import structlog

from ..errors import TransportError
from ..models.common import UpdateOperation
from ..models.reservations import (
    AddComponentRequest,
    AddPassengerRequest,
    CreateReservationRequest,
    FindReservationRequest,
    FindReservationResponse,
    Passenger,
    Reservation,
    ServiceAssignmentRequest,
)
from ..models.tasks import Task
from ..query import flatten_query
from .base import ApiGroup

logger = structlog.get_logger(__name__)


class ReservationsApi(ApiGroup):
    """Create, find, and modify reservations."""

    def create(self, params: CreateReservationRequest) -> Reservation:
        path = "/sales/reservations/"
        return self._parse(Reservation, self._post(path, params), path)

    def search(self, params: FindReservationRequest) -> list[FindReservationResponse]:
        """Find reservations matching the given filters."""
        data = self._get("/sales/reservations", params=flatten_query(params))
        return [FindReservationResponse.model_validate(item) for item in data or []]

    def find(self, id: int | str) -> Reservation:
        """Get an existing reservation by ID."""
        path = f"/sales/reservations/{id}"
        return self._parse(Reservation, self._get(path), path)

    def add_passenger(
        self, booking_id: int | str, passenger: AddPassengerRequest
    ) -> Passenger:
        """Add a new passenger to an existing booking."""
        path = f"/sales/reservations/{booking_id}/passengers"
        return self._parse(Passenger, self._post(path, passenger), path)

    def assign(
        self,
        search_id: str,
        result_id: str,
        assignment: ServiceAssignmentRequest,
    ) -> dict[str, Any]:
        """Assign passengers to services of a search result.

        Args:
            search_id: Search result set ID.
            result_id: Result (departure) ID within the search.
            assignment: Passenger assignments per service type.
        """
        return self._post(
            f"/toursSearch/searches/{search_id}/tourDepartures/{result_id}"
            "/combinations",
            assignment,
        )

    def add_component(
        self,
        reservation_id: int | str,
        component_id: str,
        parent_component_id: int | None = None,
        replace_component_id: int | None = None,
    ) -> bool:
        """Add a service component to a reservation.

        Args:
            reservation_id: ID of the reservation to add the component to.
            component_id: Cache ID of the component to add.
            parent_component_id: If given, the component is added as a child
                of this component.
            replace_component_id: If given, the component replaces this one.

        Returns:
            True once the component has been added.

        Raises:
            TransportError: If the API rejects the component.
        """
        request = AddComponentRequest(
            cache_id=component_id,
            parent_component_id=parent_component_id,
            replace_component_id=replace_component_id,
        )
        try:
            self._post(f"/sales/reservations/{reservation_id}/components", request)
        except TransportError:
            logger.exception(
                "Failed to add component",
                reservation_id=reservation_id,
                component_id=component_id,
            )
            raise
        return True

    def update(self, id: int | str, updates: Sequence[UpdateOperation]) -> None:
        """Perform arbitrary alterations to a booking.

        Prefer the dedicated methods where one exists.

        Example::

            client.reservations.update(
                booking_id,
                [
                    UpdateOperation(path="/customerId", value=4830),
                    UpdateOperation(path="/ConditionsAccepted", value=True),
                ],
            )
        """
        self._patch(f"/sales/reservations/{id}", updates)

    def update_passenger(
        self,
        id: int | str,
        passenger_id: int | str,
        updates: Sequence[UpdateOperation],
    ) -> None:
        """Perform arbitrary updates to a booking passenger. See :meth:`update`."""
        self._patch(f"/sales/reservations/{id}/passengers/{passenger_id}", updates)

    def tasks(self, id: int | str) -> list[Task]:
        data = self._get(f"/sales/reservations/{id}/tasks")
        return [Task.model_validate(item) for item in data or []]

    def confirm(self, id: int | str) -> None:
        """Confirm a reservation."""
        self._post("/sales/reservations/confirmations", {"ReservationId": id})
