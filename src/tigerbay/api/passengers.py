"""Actions on a single passenger within a reservation."""

import httpx

from ..models.customers import CustomerContact
from ..models.passengers import PassengerApis
from .base import ApiGroup


class PassengerApi(ApiGroup):
    """API actions bound to one passenger of one booking."""

    def __init__(self, http: httpx.Client, booking_id: int, passenger_id: int):
        super().__init__(http)
        self.booking_id = booking_id
        self.passenger_id = passenger_id

    @property
    def path(self) -> str:
        """Path to the passenger resource."""
        return f"/reservations/{self.booking_id}/passengers/{self.passenger_id}"

    def get_apis(self) -> PassengerApis:
        path = f"{self.path}/apis"
        return self._parse(PassengerApis, self._get(path), path)

    def contacts(self) -> list[CustomerContact]:
        data = self._get(f"{self.path}/contacts")
        return [CustomerContact.model_validate(item) for item in data or []]

    def update_apis(self, updates: PassengerApis) -> None:
        """Merge ``updates`` into the passenger's stored APIS details.

        Fields left as None in ``updates`` keep their current value. This
        reads the existing details first, so it performs two calls.
        """
        existing = self.get_apis()
        merged = existing.model_copy(update=updates.model_dump(exclude_none=True))
        self._put(f"{self.path}/apis", merged)
