"""Tour search API actions."""

from ..models.tours import (
    AccommodationUnit,
    Flight,
    TourDeparture,
    TourSearchRequest,
    TourSearchResponse,
)
from .base import ApiGroup


class ToursApi(ApiGroup):
    """Search tour departures against a reservation and inspect the results."""

    def search(self, params: TourSearchRequest) -> TourSearchResponse:
        """Start a departure search.

        The returned ``id`` identifies the result set for :meth:`departures`,
        :meth:`flights` and :meth:`accommodation`.
        """
        path = "/toursSearch/searches"
        return self._parse(TourSearchResponse, self._post(path, params), path)

    def departures(self, search_id: str) -> list[TourDeparture]:
        data = self._get(f"/toursSearch/searches/{search_id}/tourDepartures")
        return [TourDeparture.model_validate(item) for item in data or []]

    def flights(self, search_id: str, result_id: str) -> list[Flight]:
        """Get the flight options for a departure in a search result set."""
        data = self._get(
            f"/toursSearch/searches/{search_id}/tourDepartures/{result_id}/flightgroups"
        )
        return [Flight.model_validate(item) for item in data or []]

    def accommodation(self, search_id: str, result_id: str) -> list[AccommodationUnit]:
        """Get the accommodation units for a departure in a search result set."""
        data = self._get(
            f"/toursSearch/searches/{search_id}/tourDepartures/{result_id}"
            "/accommodationUnits"
        )
        return [AccommodationUnit.model_validate(item) for item in data or []]
