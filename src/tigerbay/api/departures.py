"""Departure cache API actions."""

from ..models.departures import CachedDeparture, CacheSearchRequest, CacheStats
from ..query import flatten_query
from .base import ApiGroup


class DepartureCacheApi(ApiGroup):
    """Search the pre-computed departure cache."""

    def search(self, params: CacheSearchRequest) -> list[CachedDeparture]:
        """Search cached departures.

        Filters are sent as ``searchQuery[...]`` query parameters; unset
        filters are omitted.
        """
        query = flatten_query(params, "searchQuery")
        data = self._get("/toursearch/departures", params=query)
        return [CachedDeparture.model_validate(item) for item in data or []]

    def status(self) -> CacheStats:
        path = "/toursearch/cache/status"
        return self._parse(CacheStats, self._get(path), path)

    def find(self, id: str) -> CachedDeparture:
        path = f"/toursearch/departures/{id}"
        return self._parse(CachedDeparture, self._get(path), path)
