"""System configuration (setup) and health API actions."""

from ..models.common import HealthCheckEntry
from ..models.marketing import MarketingSource
from .base import ApiGroup


class SetupApi(ApiGroup):
    def marketing_sources(self) -> list[MarketingSource]:
        data = self._get("/setup/marketingSources")
        return [MarketingSource.model_validate(item) for item in data or []]

    def healthcheck(self) -> dict[str, HealthCheckEntry]:
        data = self._get("/healthcheck")
        return {
            name: HealthCheckEntry.model_validate(entry)
            for name, entry in (data or {}).items()
        }
