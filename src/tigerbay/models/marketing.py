"""Marketing source models from the system setup endpoints."""

import pydantic

from .common import ApiModel


class MarketingSubsource(ApiModel):
    id: int
    name: str = ""
    description: str = ""
    api_visible: bool = pydantic.Field(False, alias="APIVisible")


class MarketingSource(ApiModel):
    id: int
    name: str = ""
    description: str = ""
    subsources: list[MarketingSubsource] = []
