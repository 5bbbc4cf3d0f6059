"""Shared model types for TigerBay API resources.

The API uses PascalCase JSON keys. Models expose snake_case attributes and
map them with an alias generator; fields the API spells irregularly carry
an explicit alias.
"""

from datetime import datetime
from typing import Literal, Protocol, runtime_checkable

import pydantic
from pydantic.alias_generators import to_camel, to_pascal

from ..errors import LinkResolutionError


class ApiModel(pydantic.BaseModel):
    """Base model for API resources.

    Unknown fields are preserved and missing ones default, since responses
    are populated entirely by the server.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )


class QueryModel(pydantic.BaseModel):
    """Base model for search parameters sent as camelCase query keys."""

    model_config = pydantic.ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Link(ApiModel):
    """A reference to additional data available for a resource."""

    rel: str
    href: str
    method: str = "GET"


@runtime_checkable
class HasSelfLink(Protocol):
    """A resource that can name its own canonical location."""

    def self_href(self) -> str: ...


class LinkedObject(ApiModel):
    """A resource carrying hypermedia links."""

    links: list[Link] = []

    def self_href(self) -> str:
        """Return the href of this resource's ``self`` link.

        Raises:
            LinkResolutionError: If no link with relation ``self`` is present.
        """
        for link in self.links:
            if link.rel == "self":
                return link.href
        msg = f"{type(self).__name__} has no 'self' link"
        raise LinkResolutionError(msg)


class DateRange(ApiModel):
    """A timespan between two dates."""

    from_: datetime = pydantic.Field(alias="From")
    to: datetime


class ApiWarning(ApiModel):
    """A warning attached to a search result."""

    title: str = ""
    message: str = ""


class PassengerAssignment(ApiModel):
    component_id: str
    passenger_ids: list[int]


class CurrencyDetails(ApiModel):
    code: str = ""
    name: str = ""
    default_rate: float = 0.0
    full_name: str = ""


class Price(ApiModel):
    """Price information.

    ``html_format`` holds the currency and value pre-formatted for HTML.
    """

    currency_code: str = ""
    currency_details: CurrencyDetails | None = None
    value: float = 0.0
    html_format: str = ""


class UpdateOperation(pydantic.BaseModel):
    """One JSON-patch style operation against a remote resource.

    ``value`` may be any JSON value.
    """

    op: Literal["replace"] = "replace"
    path: str
    value: pydantic.JsonValue = None


class HealthCheckEntry(ApiModel):
    name: str = ""
    is_healthy: bool = False
    message: str = ""
    duration: str = ""
