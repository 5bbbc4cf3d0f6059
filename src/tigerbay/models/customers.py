"""Customer models."""

from datetime import date, datetime
from typing import Literal, TypeAlias

from .common import ApiModel, LinkedObject, QueryModel

Gender: TypeAlias = Literal["NotSet", "Male", "Female"]


class CustomerSearchRequest(QueryModel):
    username: str | None = None
    email: str | None = None
    surname: str | None = None
    post_code: str | None = None
    date_of_birth: date | None = None


class Customer(LinkedObject):
    id: int
    title: str = ""
    forename: str = ""
    surname: str = ""
    gender: Gender | str = "NotSet"
    username: str = ""
    email_address: str = ""
    date_of_birth: datetime | None = None
    tags: str = ""
    agent_id: int | None = None
    do_not_email: bool = False
    do_not_mail: bool = False
    reference: str = ""
    external_reference: str = ""


class CreateCustomerRequest(ApiModel):
    title: str
    forename: str
    surname: str
    username: str | None = None


class CustomerContact(ApiModel):
    """Postal, phone and email contact details for a customer or passenger."""

    title: str
    forename: str
    surname: str
    type: str = "Primary"
    address0: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    town_city: str | None = None
    county: str | None = None
    post_code: str | None = None
    country: str | None = None
    personal_mobile: str | None = None
    personal_landline: str | None = None
    personal_email: str | None = None
    business_mobile: str | None = None
    business_landline: str | None = None
    business_email: str | None = None
    description: str | None = None


class CustomerDocument(LinkedObject):
    """A document (itinerary, invoice, ticket) issued to a customer."""

    id: int
    name: str = ""
    description: str = ""
    type: str = ""
    created_date: datetime | None = None
