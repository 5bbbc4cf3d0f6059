"""Passenger APIS (advance passenger information) models."""

from .common import ApiModel


class PassengerApis(ApiModel):
    """Travel document details for a passenger.

    All fields are optional so that a partial instance can be used as an
    update: unset fields leave the stored value unchanged.
    """

    document_type: str | None = None
    document_number: str | None = None
    nationality: str | None = None
    place_of_issue: str | None = None
    country_of_residence: str | None = None
    issue_date: str | None = None
    expiry_date: str | None = None
    date_of_birth: str | None = None
    place_of_birth: str | None = None
