"""Note models."""

from typing import Literal, TypeAlias

from .common import ApiModel

NoteType: TypeAlias = Literal[
    "SpecialRequest",
    "Amendment",
    "Diet",
    "Medical",
    "CustomerFeedback",
    "Complaint",
    "ChildCare",
    "TermsAndConditions",
    "Insurance",
    "AccessCode",
    "ArrivalTime",
    "Generic",
    "FlightNotes",
    "FlightNotesManual",
    "Membership",
    "EveOfDeparture",
    "FinalDocuments",
    "SailingQualification",
    "Representative",
    "CreditControl",
    "PassportAndVisaInformation",
    "ImportantInformation",
    "Recommended",
]


class Note(ApiModel):
    """A free-text note on a reservation, passenger or other resource.

    ``type`` is usually one of :data:`NoteType`; other values the server
    sends are kept as plain strings.
    """

    type: NoteType | str
    title: str
    text: str
