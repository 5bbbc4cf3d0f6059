"""API groups for the TigerBay reservation system.

Each group is a set of methods bound to a shared, authenticated
:class:`httpx.Client`. Every method performs exactly one HTTP call and
returns the response validated into the matching pydantic model.
"""

from .agents import AgentsApi
from .base import ApiGroup
from .content import ContentApi
from .customers import CustomerApi, CustomersApi
from .departures import DepartureCacheApi
from .notes import NoteManager
from .passengers import PassengerApi
from .payments import PaymentsApi
from .reservations import ReservationsApi
from .system import SetupApi
from .tasks import TasksApi
from .tours import ToursApi

__all__ = [
    "AgentsApi",
    "ApiGroup",
    "ContentApi",
    "CustomerApi",
    "CustomersApi",
    "DepartureCacheApi",
    "NoteManager",
    "PassengerApi",
    "PaymentsApi",
    "ReservationsApi",
    "SetupApi",
    "TasksApi",
    "ToursApi",
]
