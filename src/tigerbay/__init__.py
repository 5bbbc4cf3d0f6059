"""TigerBay reservation system client.

Typed Python client for the TigerBay travel-reservation REST API: tour
searches, reservations, passengers, payments, notes, tasks, customers and
more, with bearer-token authentication handled transparently.

Exports:
    Client: Entry point exposing the API groups.
    ClientConfig: Client construction parameters.
    ClientCredentials, ConstantCredentials, EnvCredentials: Credentials
        providers for the token exchange.
    models: Pydantic models for API requests and responses.
"""

from . import models
from .auth import ClientCredentials, ConstantCredentials, EnvCredentials
from .client import Client
from .config import ClientConfig
from .errors import (
    AuthFailure,
    CredentialsError,
    LinkResolutionError,
    NotesNotSupportedError,
    TigerBayError,
    TransportError,
)
from .useragent import VERSION

__version__ = VERSION

__all__ = [
    "AuthFailure",
    "Client",
    "ClientConfig",
    "ClientCredentials",
    "ConstantCredentials",
    "CredentialsError",
    "EnvCredentials",
    "LinkResolutionError",
    "NotesNotSupportedError",
    "TigerBayError",
    "TransportError",
    "models",
]
