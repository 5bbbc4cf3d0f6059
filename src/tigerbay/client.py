"""Client for the TigerBay reservation system.

:class:`Client` owns one :class:`httpx.Client` configured with the API base
URL, default headers and an :class:`~tigerbay.auth.Authenticator`, and hands
it to the API groups exposed as properties.

Usage::

    from tigerbay import Client, ClientConfig, ClientCredentials, ConstantCredentials

    config = ClientConfig(
        base_url="https://example.ontigerbay.co.uk/nimble",
        auth_url="https://example.ontigerbay.co.uk",
        credentials=ConstantCredentials(
            ClientCredentials(client_id="website", client_secret="secret")
        ),
    )
    with Client(config) as client:
        reservation = client.reservations.find(4092)
"""

import os
import pathlib
from collections.abc import Callable
from typing import Any

import httpx
import structlog

from . import api
from .auth import Authenticator
from .config import CONFIG_ENV_VAR, ClientConfig, configure_logging, load_config
from .models.common import HealthCheckEntry
from .useragent import USER_AGENT

logger = structlog.get_logger(__name__)

RequestHook = Callable[[httpx.Request], Any]
ResponseHook = Callable[[httpx.Response], Any]


class Client:
    """Base client for the TigerBay reservation system.

    Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration.
            transport: Optional transport shared by the API and token
                clients, for example :class:`httpx.MockTransport` in tests.
        """
        self.config = config
        self.authenticator = Authenticator(
            config.resolved_auth_url,
            config.credentials,
            timeout=config.timeout,
            transport=transport,
        )
        self._http = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            headers={
                "User-Agent": USER_AGENT,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            auth=self.authenticator,
            transport=transport,
        )
        logger.debug(
            "Created client",
            base_url=config.base_url,
            auth_url=config.resolved_auth_url,
        )

    @classmethod
    def from_config_file(
        cls, config_path: str | pathlib.Path | None = None
    ) -> "Client":
        """Create a client from a JSON settings file.

        The path defaults to the ``TIGERBAY_CONFIG_PATH`` environment
        variable. Logging is configured at the file's ``log_level``.
        """
        resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        if not resolved_path:
            msg = f"No config path given and {CONFIG_ENV_VAR} is not set"
            raise FileNotFoundError(msg)
        settings = load_config(resolved_path)
        configure_logging(settings.log_level)
        return cls(settings.to_client_config())

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self) -> None:
        """Close the API and token HTTP clients."""
        self._http.close()
        self.authenticator.close()

    @property
    def reservations(self) -> api.ReservationsApi:
        return api.ReservationsApi(self._http)

    @property
    def tasks(self) -> api.TasksApi:
        return api.TasksApi(self._http)

    @property
    def tours(self) -> api.ToursApi:
        return api.ToursApi(self._http)

    @property
    def notes(self) -> api.NoteManager:
        """Notes on any resource with a self link."""
        return api.NoteManager(self._http)

    @property
    def customers(self) -> api.CustomersApi:
        return api.CustomersApi(self._http)

    def customer(self, id: int) -> api.CustomerApi:
        return api.CustomerApi(self._http, id)

    def passenger(self, reservation_id: int, passenger_id: int) -> api.PassengerApi:
        return api.PassengerApi(self._http, reservation_id, passenger_id)

    @property
    def payments(self) -> api.PaymentsApi:
        return api.PaymentsApi(self._http)

    @property
    def cache(self) -> api.DepartureCacheApi:
        """Departure cache search."""
        return api.DepartureCacheApi(self._http)

    @property
    def setup(self) -> api.SetupApi:
        """System configuration."""
        return api.SetupApi(self._http)

    @property
    def agents(self) -> api.AgentsApi:
        return api.AgentsApi(self._http)

    def content(self, bundle_reference: str) -> api.ContentApi:
        return api.ContentApi(self._http, bundle_reference)

    def healthcheck(self) -> dict[str, HealthCheckEntry]:
        """Report the health of the API's dependencies, keyed by check name."""
        return self.setup.healthcheck()

    def on_request(self, hook: RequestHook) -> RequestHook:
        """Register a hook called with each outgoing request.

        Returns:
            The hook, to pass to :meth:`eject_on_request`.
        """
        self._http.event_hooks["request"].append(hook)
        return hook

    def on_response(self, hook: ResponseHook) -> ResponseHook:
        """Register a hook called with each response.

        Returns:
            The hook, to pass to :meth:`eject_on_response`.
        """
        self._http.event_hooks["response"].append(hook)
        return hook

    def eject_on_request(self, hook: RequestHook) -> None:
        self._http.event_hooks["request"].remove(hook)

    def eject_on_response(self, hook: ResponseHook) -> None:
        self._http.event_hooks["response"].remove(hook)
