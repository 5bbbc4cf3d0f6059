"""Bearer-token authentication for the TigerBay API.

Provides client credentials providers and an :class:`httpx.Auth`
implementation that exchanges those credentials for an access token using
the OAuth2 client credentials grant, caches the token until it expires, and
attaches it to every outgoing request.
"""

import os
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import TypeAlias

import httpx
import pydantic
import structlog

from .cache import AtomicExpiringCache
from .errors import AuthFailure, CredentialsError
from .useragent import USER_AGENT

logger = structlog.get_logger(__name__)

TOKEN_PATH = "/security/users/authenticate"

DEFAULT_ENV_PREFIX = "TB"


@dataclass(frozen=True)
class ClientCredentials:
    """API client id and secret."""

    client_id: str
    client_secret: str


CredentialsProvider: TypeAlias = Callable[[], ClientCredentials]


class ConstantCredentials:
    """Credentials provider that always returns the credentials it was built with.

    Example::

        provider = ConstantCredentials(
            ClientCredentials(client_id="myClientId", client_secret="myClientSecret")
        )
    """

    def __init__(self, credentials: ClientCredentials):
        self._credentials = credentials

    def __call__(self) -> ClientCredentials:
        return self._credentials


class EnvCredentials:
    """Credentials provider that reads the process environment.

    Reads ``{prefix}_CLIENT_ID`` and ``{prefix}_CLIENT_SECRET`` each time it
    is called, so rotated credentials are picked up without rebuilding the
    client.
    """

    def __init__(self, prefix: str = DEFAULT_ENV_PREFIX):
        self.prefix = prefix

    @property
    def client_id_var(self) -> str:
        return f"{self.prefix}_CLIENT_ID"

    @property
    def client_secret_var(self) -> str:
        return f"{self.prefix}_CLIENT_SECRET"

    def __call__(self) -> ClientCredentials:
        client_id = os.environ.get(self.client_id_var)
        if not client_id:
            msg = f"Client ID not set in {self.client_id_var}"
            raise CredentialsError(msg)

        client_secret = os.environ.get(self.client_secret_var)
        if not client_secret:
            msg = f"Client Secret not set in {self.client_secret_var}"
            raise CredentialsError(msg)

        return ClientCredentials(client_id=client_id, client_secret=client_secret)


class TokenResponse(pydantic.BaseModel):
    """Token endpoint response body."""

    access_token: str
    expires_in: float
    token_type: str = "Bearer"


class Authenticator(httpx.Auth):
    """Attach a cached bearer token to each request, fetching one when needed.

    The token is held in an :class:`AtomicExpiringCache` owned by this
    instance, so clients with different credentials never share a token and
    concurrent requests on an empty or expired cache trigger a single token
    exchange.

    The token exchange runs on a dedicated :class:`httpx.Client` that has no
    auth configured, so it never re-enters this flow.
    """

    def __init__(
        self,
        auth_url: str,
        credentials: CredentialsProvider,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the authenticator.

        Args:
            auth_url: Base URL of the authentication server.
            credentials: Provider called on every token exchange.
            timeout: Timeout in seconds for the token request.
            transport: Optional transport for the token client.
        """
        self.token_url = auth_url.rstrip("/") + TOKEN_PATH
        self._credentials = credentials
        self._cache = AtomicExpiringCache[str]()
        self._http = httpx.Client(timeout=timeout, transport=transport)

    @property
    def expires_at(self) -> float | None:
        """Expiry of the cached token in epoch seconds, or None if none cached."""
        return self._cache.expires_at

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token()}"
        yield request

    def token(self) -> str:
        """Return a valid access token, exchanging credentials if none is cached.

        Raises:
            CredentialsError: If the credentials provider fails.
            AuthFailure: If the token exchange fails.
        """
        token, _ = self._cache.get_or_fetch(self._fetch_token)
        return token

    def close(self) -> None:
        """Close the token HTTP client."""
        self._http.close()

    def _credentials_or_raise(self) -> ClientCredentials:
        try:
            return self._credentials()
        except CredentialsError:
            raise
        except Exception as exc:
            msg = f"Credentials provider failed: {exc}"
            raise CredentialsError(msg) from exc

    def _fetch_token(self) -> tuple[str, float]:
        """Exchange client credentials for a token.

        Returns:
            Tuple of (access_token, expires_in seconds).
        """
        credentials = self._credentials_or_raise()
        data = {
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
            "grant_type": "client_credentials",
        }
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/x-www-form-urlencoded",
        }

        try:
            response = self._http.post(self.token_url, data=data, headers=headers)
        except httpx.HTTPError as exc:
            logger.exception("Token request failed", token_url=self.token_url)
            msg = f"Failed to connect to auth server: {exc}"
            raise AuthFailure(msg) from exc

        if not response.is_success:
            logger.error(
                "Token request rejected",
                token_url=self.token_url,
                status_code=response.status_code,
            )
            msg = (
                f"Authentication failed with status {response.status_code}: "
                f"{response.text}"
            )
            raise AuthFailure(msg)

        try:
            token = TokenResponse.model_validate(response.json())
        except ValueError as exc:
            msg = f"Malformed token response: {exc}"
            raise AuthFailure(msg) from exc

        logger.info("Fetched access token", expires_in_seconds=token.expires_in)
        return token.access_token, token.expires_in
