"""Shared fixtures: an in-memory TigerBay server behind httpx.MockTransport."""

import json
from typing import Any

import httpx
import pytest

from tigerbay import Client, ClientConfig, ClientCredentials, ConstantCredentials

BASE_URL = "https://api.tigerbay.test/nimble"
AUTH_URL = "https://auth.tigerbay.test"
AUTH_HOST = "auth.tigerbay.test"
BASE_PATH = "/nimble"


class FakeTigerBay:
    """Serves the token endpoint and canned responses for resource paths.

    Resource routes are keyed by (method, path) with the base path stripped.
    Unrouted resource requests get a 404.
    """

    def __init__(self):
        self.token_requests: list[httpx.Request] = []
        self.api_requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.token_status = 200
        self.expires_in = 3600

    def route(self, method: str, path: str, json: Any = None, status: int = 200):
        self.routes[(method, path)] = (status, json)

    @property
    def last_request(self) -> httpx.Request:
        return self.api_requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == AUTH_HOST:
            self.token_requests.append(request)
            if self.token_status != 200:
                return httpx.Response(self.token_status, text="invalid_client")
            return httpx.Response(
                200,
                json={
                    "access_token": f"token-{len(self.token_requests)}",
                    "expires_in": self.expires_in,
                    "token_type": "Bearer",
                },
            )

        self.api_requests.append(request)
        path = request.url.path.removeprefix(BASE_PATH)
        status, body = self.routes.get(
            (request.method, path), (404, {"Message": "No such resource"})
        )
        return httpx.Response(status, json=body)


@pytest.fixture
def fake_api() -> FakeTigerBay:
    return FakeTigerBay()


@pytest.fixture
def credentials() -> ConstantCredentials:
    return ConstantCredentials(
        ClientCredentials(client_id="website", client_secret="s3cret")
    )


@pytest.fixture
def client(fake_api: FakeTigerBay, credentials: ConstantCredentials):
    """Client wired to the fake server."""
    config = ClientConfig(base_url=BASE_URL, auth_url=AUTH_URL, credentials=credentials)
    with Client(config, transport=httpx.MockTransport(fake_api.handler)) as c:
        yield c
