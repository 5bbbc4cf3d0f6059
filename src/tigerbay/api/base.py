"""Common plumbing for API groups.

Every group method performs exactly one HTTP call through the shared,
authenticated :class:`httpx.Client`. Failures surface immediately as
:class:`~tigerbay.errors.TransportError`; nothing is retried.
"""

import time
from collections.abc import Sequence
from typing import Any, TypeVar

import httpx
import pydantic
import structlog

from ..errors import TransportError
from ..models.common import UpdateOperation

logger = structlog.get_logger(__name__)

JSON_PATCH_CONTENT_TYPE = "application/json-patch+json"

QueryParams = Sequence[tuple[str, str]] | dict[str, Any]

M = TypeVar("M", bound=pydantic.BaseModel)


def dump_body(body: Any) -> Any:
    """Serialise a request body model (or list of models) to JSON-ready data."""
    if isinstance(body, pydantic.BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [dump_body(item) for item in body]
    return body


class ApiGroup:
    """A group of related API actions sharing one HTTP client."""

    def __init__(self, http: httpx.Client):
        self._http = http

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Perform a single API call.

        Args:
            method: HTTP verb.
            path: Path relative to the client's base URL, or an absolute URL.
            params: Optional query parameters.
            json: Optional JSON-serialisable body.
            headers: Extra headers merged over the client defaults.

        Returns:
            Parsed JSON body, or None if the response has no content.

        Raises:
            TransportError: On network failure or an error status.
        """
        start_time = time.time()
        logger.debug("Making API request", method=method, path=path)

        try:
            response = self._http.request(
                method,
                path,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.exception(
                "API request failed",
                method=method,
                path=path,
                duration_seconds=round(time.time() - start_time, 3),
            )
            msg = f"Failed to connect for {method} {path}: {exc}"
            raise TransportError(msg, url=path) from exc

        duration = time.time() - start_time
        if not response.is_success:
            logger.warning(
                "API error response",
                method=method,
                path=path,
                status_code=response.status_code,
                duration_seconds=round(duration, 3),
            )
            msg = (
                f"{response.status_code} Error for {method} {response.url}: "
                f"{response.text}"
            )
            raise TransportError(
                msg,
                status_code=response.status_code,
                body=response.text,
                url=str(response.url),
            )

        logger.debug("API request completed", duration_seconds=round(duration, 3))

        if not response.content:
            return None
        return response.json()

    def _get(self, path: str, *, params: QueryParams | None = None) -> Any:
        return self._request("GET", path, params=params)

    def _post(self, path: str, body: Any = None) -> Any:
        return self._request("POST", path, json=dump_body(body))

    def _put(self, path: str, body: Any = None) -> Any:
        return self._request("PUT", path, json=dump_body(body))

    def _patch(self, path: str, updates: Sequence[UpdateOperation]) -> Any:
        """Send JSON-patch style update operations."""
        body = [update.model_dump(mode="json") for update in updates]
        return self._request(
            "PATCH",
            path,
            json=body,
            headers={"Content-Type": JSON_PATCH_CONTENT_TYPE},
        )

    @staticmethod
    def _parse(model: type[M], data: Any, path: str) -> M:
        """Validate a single-object response body.

        Raises:
            TransportError: If the server returned no body.
        """
        if data is None:
            msg = f"Empty response body from {path}, expected {model.__name__}"
            raise TransportError(msg, url=path)
        return model.model_validate(data)
