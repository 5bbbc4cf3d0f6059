"""Exception types raised by the TigerBay client.

All errors derive from :class:`TigerBayError` so callers can catch every
client failure in one place, or distinguish authentication problems from
failed API calls.
"""


class TigerBayError(Exception):
    """Base exception for all TigerBay client errors."""


class CredentialsError(TigerBayError):
    """Raised when a credentials provider cannot produce client credentials."""


class AuthFailure(TigerBayError):
    """Raised when the token exchange with the authentication server fails."""


class TransportError(TigerBayError):
    """Raised when an API call fails at the network level or returns an error status.

    Attributes:
        status_code: HTTP status of the response, or None if no response
            was received.
        body: Raw response text, empty if no response was received.
        url: The requested URL.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str = "",
        url: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url


class LinkResolutionError(TigerBayError):
    """Raised when a resource lacks the hyperlink an operation depends on."""


class NotesNotSupportedError(LinkResolutionError):
    """Raised when the server reports that a resource has no notes sub-resource."""
