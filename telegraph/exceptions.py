"""Exception hierarchy for the Telegraph Telegram SDK.

Every exception carries the raw :class:`requests.Response` that produced it
(``None`` when the request never completed) so callers can still inspect the
HTTP status and headers after a failed call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    import requests


class TelegraphError(Exception):
    """Base exception for every failure raised by the SDK.

    Attributes:
        response: Raw HTTP response, when one was received.
        status_code: HTTP status code of *response*, or ``None``.
    """

    def __init__(self, message: str, response: Optional["requests.Response"] = None) -> None:
        self.response = response
        self.status_code: Optional[int] = response.status_code if response is not None else None
        super().__init__(message)


class TransportError(TelegraphError):
    """The request never produced an HTTP response (DNS, refused connection, TLS, timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, response=None)


class DecodeError(TelegraphError):
    """The response body did not match the expected envelope shape."""


class HTTPStatusError(TelegraphError):
    """The API answered with a status code outside the 2xx range."""

    def __init__(self, status_code: int, description: Optional[str] = None, response: Optional["requests.Response"] = None) -> None:
        self.description = description
        super().__init__(f"HTTP error {status_code}: {description or 'Unknown error'}", response=response)
        self.status_code = status_code


class APIError(TelegraphError):
    """The envelope reported ``ok=false`` on an otherwise successful HTTP call."""

    def __init__(self, error_code: Optional[int], description: Optional[str], response: Optional["requests.Response"] = None) -> None:
        self.error_code = error_code
        self.description = description
        super().__init__(f"API error {error_code}: {description or 'Unknown error'}", response=response)


class NotFoundError(TelegraphError):
    """A file lookup succeeded but yielded no downloadable path."""


class CallAlreadyCommittedError(TelegraphError):
    """``commit()`` was invoked more than once on the same call."""


class ConfigurationError(TelegraphError):
    """Required configuration (e.g. the bot token) is missing."""


class UploadError(TelegraphError):
    """A local file selected for upload could not be read; nothing was sent."""
