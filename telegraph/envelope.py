"""Response envelope decoding shared by every Bot API call.

Every Bot API response is wrapped as ``{ok, result, description, error_code}``.
:func:`decode_envelope` turns a raw :class:`requests.Response` into the typed
``result`` or raises the matching :mod:`telegraph.exceptions` error.
"""

from __future__ import annotations

from typing import Any, Generic, NamedTuple, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from telegraph.exceptions import APIError, DecodeError, HTTPStatusError
from telegraph.logger import TelegraphLogger
from telegraph.models import ResponseParameters

ResultT = TypeVar("ResultT")

_logger = TelegraphLogger.get_logger("envelope")


class Envelope(BaseModel, Generic[ResultT]):
    """The JSON wrapper common to every Bot API response."""

    ok: bool
    result: Optional[ResultT] = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[ResponseParameters] = None


class CommitResult(NamedTuple):
    """Outcome of a successful ``commit()``: the decoded model and the raw response."""

    model: Any
    response: requests.Response


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def decode_envelope(response: requests.Response, result_type: Type[ResultT]) -> ResultT:
    """Decode *response* as an envelope around *result_type*.

    Checks run in a fixed order: body shape, then HTTP status, then the
    envelope's ``ok`` flag.  A non-2xx status wins over the envelope content,
    but a 2xx response still fails if the envelope says ``ok=false``.

    Raises:
        DecodeError: The body is not a valid envelope for *result_type*.
        HTTPStatusError: The status code is outside the 2xx range.
        APIError: The envelope reports ``ok=false``.
    """
    try:
        envelope = Envelope[result_type].model_validate_json(response.content)  # type: ignore[valid-type]
    except ValidationError as exc:
        _logger.debug("Envelope decode failed", extra={"status_code": response.status_code, "error_count": exc.error_count()})
        raise DecodeError(f"Malformed response body (HTTP {response.status_code})", response=response) from exc

    if not is_success_status(response.status_code):
        raise HTTPStatusError(response.status_code, envelope.description, response=response)

    if not envelope.ok:
        raise APIError(envelope.error_code, envelope.description, response=response)

    if envelope.result is None:
        raise DecodeError("Envelope reported ok without a result", response=response)

    return envelope.result


def describe_failure(response: requests.Response) -> Optional[str]:
    """Return the envelope ``description`` of a failed response, if the body carries one."""
    try:
        return Envelope[Any].model_validate_json(response.content).description
    except ValidationError:
        return None
