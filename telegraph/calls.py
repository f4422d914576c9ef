"""Call builders: one instance per invoked Bot API operation.

A call holds the resolved endpoint and accumulated parameters, and is
consumed exactly once by :meth:`Call.commit`, which is the single path
through which every operation reaches the transport and the envelope
decoder.
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any, BinaryIO, Dict, Optional, Type

import requests

from telegraph.envelope import CommitResult, decode_envelope
from telegraph.exceptions import CallAlreadyCommittedError, UploadError
from telegraph.messages import AudioMessage, ForwardMessage, PhotoMessage, TextMessage, _ChatMessage
from telegraph.models import Message, User

if TYPE_CHECKING:
    from telegraph.client import TelegraphClient


class Call:
    """A prepared request for one Bot API operation.

    Re-sending is disallowed: message operations are not idempotent on the
    server, so a second :meth:`commit` raises :class:`CallAlreadyCommittedError`.
    Calls are not thread-safe; confine each one to a single caller.
    """

    def __init__(self, client: "TelegraphClient", operation: str, result_type: Type[Any], method: str = "GET", url: Optional[str] = None) -> None:
        self.client = client
        self.operation = operation
        self.result_type = result_type
        self.method = method
        self.url = url if url is not None else client.endpoint(operation)
        self.params: Dict[str, Any] = {}
        self._committed = False

    @property
    def committed(self) -> bool:
        return self._committed

    def _ensure_uncommitted(self) -> None:
        if self._committed:
            raise CallAlreadyCommittedError(f"{self.operation} call was already committed")

    def _mark_committed(self) -> None:
        self._ensure_uncommitted()
        self._committed = True

    def _execute(self, **kwargs: Any) -> requests.Response:
        if self.params:
            kwargs["params"] = dict(self.params)
        return self.client.execute(self.method, self.url, self.operation, **kwargs)

    def _send(self) -> requests.Response:
        return self._execute()

    def commit(self) -> CommitResult:
        """Send the request and decode the envelope.

        Returns:
            ``CommitResult(model, response)`` where *model* is an instance of
            :attr:`result_type`.

        Raises:
            TransportError: No HTTP response was received.
            DecodeError: The body is not a valid envelope.
            HTTPStatusError: The status code is outside the 2xx range.
            APIError: The envelope reports ``ok=false``.
            CallAlreadyCommittedError: The call was already committed.
        """
        self._mark_committed()
        response = self._send()
        model = decode_envelope(response, self.result_type)
        return CommitResult(model, response)


class GetMeCall(Call):
    """``getMe`` -- returns the bot's own :class:`~telegraph.models.User`."""

    def __init__(self, client: "TelegraphClient") -> None:
        super().__init__(client, "getMe", User)


class _MessageCall(Call):
    """POSTs a message payload and decodes the sent :class:`~telegraph.models.Message`.

    The payload is captured when the call is created; later changes to the
    builder do not affect it.  With ``upload=True`` the builder's media field
    is read as a local path and sent as ``multipart/form-data``.
    """

    def __init__(self, client: "TelegraphClient", operation: str, message: _ChatMessage, upload: bool = False) -> None:
        super().__init__(client, operation, Message, method="POST")
        if upload and message.media_field is None:
            raise ValueError(f"{operation} does not accept file uploads")
        self.payload: Dict[str, Any] = message.to_payload()
        self.media_field = message.media_field
        self.upload = upload
        self._media: Optional[BinaryIO] = None

    def commit(self) -> CommitResult:
        """Send the message; with ``upload=True`` the local file is opened first.

        Raises:
            UploadError: The file cannot be read.  The call is left uncommitted.
        """
        if not self.upload:
            return super().commit()

        self._ensure_uncommitted()
        path = self.payload[self.media_field]
        try:
            media = open(path, "rb")
        except OSError as exc:
            raise UploadError(f"Cannot read {path} for {self.operation}: {exc.strerror or exc}") from exc
        with media:
            self._media = media
            try:
                return super().commit()
            finally:
                self._media = None

    def _send(self) -> requests.Response:
        if self._media is None:
            return self._execute(json=self.payload)

        fields = dict(self.payload)
        path = fields.pop(self.media_field)
        # Multipart form values are flat strings; nested values travel as JSON.
        data = {key: value if isinstance(value, str) else json.dumps(value) for key, value in fields.items()}
        return self._execute(data=data, files={self.media_field: (os.path.basename(path), self._media)})


class SendMessageCall(_MessageCall):
    def __init__(self, client: "TelegraphClient", message: TextMessage) -> None:
        super().__init__(client, "sendMessage", message)


class ForwardMessageCall(_MessageCall):
    def __init__(self, client: "TelegraphClient", message: ForwardMessage) -> None:
        super().__init__(client, "forwardMessage", message)


class SendPhotoCall(_MessageCall):
    def __init__(self, client: "TelegraphClient", message: PhotoMessage, upload: bool = False) -> None:
        super().__init__(client, "sendPhoto", message, upload=upload)


class SendAudioCall(_MessageCall):
    def __init__(self, client: "TelegraphClient", message: AudioMessage, upload: bool = False) -> None:
        super().__init__(client, "sendAudio", message, upload=upload)
