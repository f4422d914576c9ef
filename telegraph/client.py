"""TelegraphClient -- immutable entry point for the Telegram Bot API.

The client only carries configuration (base address, token, timeout) and the
HTTP session.  Each operation method returns a call builder; nothing is sent
until the builder's ``commit()`` (or ``download()``) runs.

HTTP calls use the ``requests`` library.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import requests

from telegraph.calls import ForwardMessageCall, GetMeCall, SendAudioCall, SendMessageCall, SendPhotoCall
from telegraph.endpoints import DEFAULT_BASE_URL, USER_AGENT, USER_AGENT_HEADER, content_url, endpoint_url
from telegraph.exceptions import ConfigurationError, TransportError
from telegraph.files import GetContentCall, GetFileCall, GetUserProfilePhotosCall
from telegraph.logger import TelegraphLogger
from telegraph.messages import AudioMessage, ForwardMessage, PhotoMessage, TextMessage

_logger = TelegraphLogger.get_logger("client")


class TelegraphClient:
    """Client-side entry point for the Telegram Bot API.

    Configuration is fixed at construction, so one client can be shared by
    any number of call sequences.  Builders hold a reference to it, never a
    copy.
    """

    _DEFAULT_TIMEOUT: int = 10

    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL, timeout: int = _DEFAULT_TIMEOUT, session: Optional[requests.Session] = None) -> None:
        """Create a new client for the bot identified by *token*.

        Args:
            token: Bot token issued by BotFather.
            base_url: API host, e.g. ``https://api.telegram.org``.
            timeout: Request timeout in seconds.
            session: Transport to use; a private :class:`requests.Session`
                is created (and closed by :meth:`close`) when omitted.
        """
        if not token:
            raise ConfigurationError("A bot token is required")
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "TelegraphClient":
        """Build a client from ``TELEGRAPH_*`` environment variables (and ``.env``).

        Raises:
            ConfigurationError: If ``TELEGRAPH_BOT_TOKEN`` is not set.
        """
        from telegraph import config  # deferred so importing the SDK never reads .env

        if not config.BOT_TOKEN:
            raise ConfigurationError("TELEGRAPH_BOT_TOKEN is not configured")
        return cls(config.BOT_TOKEN, base_url=config.BASE_URL, timeout=config.REQUEST_TIMEOUT, session=session)

    # ------------------------------------------------------------------
    #  Read-only configuration
    # ------------------------------------------------------------------

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> int:
        return self._timeout

    def endpoint(self, operation: str) -> str:
        """Absolute URL of *operation*, e.g. ``https://api.telegram.org/bot<token>/getMe``."""
        return endpoint_url(self._base_url, operation, self._token)

    def content_endpoint(self, path: str) -> str:
        return content_url(self._base_url, self._token, path)

    # ------------------------------------------------------------------
    #  Transport
    # ------------------------------------------------------------------

    def execute(self, method: str, url: str, operation: str, **kwargs: Any) -> requests.Response:
        """Send one HTTP request and return the raw response, whatever its status.

        Extra *kwargs* (``params``, ``json``, ``data``, ``files``) are passed
        to :meth:`requests.Session.request`.

        Raises:
            TransportError: On connection, TLS or timeout failures.
        """
        headers = {USER_AGENT_HEADER: USER_AGENT}
        _logger.debug("Sending request", extra={"api_endpoint": operation, "http_method": method})
        try:
            response = self._session.request(method, url, headers=headers, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            # requests embeds the URL, and with it the token, in its messages.
            reason = str(exc).replace(self._token, "<token>")
            _logger.debug("Request failed", extra={"api_endpoint": operation, "error": reason})
            raise TransportError(f"{operation} request failed: {reason}") from exc
        _logger.debug("Received response", extra={"api_endpoint": operation, "status_code": response.status_code})
        return response

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "TelegraphClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    #  Operations
    # ------------------------------------------------------------------

    def get_me(self) -> GetMeCall:
        """A simple method for testing your bot's auth token. Returns basic information about the bot."""
        return GetMeCall(self)

    def send_message(self, message: TextMessage) -> SendMessageCall:
        """Use this method to send text messages. On success, the sent Message is returned."""
        return SendMessageCall(self, message)

    def forward_message(self, message: ForwardMessage) -> ForwardMessageCall:
        """Use this method to forward messages of any kind. On success, the sent Message is returned."""
        return ForwardMessageCall(self, message)

    def send_photo(self, message: PhotoMessage, upload: bool = False) -> SendPhotoCall:
        """Use this method to send photos.

        With *upload* set, ``message.photo`` is a local path uploaded as
        multipart form data instead of a file_id or URL.
        """
        return SendPhotoCall(self, message, upload=upload)

    def send_audio(self, message: AudioMessage, upload: bool = False) -> SendAudioCall:
        """Use this method to send audio files to be displayed in the music player.

        With *upload* set, ``message.audio`` is a local path uploaded as
        multipart form data.
        """
        return SendAudioCall(self, message, upload=upload)

    def get_file(self, file_id: str) -> GetFileCall:
        """Use this method to get basic info about a file and prepare it for downloading."""
        return GetFileCall(self, file_id)

    def get_user_profile_photos(self, user_id: Union[int, str]) -> GetUserProfilePhotosCall:
        """Use this method to get a list of profile pictures for a user."""
        return GetUserProfilePhotosCall(self, user_id)

    def get_content(self, path: str) -> GetContentCall:
        """Download a file previously resolved by :meth:`get_file`."""
        return GetContentCall(self, path)
