"""Bot API endpoint templates and protocol constants.

Every template uses positional ``{}`` placeholders; the first one is always
the bot token.  Templates are resolved with :func:`resolve_endpoint`, which
substitutes left-to-right and prefixes the configured base address.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from telegraph import __version__

DEFAULT_BASE_URL: str = "https://api.telegram.org"
BOT_API_VERSION: str = "3.4"

USER_AGENT_HEADER: str = "User-Agent"
USER_AGENT: str = f"Telegraph/{__version__} (Python; Bot API {BOT_API_VERSION})"

ENDPOINT_GET_CONTENT: str = "/file/bot{}/{}"

ENDPOINTS: Mapping[str, str] = MappingProxyType({
    "getMe": "/bot{}/getMe",
    "setWebhook": "/bot{}/setWebhook",
    "getUpdates": "/bot{}/getUpdates",
    "deleteWebhook": "/bot{}/deleteWebhook",
    "getWebhookInfo": "/bot{}/getWebhookInfo",
    "getFile": "/bot{}/getFile",
    "getUserProfilePhotos": "/bot{}/getUserProfilePhotos",
    "sendMessage": "/bot{}/sendMessage",
    "forwardMessage": "/bot{}/forwardMessage",
    "sendPhoto": "/bot{}/sendPhoto",
    "sendAudio": "/bot{}/sendAudio",
    "sendDocument": "/bot{}/sendDocument",
    "sendVideo": "/bot{}/sendVideo",
    "sendVoice": "/bot{}/sendVoice",
    "sendVideoNote": "/bot{}/sendVideoNote",
    "sendLocation": "/bot{}/sendLocation",
    "editMessageLiveLocation": "/bot{}/editMessageLiveLocation",
    "stopMessageLiveLocation": "/bot{}/stopMessageLiveLocation",
    "sendVenue": "/bot{}/sendVenue",
    "sendContact": "/bot{}/sendContact",
    "sendChatAction": "/bot{}/sendChatAction",
})


def resolve_endpoint(base_url: str, template: str, token: str, *args: object) -> str:
    """Return the absolute URL for *template* with *token* and *args* substituted in order."""
    return base_url.rstrip("/") + template.format(token, *args)


def endpoint_url(base_url: str, operation: str, token: str) -> str:
    """Resolve the URL of a Bot API *operation* such as ``"sendMessage"``.

    Raises:
        KeyError: If *operation* is not in :data:`ENDPOINTS`.
    """
    return resolve_endpoint(base_url, ENDPOINTS[operation], token)


def content_url(base_url: str, token: str, file_path: str) -> str:
    """Resolve the download URL for a server-side *file_path*."""
    return resolve_endpoint(base_url, ENDPOINT_GET_CONTENT, token, file_path)
