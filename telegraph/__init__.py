"""Telegraph -- fluent Telegram Bot API client.

Each operation is prepared by a call builder and executed with ``commit()``,
which returns a :class:`~telegraph.envelope.CommitResult` or raises a
:class:`~telegraph.exceptions.TelegraphError` subclass.

Usage::

    from telegraph import TelegraphClient, new_text_message, ParseMode

    client = TelegraphClient("123:ABC")
    message = new_text_message("42", "*hi*").set_parse_mode(ParseMode.MARKDOWN)
    model, response = client.send_message(message).commit()
"""

__version__ = "1.0.0"

from telegraph.client import TelegraphClient  # noqa: E402
from telegraph.envelope import CommitResult  # noqa: E402
from telegraph.exceptions import (  # noqa: E402
    APIError,
    CallAlreadyCommittedError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    NotFoundError,
    TelegraphError,
    TransportError,
    UploadError,
)
from telegraph.markup import (  # noqa: E402
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
    ReplyMarkupKind,
)
from telegraph.messages import (  # noqa: E402
    AudioMessage,
    ForwardMessage,
    ParseMode,
    PhotoMessage,
    TextMessage,
    new_audio_message,
    new_forward_message,
    new_photo_message,
    new_text_message,
)

__all__ = [
    "__version__",
    "TelegraphClient",
    "CommitResult",
    "TelegraphError",
    "TransportError",
    "UploadError",
    "DecodeError",
    "HTTPStatusError",
    "APIError",
    "NotFoundError",
    "CallAlreadyCommittedError",
    "ConfigurationError",
    "ReplyMarkup",
    "ReplyMarkupKind",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "KeyboardButton",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ForceReply",
    "ParseMode",
    "TextMessage",
    "ForwardMessage",
    "PhotoMessage",
    "AudioMessage",
    "new_text_message",
    "new_forward_message",
    "new_photo_message",
    "new_audio_message",
]
