"""Outbound message builders.

Each builder is created by a ``new_*`` factory seeded with the operation's
mandatory fields.  Optional fields start unset and are omitted from the
payload until a setter fills them in.  Setters mutate the builder and return
it, so calls chain::

    message = new_text_message("42", "hi").set_disable_notification(True)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel

from telegraph.markup import (
    ForceReply,
    InlineKeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
)

ChatID = Union[int, str]

_MessageT = TypeVar("_MessageT", bound="_ChatMessage")
_ReplyableT = TypeVar("_ReplyableT", bound="_ReplyableMessage")


class ParseMode(str, Enum):
    """How the remote client renders text and captions."""

    MARKDOWN = "Markdown"
    HTML = "HTML"


class _ChatMessage(BaseModel):
    """Fields shared by every message sent to a chat.

    Setter arguments are validated strictly on assignment, so
    ``set_disable_notification("yes")`` raises :class:`pydantic.ValidationError`.
    """

    model_config = {"validate_assignment": True, "strict": True}

    # Name of the field that holds the media reference, for multipart uploads.
    media_field: ClassVar[Optional[str]] = None

    chat_id: ChatID
    disable_notification: Optional[bool] = None

    def set_disable_notification(self: _MessageT, disable: bool) -> _MessageT:
        """Send the message silently. Users will receive a notification with no sound."""
        self.disable_notification = disable
        return self

    def to_payload(self) -> Dict[str, Any]:
        """Return the request body with unset optional fields omitted."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class _ReplyableMessage(_ChatMessage):
    """A message that can thread a reply and carry reply markup."""

    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None

    def set_reply_to_message_id(self: _ReplyableT, message_id: int) -> _ReplyableT:
        """If the message is a reply, ID of the original message."""
        self.reply_to_message_id = message_id
        return self

    def set_reply_markup(self: _ReplyableT, markup: ReplyMarkup) -> _ReplyableT:
        self.reply_markup = markup
        return self

    # Each setter below replaces the whole selector, so the last one wins.

    def set_inline_keyboard_markup(self: _ReplyableT, rows: Sequence[Sequence[InlineKeyboardButton]]) -> _ReplyableT:
        return self.set_reply_markup(ReplyMarkup.inline_keyboard(rows))

    def set_reply_keyboard_markup(self: _ReplyableT, markup: ReplyKeyboardMarkup) -> _ReplyableT:
        return self.set_reply_markup(ReplyMarkup.reply_keyboard(markup))

    def set_reply_keyboard_remove(self: _ReplyableT, remove: Optional[ReplyKeyboardRemove] = None) -> _ReplyableT:
        return self.set_reply_markup(ReplyMarkup.remove_keyboard(remove))

    def set_force_reply(self: _ReplyableT, reply: Optional[ForceReply] = None) -> _ReplyableT:
        return self.set_reply_markup(ReplyMarkup.force_reply(reply))


class TextMessage(_ReplyableMessage):
    """Payload of ``sendMessage``."""

    text: str
    parse_mode: Optional[ParseMode] = None
    disable_web_page_preview: Optional[bool] = None

    def set_parse_mode(self, mode: ParseMode) -> "TextMessage":
        """Send Markdown or HTML, if you want Telegram apps to show bold, italic, fixed-width text or inline URLs."""
        self.parse_mode = ParseMode(mode)
        return self

    def set_disable_web_page_preview(self, disable: bool) -> "TextMessage":
        """Disables link previews for links in this message."""
        self.disable_web_page_preview = disable
        return self


class ForwardMessage(_ChatMessage):
    """Payload of ``forwardMessage``."""

    from_chat_id: ChatID
    message_id: int


class PhotoMessage(_ReplyableMessage):
    """Payload of ``sendPhoto``. *photo* is a file_id, an HTTP URL, or a local path when uploading."""

    media_field: ClassVar[Optional[str]] = "photo"

    photo: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None

    def set_caption(self, caption: str) -> "PhotoMessage":
        self.caption = caption
        return self

    def set_parse_mode(self, mode: ParseMode) -> "PhotoMessage":
        self.parse_mode = ParseMode(mode)
        return self


class AudioMessage(_ReplyableMessage):
    """Payload of ``sendAudio``. *audio* is a file_id, an HTTP URL, or a local path when uploading."""

    media_field: ClassVar[Optional[str]] = "audio"

    audio: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None

    def set_caption(self, caption: str) -> "AudioMessage":
        self.caption = caption
        return self

    def set_parse_mode(self, mode: ParseMode) -> "AudioMessage":
        self.parse_mode = ParseMode(mode)
        return self

    def set_duration(self, seconds: int) -> "AudioMessage":
        """Duration of the audio in seconds."""
        self.duration = seconds
        return self

    def set_performer(self, performer: str) -> "AudioMessage":
        self.performer = performer
        return self

    def set_title(self, title: str) -> "AudioMessage":
        self.title = title
        return self


# ── Factories ────────────────────────────────────────────────────────────────


def new_text_message(chat_id: ChatID, text: str) -> TextMessage:
    """Build a ``sendMessage`` payload for *chat_id* (or ``@channelusername``)."""
    return TextMessage(chat_id=chat_id, text=text)


def new_forward_message(chat_id: ChatID, from_chat_id: ChatID, message_id: int) -> ForwardMessage:
    """Build a ``forwardMessage`` payload copying *message_id* from *from_chat_id* to *chat_id*."""
    return ForwardMessage(chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id)


def new_photo_message(chat_id: ChatID, photo: str) -> PhotoMessage:
    return PhotoMessage(chat_id=chat_id, photo=photo)


def new_audio_message(chat_id: ChatID, audio: str) -> AudioMessage:
    return AudioMessage(chat_id=chat_id, audio=audio)
