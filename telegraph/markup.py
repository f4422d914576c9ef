"""Reply markup: exactly one of four reply-UI strategies attached to a message.

:class:`ReplyMarkup` is a tagged variant.  It is built through one of its
class-method constructors, holds a single payload whose type matches its
:class:`ReplyMarkupKind`, and serializes to that payload alone, omitting
unset fields.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field, model_serializer, model_validator


class InlineKeyboardButton(BaseModel):
    """One button of an inline keyboard. Exactly one of the optional fields should be used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    pay: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InlineKeyboardMarkup(BaseModel):
    """An inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class KeyboardButton(BaseModel):
    """One button of the reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ReplyKeyboardMarkup(BaseModel):
    """A custom keyboard with reply options."""

    keyboard: List[List["KeyboardButton"]] = Field(default_factory=list)
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ReplyKeyboardRemove(BaseModel):
    """Asks clients to remove the current custom keyboard."""

    remove_keyboard: bool = True
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ForceReply(BaseModel):
    """Asks clients to display a reply interface, as if the user tapped 'Reply'."""

    force_reply: bool = True
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ReplyMarkupKind(str, Enum):
    INLINE_KEYBOARD = "inline_keyboard"
    REPLY_KEYBOARD = "reply_keyboard"
    REMOVE_KEYBOARD = "remove_keyboard"
    FORCE_REPLY = "force_reply"


MarkupPayload = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]

_PAYLOAD_TYPES: Dict[ReplyMarkupKind, type] = {
    ReplyMarkupKind.INLINE_KEYBOARD: InlineKeyboardMarkup,
    ReplyMarkupKind.REPLY_KEYBOARD: ReplyKeyboardMarkup,
    ReplyMarkupKind.REMOVE_KEYBOARD: ReplyKeyboardRemove,
    ReplyMarkupKind.FORCE_REPLY: ForceReply,
}


class ReplyMarkup(BaseModel):
    """Exactly one reply-UI strategy, identified by :attr:`kind`."""

    kind: ReplyMarkupKind
    payload: MarkupPayload

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _payload_matches_kind(self) -> "ReplyMarkup":
        expected = _PAYLOAD_TYPES[self.kind]
        if type(self.payload) is not expected:
            raise ValueError(f"{self.kind.value} markup requires a {expected.__name__} payload, got {type(self.payload).__name__}")
        return self

    @model_serializer(mode="plain")
    def _serialize(self) -> Dict[str, Any]:
        return self.payload.model_dump(exclude_none=True)

    # ------------------------------------------------------------------
    #  Constructors
    # ------------------------------------------------------------------

    @classmethod
    def inline_keyboard(cls, rows: Sequence[Sequence[InlineKeyboardButton]]) -> "ReplyMarkup":
        markup = InlineKeyboardMarkup(inline_keyboard=[list(row) for row in rows])
        return cls(kind=ReplyMarkupKind.INLINE_KEYBOARD, payload=markup)

    @classmethod
    def reply_keyboard(cls, markup: ReplyKeyboardMarkup) -> "ReplyMarkup":
        return cls(kind=ReplyMarkupKind.REPLY_KEYBOARD, payload=markup)

    @classmethod
    def remove_keyboard(cls, remove: Optional[ReplyKeyboardRemove] = None) -> "ReplyMarkup":
        return cls(kind=ReplyMarkupKind.REMOVE_KEYBOARD, payload=remove or ReplyKeyboardRemove())

    @classmethod
    def force_reply(cls, reply: Optional[ForceReply] = None) -> "ReplyMarkup":
        return cls(kind=ReplyMarkupKind.FORCE_REPLY, payload=reply or ForceReply())

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire form: the single payload object without unset fields."""
        return self.model_dump()
