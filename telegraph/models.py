"""Pydantic models for the Bot API objects this SDK decodes.

Fields follow the wire names; unknown fields sent by the server are ignored
so newer API versions keep decoding.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ResponseParameters(BaseModel):
    """Contains information about why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None

    model_config = {"populate_by_name": True}


class User(BaseModel):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None

    model_config = {"populate_by_name": True}


class Chat(BaseModel):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = {"populate_by_name": True}


class MessageEntity(BaseModel):
    """This object represents one special entity in a text message. For example, hashtags, usernames, URLs, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None

    model_config = {"populate_by_name": True}


class PhotoSize(BaseModel):
    """This object represents one size of a photo or a file / sticker thumbnail.

    ``file_path`` is only present once the server has resolved the file.
    """

    file_id: str
    file_unique_id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None
    file_path: Optional[str] = None

    model_config = {"populate_by_name": True}


class Audio(BaseModel):
    """This object represents an audio file to be treated as music by the Telegram clients."""

    file_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class File(BaseModel):
    """This object represents a file ready to be downloaded.

    The file can be downloaded via ``<base>/file/bot<token>/<file_path>``.
    ``file_path`` is empty until the server has prepared the file.
    """

    file_id: str
    file_unique_id: Optional[str] = None
    file_size: Optional[int] = None
    file_path: Optional[str] = None

    model_config = {"populate_by_name": True}


class UserProfilePhotos(BaseModel):
    """This object represent a user's profile pictures.

    ``photos`` holds one entry per photo, each listing the available sizes.
    """

    total_count: int = 0
    photos: List[List["PhotoSize"]] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class Message(BaseModel):
    """This object represents a message.

    Only ``message_id`` is required; ``date`` and ``chat`` decode to ``0`` and
    ``None`` when the server omits them.
    """

    message_id: int
    date: int = 0
    chat: Optional["Chat"] = None
    from_field: Optional["User"] = Field(None, alias="from")
    forward_from: Optional["User"] = None
    forward_from_chat: Optional["Chat"] = None
    forward_from_message_id: Optional[int] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional["Message"] = None
    edit_date: Optional[int] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    caption: Optional[str] = None
    audio: Optional["Audio"] = None
    photo: Optional[List["PhotoSize"]] = None

    model_config = {"populate_by_name": True}
