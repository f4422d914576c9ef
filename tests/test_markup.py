"""Tests for the reply-markup tagged variant."""

import sys
import os

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegraph.markup import (
    ForceReply,
    InlineKeyboardButton,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
    ReplyMarkupKind,
)

_OTHER_BRANCH_KEYS = ("inline_keyboard", "keyboard", "remove_keyboard", "force_reply")


class TestReplyMarkupSerialization:
    """Only the chosen alternative appears on the wire."""

    def test_force_reply_only(self) -> None:
        markup = ReplyMarkup.force_reply()
        assert markup.kind is ReplyMarkupKind.FORCE_REPLY
        assert markup.to_dict() == {"force_reply": True}

    def test_force_reply_selective(self) -> None:
        markup = ReplyMarkup.force_reply(ForceReply(selective=True))
        assert markup.to_dict() == {"force_reply": True, "selective": True}

    def test_inline_keyboard(self) -> None:
        rows = [[InlineKeyboardButton(text="Open", url="https://example.com"), InlineKeyboardButton(text="Ping", callback_data="ping")]]
        data = ReplyMarkup.inline_keyboard(rows).to_dict()
        assert data == {
            "inline_keyboard": [[
                {"text": "Open", "url": "https://example.com"},
                {"text": "Ping", "callback_data": "ping"},
            ]]
        }

    def test_empty_inline_keyboard(self) -> None:
        assert ReplyMarkup.inline_keyboard([]).to_dict() == {"inline_keyboard": []}

    def test_reply_keyboard(self) -> None:
        keyboard = ReplyKeyboardMarkup(keyboard=[[KeyboardButton(text="Yes"), KeyboardButton(text="No")]], one_time_keyboard=True)
        data = ReplyMarkup.reply_keyboard(keyboard).to_dict()
        assert data == {"keyboard": [[{"text": "Yes"}, {"text": "No"}]], "one_time_keyboard": True}

    def test_remove_keyboard(self) -> None:
        data = ReplyMarkup.remove_keyboard().to_dict()
        assert data == {"remove_keyboard": True}

    @pytest.mark.parametrize(
        "markup, kept",
        [
            (ReplyMarkup.force_reply(), "force_reply"),
            (ReplyMarkup.remove_keyboard(), "remove_keyboard"),
            (ReplyMarkup.inline_keyboard([]), "inline_keyboard"),
            (ReplyMarkup.reply_keyboard(ReplyKeyboardMarkup()), "keyboard"),
        ],
    )
    def test_other_branches_omitted(self, markup: ReplyMarkup, kept: str) -> None:
        data = markup.to_dict()
        for key in _OTHER_BRANCH_KEYS:
            if key != kept:
                assert key not in data
        assert "kind" not in data
        assert "payload" not in data


class TestReplyMarkupInvariants:
    def test_payload_must_match_kind(self) -> None:
        with pytest.raises(ValidationError):
            ReplyMarkup(kind=ReplyMarkupKind.FORCE_REPLY, payload=ReplyKeyboardRemove())

    def test_frozen(self) -> None:
        markup = ReplyMarkup.force_reply()
        with pytest.raises(ValidationError):
            markup.kind = ReplyMarkupKind.REMOVE_KEYBOARD  # type: ignore[misc]
