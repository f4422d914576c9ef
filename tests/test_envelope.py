"""Tests for response-envelope decoding and its check ordering."""

import json
import sys
import os
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegraph.envelope import CommitResult, Envelope, decode_envelope, describe_failure, is_success_status
from telegraph.exceptions import APIError, DecodeError, HTTPStatusError, TelegraphError
from telegraph.models import File, User


def _response(status: int, body: object) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return resp


_USER = {"id": 1, "is_bot": True, "first_name": "Bot"}


class TestDecodeSuccess:
    def test_ok_result_decoded(self) -> None:
        user = decode_envelope(_response(200, {"ok": True, "result": _USER}), User)
        assert isinstance(user, User)
        assert user.first_name == "Bot"

    def test_any_2xx_is_success(self) -> None:
        file = decode_envelope(_response(201, {"ok": True, "result": {"file_id": "f"}}), File)
        assert file.file_id == "f"
        assert file.file_path is None


class TestDecodeFailures:
    def test_malformed_json(self) -> None:
        resp = _response(200, b"<html>oops</html>")
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope(resp, User)
        assert exc_info.value.response is resp
        assert exc_info.value.status_code == 200

    def test_empty_body_on_error_status(self) -> None:
        with pytest.raises(TelegraphError) as exc_info:
            decode_envelope(_response(500, b""), User)
        assert exc_info.value.status_code == 500

    def test_result_of_wrong_shape(self) -> None:
        with pytest.raises(DecodeError):
            decode_envelope(_response(200, {"ok": True, "result": {"id": "not-an-int"}}), User)

    def test_ok_without_result(self) -> None:
        with pytest.raises(DecodeError):
            decode_envelope(_response(200, {"ok": True}), User)

    def test_status_wins_over_envelope(self) -> None:
        """A non-2xx status fails even when the body claims success."""
        with pytest.raises(HTTPStatusError) as exc_info:
            decode_envelope(_response(502, {"ok": True, "result": _USER}), User)
        assert exc_info.value.status_code == 502

    def test_error_status_carries_description(self) -> None:
        body = {"ok": False, "error_code": 400, "description": "Bad Request: chat not found"}
        with pytest.raises(HTTPStatusError) as exc_info:
            decode_envelope(_response(400, body), User)
        assert "chat not found" in str(exc_info.value)
        assert exc_info.value.description == "Bad Request: chat not found"

    def test_ok_false_on_200(self) -> None:
        body = {"ok": False, "error_code": 403, "description": "Forbidden: bot was blocked by the user"}
        with pytest.raises(APIError) as exc_info:
            decode_envelope(_response(200, body), User)
        assert exc_info.value.error_code == 403
        assert "blocked" in exc_info.value.description
        assert exc_info.value.status_code == 200


class TestHelpers:
    def test_success_range(self) -> None:
        assert is_success_status(200)
        assert is_success_status(299)
        assert not is_success_status(199)
        assert not is_success_status(300)

    def test_describe_failure(self) -> None:
        assert describe_failure(_response(404, {"ok": False, "error_code": 404, "description": "Not Found"})) == "Not Found"
        assert describe_failure(_response(404, b"not json")) is None

    def test_envelope_parameters(self) -> None:
        env = Envelope[User].model_validate({"ok": False, "error_code": 429, "description": "Too Many Requests", "parameters": {"retry_after": 5}})
        assert env.parameters is not None
        assert env.parameters.retry_after == 5

    def test_commit_result_unpacks(self) -> None:
        resp = _response(200, b"{}")
        model, response = CommitResult("m", resp)
        assert model == "m"
        assert response is resp
