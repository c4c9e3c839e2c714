"""Tests for demo_api.server.negotiation: return value to Response."""

import pytest

from demo_api.http.response import Response
from demo_api.server.negotiation import negotiate


class TestNegotiate:
    def test_response_passthrough(self) -> None:
        resp = Response("x", status=202)
        assert negotiate(resp) is resp

    def test_dict_is_json(self) -> None:
        resp = negotiate({"status": "healthy"})
        assert resp.status == 200
        assert resp.content_type.startswith("application/json")
        assert resp.json == {"status": "healthy"}

    def test_list_is_json(self) -> None:
        assert negotiate([1, 2]).json == [1, 2]

    def test_str_is_text(self) -> None:
        resp = negotiate("hello")
        assert resp.text == "hello"
        assert resp.content_type.startswith("text/plain")

    def test_bytes(self) -> None:
        assert negotiate(b"\x00").content_type == "application/octet-stream"

    def test_none_is_no_content(self) -> None:
        assert negotiate(None).status == 204

    def test_status_tuple(self) -> None:
        resp = negotiate(({"id": 3}, 201))
        assert resp.status == 201
        assert resp.json == {"id": 3}

    def test_status_headers_tuple(self) -> None:
        resp = negotiate(({"error": "x"}, 400, {"X-Reason": "validation"}))
        assert resp.status == 400
        assert resp.header("X-Reason") == "validation"

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="Cannot convert"):
            negotiate(object())
