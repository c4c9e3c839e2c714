"""Tests for demo_api.server.sender response emission rules."""

from typing import Any

from demo_api.http.response import Response
from demo_api.server.sender import send_response


async def _capture(response: Response, *, head: bool = False) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        messages.append(message)

    await send_response(response, send, head=head)
    return messages


class TestSendResponse:
    async def test_json_response(self) -> None:
        messages = await _capture(Response.from_json({"ok": True}, status=201))

        start, body = messages
        assert start["type"] == "http.response.start"
        assert start["status"] == 201
        headers = dict(start["headers"])
        assert headers[b"content-type"] == b"application/json; charset=utf-8"
        assert headers[b"content-length"] == str(len(body["body"])).encode()
        assert body["body"] == b'{"ok": true}'

    async def test_custom_headers_lowercased(self) -> None:
        messages = await _capture(Response("x").with_header("Allow", "GET"))
        assert (b"allow", b"GET") in messages[0]["headers"]

    async def test_204_drops_body(self) -> None:
        messages = await _capture(Response("unexpected").with_status(204))
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert b"content-type" not in headers
        assert messages[1]["body"] == b""

    async def test_head_keeps_length_but_sends_no_body(self) -> None:
        messages = await _capture(Response("hello"), head=True)
        assert dict(messages[0]["headers"])[b"content-length"] == b"5"
        assert messages[1]["body"] == b""
