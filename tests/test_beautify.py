"""Tests for request/response rendering."""

from http_probe.core.beautify import (
    beautify_request,
    beautify_headers,
    beautify_response,
)
from http_probe.core.models import Request, Response


def sample_response(body: str = "hello") -> Response:
    return Response(
        status="HTTP/1.1 200 OK",
        status_code=200,
        headers=[
            ("Content-Type", "text/plain"),
            ("Set-Cookie", "a=1"),
            ("Set-Cookie", "b=2"),
            ("Total Length", "42"),
            ("Response Time", "0.123456"),
        ],
        body=body,
    )


class TestBeautifyRequest:
    """Tests for request rendering."""

    def test_request_line_and_headers(self):
        """Test request line followed by headers in order."""
        req = Request(
            method="GET",
            url="https://example.com/x",
            headers=[("Host", "example.com"), ("Accept", "*/*")],
        )

        assert beautify_request(req) == (
            "GET https://example.com/x HTTP/1.1\n"
            "Host: example.com\n"
            "Accept: */*\n"
        )

    def test_empty_key_or_value_skipped(self):
        """Test headers with an empty key or value are not rendered."""
        req = Request(
            method="GET",
            url="https://example.com/",
            headers=[("", "orphan"), ("X-Empty", ""), ("X-Ok", "1")],
        )

        assert beautify_request(req) == "GET https://example.com/ HTTP/1.1\nX-Ok: 1\n"

    def test_body_section(self):
        """Test a non-empty body follows a blank line."""
        req = Request(method="POST", url="https://example.com/login", body="user=admin")

        assert beautify_request(req).endswith("HTTP/1.1\n\nuser=admin\n")


class TestBeautifyResponse:
    """Tests for full response rendering."""

    def test_full_rendering(self):
        """Test status line, headers in order, blank line and body."""
        assert beautify_response(sample_response()) == (
            "HTTP/1.1 200 OK\n"
            "Content-Type: text/plain\n"
            "Set-Cookie: a=1\n"
            "Set-Cookie: b=2\n"
            "Total Length: 42\n"
            "Response Time: 0.123456\n"
            "\n"
            "hello\n"
        )

    def test_empty_body_keeps_blank_line(self):
        """Test the body section is rendered even when empty."""
        text = beautify_response(sample_response(body=""))

        assert text.endswith("Response Time: 0.123456\n\n\n")

    def test_deterministic(self):
        """Test rendering the same value twice gives the same text."""
        res = sample_response()

        assert beautify_response(res) == beautify_response(res)


class TestBeautifyHeaders:
    """Tests for headers-only rendering."""

    def test_prefixed_lines(self):
        """Test every line is prefixed and the body is left out."""
        text = beautify_headers(sample_response())
        lines = text.splitlines()

        assert lines[0] == "< HTTP/1.1 200 OK"
        assert lines[1:] == [
            "< Content-Type: text/plain",
            "< Set-Cookie: a=1",
            "< Set-Cookie: b=2",
            "< Total Length: 42",
            "< Response Time: 0.123456",
        ]
        assert "hello" not in text
