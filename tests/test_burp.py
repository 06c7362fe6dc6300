"""Tests for saved request decoding."""

import base64

import pytest

from http_probe.core.burp import (
    RawRequest,
    decode_burp_request,
    parse_burp_request,
)
from http_probe.core.exceptions import (
    BurpDecodeError,
    Base64DecodeError,
    InvalidRequestError,
    UnresolvableURLError,
)


def encode(raw: str) -> str:
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


class TestParseBurpRequest:
    """Tests for URL recovery."""

    def test_origin_form_defaults_to_https(self):
        """Test Host header plus https default."""
        blob = encode("GET /x HTTP/1.1\r\nHost: example.com\r\n\r\n")

        assert parse_burp_request(blob) == "https://example.com/x"

    def test_query_preserved(self):
        """Test the query string is kept."""
        blob = encode("GET /search?q=1&page=2 HTTP/1.1\r\nHost: example.com\r\n\r\n")

        assert parse_burp_request(blob) == "https://example.com/search?q=1&page=2"

    def test_scheme_from_referer(self):
        """Test the Referer scheme is inherited."""
        blob = encode(
            "GET /a HTTP/1.1\r\n"
            "Host: example.com:8080\r\n"
            "Referer: http://example.com:8080/\r\n"
            "\r\n"
        )

        assert parse_burp_request(blob) == "http://example.com:8080/a"

    def test_absolute_form_target(self):
        """Test scheme and host from an absolute request target win."""
        blob = encode(
            "GET http://internal.example/status HTTP/1.1\r\n"
            "Host: other.example\r\n"
            "\r\n"
        )

        assert parse_burp_request(blob) == "http://internal.example/status"

    def test_lf_line_endings(self):
        """Test requests saved with bare LF line endings."""
        blob = encode("GET /lf HTTP/1.1\nHost: example.com\n\n")

        assert parse_burp_request(blob) == "https://example.com/lf"

    def test_invalid_base64(self):
        """Test invalid base64 collapses to an empty string."""
        assert parse_burp_request("not base64 at all!") == ""

    def test_not_http(self):
        """Test decodable but non-HTTP content collapses to an empty string."""
        assert parse_burp_request(encode("hello world")) == ""

    def test_missing_host(self):
        """Test a request without any host collapses to an empty string."""
        assert parse_burp_request(encode("GET /x HTTP/1.1\r\n\r\n")) == ""

    def test_wrapped_base64(self):
        """Test base64 wrapped across lines is accepted."""
        raw = b"GET /" + b"a" * 80 + b" HTTP/1.1\r\nHost: example.com\r\n\r\n"
        blob = base64.encodebytes(raw).decode("ascii")

        assert "\n" in blob.strip()
        assert parse_burp_request(blob) == "https://example.com/" + "a" * 80

    def test_double_slash_path_keeps_host_header(self):
        """Test a path starting with // is never read as a host."""
        blob = encode("GET //evil.com/x HTTP/1.1\r\nHost: example.com\r\n\r\n")

        assert parse_burp_request(blob) == "https://example.com//evil.com/x"

    def test_connect_authority_form(self):
        """Test CONNECT targets are used as the host."""
        blob = encode("CONNECT example.com:443 HTTP/1.1\r\nHost: example.com:443\r\n\r\n")

        assert parse_burp_request(blob) == "https://example.com:443"

    def test_relative_target_rejected(self):
        """Test a target that is neither a path nor an absolute URL."""
        blob = encode("GET example.com/x HTTP/1.1\r\nHost: example.com\r\n\r\n")

        assert parse_burp_request(blob) == ""
        with pytest.raises(InvalidRequestError):
            decode_burp_request(blob)


class TestDecodeBurpRequest:
    """Tests for the detailed decoder."""

    def test_request_fields(self):
        """Test method, host, scheme, path, headers and body are filled in."""
        blob = encode(
            "POST /login?next=/ HTTP/1.1\r\n"
            "Host: example.com\r\n"
            "Content-Type: application/x-www-form-urlencoded\r\n"
            "\r\n"
            "user=admin"
        )

        req = decode_burp_request(blob)

        assert req.method == "POST"
        assert req.url == "https://example.com/login?next=/"
        assert req.host == "example.com"
        assert req.scheme == "https"
        assert req.path == "/login?next=/"
        assert req.headers == [
            ("Host", "example.com"),
            ("Content-Type", "application/x-www-form-urlencoded"),
        ]
        assert req.body == "user=admin"

    def test_failure_kinds(self):
        """Test each failure is reported with its own exception."""
        with pytest.raises(Base64DecodeError):
            decode_burp_request("%%%")
        with pytest.raises(InvalidRequestError):
            decode_burp_request(encode("GET /x\r\n\r\n"))
        with pytest.raises(UnresolvableURLError):
            decode_burp_request(encode("GET /x HTTP/1.1\r\nAccept: */*\r\n\r\n"))

    def test_failures_share_base(self):
        """Test all decoding failures derive from BurpDecodeError."""
        for exc in (Base64DecodeError, InvalidRequestError, UnresolvableURLError):
            assert issubclass(exc, BurpDecodeError)


class TestRawRequest:
    """Tests for raw request parsing."""

    def test_header_lookup_case_insensitive(self):
        """Test header lookup ignores case."""
        raw = RawRequest.from_raw(b"GET / HTTP/1.1\r\nhost: example.com\r\n\r\n")

        assert raw.get_header("Host") == "example.com"
        assert raw.get_header("Referer") is None

    def test_malformed_header_line(self):
        """Test header lines without a colon are rejected."""
        with pytest.raises(InvalidRequestError):
            RawRequest.from_raw(b"GET / HTTP/1.1\r\nbroken header\r\n\r\n")

    def test_bad_version(self):
        """Test the request line must end with an HTTP version."""
        with pytest.raises(InvalidRequestError):
            RawRequest.from_raw(b"GET / SPDY/3\r\n\r\n")
