"""Decoding of saved raw requests exported by intercepting proxies.

Burp and similar tools store a captured request as a base64 blob holding
the full HTTP/1.x request. Only the request line and headers matter for
recovering the target URL; the body is kept for display.
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Optional, List, Tuple
from urllib.parse import urlsplit, urlunsplit

from .exceptions import (
    BurpDecodeError,
    Base64DecodeError,
    InvalidRequestError,
    UnresolvableURLError,
)
from .models import Request
from ..utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_SCHEME = "https"


@dataclass
class RawRequest:
    """Raw HTTP request split into its wire components."""

    raw_data: bytes
    method: str = ""
    target: str = ""
    version: str = ""
    headers: List[Tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    @classmethod
    def from_raw(cls, raw_data: bytes) -> "RawRequest":
        """Parse raw HTTP request data.

        Accepts CRLF or bare LF line endings.

        Raises:
            InvalidRequestError: Malformed request line or header line
        """
        request = cls(raw_data=raw_data)
        data = raw_data.replace(b"\r\n", b"\n")

        if b"\n\n" in data:
            header_section, request.body = data.split(b"\n\n", 1)
        else:
            header_section = data.rstrip(b"\n")

        lines = header_section.decode("utf-8", errors="replace").split("\n")

        parts = lines[0].split(" ")
        if len(parts) != 3 or not all(parts):
            raise InvalidRequestError(f"Malformed request line: {lines[0]!r}", raw_data)
        request.method, request.target, request.version = parts
        if not request.version.startswith("HTTP/"):
            raise InvalidRequestError(f"Malformed HTTP version: {request.version!r}", raw_data)

        for line in lines[1:]:
            if ":" not in line:
                raise InvalidRequestError(f"Malformed header line: {line!r}", raw_data)
            key, value = line.split(":", 1)
            if not key or key != key.strip():
                raise InvalidRequestError(f"Malformed header name: {key!r}", raw_data)
            request.headers.append((key, value.strip()))

        return request

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get header value case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default


def _decode_base64(blob: str) -> bytes:
    # Line breaks from wrapped base64 output are ignored
    cleaned = blob.replace("\r", "").replace("\n", "").strip()
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(str(e)) from e


def _resolve_scheme(raw: RawRequest) -> str:
    referer = raw.get_header("Referer")
    if not referer:
        return DEFAULT_SCHEME
    return urlsplit(referer).scheme or DEFAULT_SCHEME


def _split_target(raw: RawRequest) -> Tuple[str, str, str, str]:
    """Split the request target into (scheme, host, path, query).

    Origin-form targets (``/path?query``, including ``//host/path``) never
    carry a host or scheme. CONNECT targets are authority-form and only
    carry a host. Anything else must be an absolute URL.
    """
    target = raw.target

    if target.startswith("/") or target == "*":
        path, _, query = target.partition("?")
        return "", "", path, query.partition("#")[0]

    if raw.method == "CONNECT":
        return "", target, "", ""

    try:
        parts = urlsplit(target)
    except ValueError as e:
        raise InvalidRequestError(f"Malformed request target: {e}", raw.raw_data) from e
    if not parts.scheme or not target[len(parts.scheme):].startswith("://"):
        raise InvalidRequestError(f"Malformed request target: {target!r}", raw.raw_data)
    return parts.scheme, parts.netloc, parts.path, parts.query


def decode_burp_request(blob: str) -> Request:
    """Decode a base64 saved request into a Request with an absolute URL.

    The host comes from the request target when it is in absolute or
    authority form, otherwise from the Host header. The scheme comes from
    the target, then from the Referer header, then defaults to https.

    Raises:
        Base64DecodeError: blob is not valid base64
        InvalidRequestError: decoded bytes are not an HTTP request
        UnresolvableURLError: no host could be determined
    """
    raw = RawRequest.from_raw(_decode_base64(blob))

    scheme, host, path, query = _split_target(raw)
    host = host or raw.get_header("Host", "")
    if not host:
        raise UnresolvableURLError(raw.target)
    scheme = scheme or _resolve_scheme(raw)

    return Request(
        method=raw.method,
        url=urlunsplit((scheme, host, path, query, "")),
        host=host,
        scheme=scheme,
        path=raw.target,
        headers=list(raw.headers),
        body=raw.body.decode("utf-8", errors="replace"),
    )


def parse_burp_request(blob: str) -> str:
    """Return the absolute URL of a saved request, or "" if it cannot be decoded."""
    try:
        return decode_burp_request(blob).url
    except BurpDecodeError as e:
        logger.debug("burp request not decoded", error=str(e))
        return ""
