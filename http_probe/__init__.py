"""http-probe: single-request HTTP probing with browser-console style output.

Builds an insecure, configurable HTTP client, sends one GET request (or
captures the first redirect without following it) and renders the raw
response as readable text. Also recovers target URLs from base64 saved
requests exported by intercepting proxies.
"""

__version__ = "1.0.0"
__author__ = "http-probe Contributors"

from http_probe.core.config import Options
from http_probe.core.client import build_client
from http_probe.core.dispatcher import just_send, parse_response
from http_probe.core.beautify import (
    beautify_request,
    beautify_headers,
    beautify_response,
)
from http_probe.core.burp import parse_burp_request, decode_burp_request
from http_probe.core.models import Request, Response

__all__ = [
    "__version__",
    "Options",
    "build_client",
    "just_send",
    "parse_response",
    "beautify_request",
    "beautify_headers",
    "beautify_response",
    "parse_burp_request",
    "decode_burp_request",
    "Request",
    "Response",
]
