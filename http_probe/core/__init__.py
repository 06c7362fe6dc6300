"""Core modules for http-probe."""

from .config import Options, DEFAULT_HEADERS
from .models import (
    Request,
    Response,
    RedirectAction,
    RedirectDecision,
)
from .exceptions import (
    ProbeException,
    SendError,
    BurpDecodeError,
    Base64DecodeError,
    InvalidRequestError,
    UnresolvableURLError,
    ConfigurationError,
)
from .client import build_client, build_headers, RetryTransport
from .dispatcher import just_send, parse_response, intercept_redirect
from .beautify import beautify_request, beautify_headers, beautify_response
from .burp import decode_burp_request, parse_burp_request, RawRequest

__all__ = [
    # Config
    "Options",
    "DEFAULT_HEADERS",
    # Models
    "Request",
    "Response",
    "RedirectAction",
    "RedirectDecision",
    # Exceptions
    "ProbeException",
    "SendError",
    "BurpDecodeError",
    "Base64DecodeError",
    "InvalidRequestError",
    "UnresolvableURLError",
    "ConfigurationError",
    # Client
    "build_client",
    "build_headers",
    "RetryTransport",
    # Dispatch
    "just_send",
    "parse_response",
    "intercept_redirect",
    # Rendering
    "beautify_request",
    "beautify_headers",
    "beautify_response",
    # Burp
    "decode_burp_request",
    "parse_burp_request",
    "RawRequest",
]
