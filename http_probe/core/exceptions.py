"""Custom exceptions for http-probe."""

from typing import Optional, Any, Dict

from .models import Response


class ProbeException(Exception):
    """Base exception for all http-probe errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Transport Errors
# ============================================================================


class SendError(ProbeException):
    """Sending the request failed before any response could be captured."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Request to {url} failed: {reason}",
            {"url": url, "reason": reason},
        )
        self.url = url
        self.reason = reason
        self.response = Response()


# ============================================================================
# Burp Request Decoding Errors
# ============================================================================


class BurpDecodeError(ProbeException):
    """Base class for saved-request decoding errors."""

    pass


class Base64DecodeError(BurpDecodeError):
    """The blob is not valid base64."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid base64 request blob: {reason}", {"reason": reason})
        self.reason = reason


class InvalidRequestError(BurpDecodeError):
    """The decoded bytes are not a parseable HTTP request."""

    def __init__(self, message: str, raw_request: Optional[bytes] = None):
        super().__init__(
            message,
            {"raw_request_preview": raw_request[:200] if raw_request else None},
        )
        self.raw_request = raw_request


class UnresolvableURLError(BurpDecodeError):
    """The request parsed but carries no host to build a URL from."""

    def __init__(self, target: str):
        super().__init__(
            f"Cannot resolve an absolute URL for request target {target!r}",
            {"target": target},
        )
        self.target = target


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(ProbeException):
    """Invalid probing options."""

    def __init__(self, errors: list):
        super().__init__(
            f"Configuration errors: {'; '.join(errors)}",
            {"errors": errors},
        )
        self.errors = errors
