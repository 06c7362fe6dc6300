"""HTTP client construction.

Builds an ``httpx.Client`` tuned for probing arbitrary targets: TLS
verification off, fixed connection limits, one timeout for every phase,
no response compression and optional transport-level retries.
"""

import time
from typing import Dict, Optional, Any

import httpx
import structlog

from .config import (
    Options,
    DEFAULT_HEADERS,
    MAX_IDLE_CONNECTIONS,
    MAX_CONNECTIONS_PER_HOST,
)
from ..utils.logging import get_logger, null_logger


# Request extension key; set to False to send a request without retries
RETRY_EXTENSION = "http_probe.retry"


def build_headers(options: Options) -> Dict[str, str]:
    """Merge default headers with the user supplied "Key: Value" strings.

    Keys are matched case-sensitively. Entries without a colon or with an
    empty key are skipped.
    """
    headers = dict(DEFAULT_HEADERS)
    for raw in options.headers:
        if ":" not in raw:
            continue
        key, value = raw.split(":", 1)
        key = key.strip()
        if not key:
            continue
        headers[key] = value.strip()
    return headers


class RetryTransport(httpx.BaseTransport):
    """Transport wrapper retrying requests that fail at the transport level.

    The wait starts at ``wait`` and doubles after every attempt, capped at
    ``max_wait``.
    """

    def __init__(
        self,
        transport: httpx.BaseTransport,
        retries: int = 0,
        wait: float = 0.0,
        max_wait: float = 0.0,
        logger: Optional[Any] = None,
    ):
        self._transport = transport
        self.retries = max(retries, 0)
        self.wait = wait
        self.max_wait = max_wait
        self.logger = logger or null_logger()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        retries = self.retries if request.extensions.pop(RETRY_EXTENSION, True) else 0
        delay = self.wait
        attempt = 0

        while True:
            try:
                return self._transport.handle_request(request)
            except httpx.TransportError as e:
                if attempt >= retries:
                    raise
                attempt += 1
                self.logger.warning(
                    "retrying request",
                    url=str(request.url),
                    attempt=attempt,
                    retries=retries,
                    delay=delay,
                    error=str(e),
                )
                time.sleep(delay)
                delay = min(delay * 2, self.max_wait)

    def close(self) -> None:
        self._transport.close()


def _event_hooks(logger: Any) -> Dict[str, list]:
    def log_request(request: httpx.Request) -> None:
        logger.debug("request", method=request.method, url=str(request.url))

    def log_response(response: httpx.Response) -> None:
        logger.debug(
            "response",
            url=str(response.request.url),
            status=response.status_code,
            http_version=response.http_version,
        )

    return {"request": [log_request], "response": [log_response]}


def build_client(
    options: Options,
    logger: Optional[structlog.BoundLogger] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Build the base HTTP client for probing.

    Args:
        options: Probing options
        logger: Sink for the client's own logs. Defaults to a console logger
            when ``options.debug`` is set and to a no-op logger otherwise.
        transport: Underlying transport, mainly for tests. Defaults to an
            ``httpx.HTTPTransport`` with verification disabled.

    Returns:
        Configured ``httpx.Client``; the caller owns and closes it.
    """
    if logger is None:
        logger = get_logger("http_probe.client") if options.debug else null_logger()

    limits = httpx.Limits(
        max_connections=MAX_CONNECTIONS_PER_HOST,
        max_keepalive_connections=MAX_IDLE_CONNECTIONS,
        keepalive_expiry=options.timeout,
    )
    if transport is None:
        transport = httpx.HTTPTransport(verify=False, limits=limits)

    headers = build_headers(options)
    client = httpx.Client(
        headers=headers,
        timeout=httpx.Timeout(options.timeout),
        limits=limits,
        verify=False,
        follow_redirects=options.redirect,
        transport=RetryTransport(
            transport,
            retries=options.retry,
            wait=options.retry_wait,
            max_wait=options.retry_max_wait,
            logger=logger,
        ),
        event_hooks=_event_hooks(logger),
        # Environment proxies would mount transports that bypass the retries
        trust_env=False,
    )

    # No compression unless the user explicitly asked for it
    if not any(key.lower() == "accept-encoding" for key in headers):
        del client.headers["Accept-Encoding"]

    return client
