"""Request dispatching and response normalization.

``just_send`` issues exactly one GET request. When redirects are not
followed, the first redirect response is captured as-is instead of being
treated as an error; otherwise the final response goes through
``parse_response``.
"""

from typing import List, Optional, Tuple

import httpx

from .beautify import beautify_headers, beautify_response
from .client import RETRY_EXTENSION
from .config import Options
from .exceptions import SendError
from .models import (
    HeaderList,
    RedirectAction,
    RedirectDecision,
    Response,
    TOTAL_LENGTH_HEADER,
    RESPONSE_TIME_HEADER,
)
from ..utils.helpers import (
    Timer,
    canonical_header_key,
    format_seconds,
    header_line_size,
)
from ..utils.logging import get_logger


logger = get_logger(__name__)

IMPLEMENTED_METHODS = ("get",)


def _collect_headers(raw: httpx.Response) -> Tuple[HeaderList, str, str, int]:
    """Return (headers, content type, location, serialized header size)."""
    encoding = raw.headers.encoding
    headers: List[Tuple[str, str]] = []
    content_type = ""
    location = ""
    size = 0

    for raw_key, raw_value in raw.headers.raw:
        key = canonical_header_key(raw_key.decode(encoding))
        value = raw_value.decode(encoding)
        if key == "Content-Type" and not content_type:
            content_type = value
        if key == "Location" and not location:
            location = value
        size += header_line_size(key, value, encoding)
        headers.append((key, value))

    return headers, content_type, location, size


def _decode_body(raw: httpx.Response, body: bytes) -> str:
    encoding = raw.charset_encoding or "utf-8"
    try:
        return body.decode(encoding, errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def _status_line(raw: httpx.Response) -> str:
    return f"{raw.http_version} {raw.status_code} {raw.reason_phrase}".strip()


def _build_response(raw: httpx.Response, body: bytes, elapsed: float) -> Response:
    headers, content_type, location, header_size = _collect_headers(raw)
    length = len(body) + header_size
    elapsed = max(elapsed, 0.0)

    headers.append((TOTAL_LENGTH_HEADER, str(length)))
    headers.append((RESPONSE_TIME_HEADER, format_seconds(elapsed)))

    res = Response(
        status=_status_line(raw),
        status_code=raw.status_code,
        content_type=content_type,
        location=location,
        headers=headers,
        body=_decode_body(raw, body),
        length=length,
        response_time=elapsed,
    )
    res.beautify = beautify_response(res)
    res.beautify_headers = beautify_headers(res)
    return res


def parse_response(raw: httpx.Response, body: Optional[bytes] = None) -> Response:
    """Normalize an httpx response.

    Args:
        raw: Response returned by the client
        body: Raw wire bytes of the body. Defaults to ``raw.content``, which
            requires the response to have been read.

    Returns:
        Response with headers, length, timing and both renderings filled in
    """
    if body is None:
        body = raw.content

    try:
        elapsed = raw.elapsed.total_seconds()
    except RuntimeError:
        # elapsed is only known once the response has been closed
        elapsed = 0.0

    return _build_response(raw, body, elapsed)


def intercept_redirect(raw: httpx.Response, timer: Timer) -> RedirectDecision:
    """Decide what to do with the first response of a non-following request."""
    if not raw.is_redirect:
        return RedirectDecision.proceed()

    try:
        body = b"".join(raw.iter_raw())
    except httpx.HTTPError as e:
        return RedirectDecision.failed(e)

    return RedirectDecision.captured(_build_response(raw, body, timer.elapsed))


def just_send(
    options: Options,
    url: str,
    client: httpx.Client,
    method: str = "GET",
) -> Response:
    """Send one request and return the normalized response.

    Args:
        options: Probing options; ``options.redirect`` selects between
            following redirects and capturing the first one
        url: Target URL
        client: Client from ``build_client``
        method: Only GET is implemented; anything else returns an empty
            Response without sending

    Returns:
        Normalized Response

    Raises:
        SendError: The request could not be sent or its body not read.
            ``SendError.response`` is an empty Response.
    """
    if method.strip().lower() not in IMPLEMENTED_METHODS:
        logger.debug("method not implemented", method=method, url=url)
        return Response()

    # Retries would hide the first redirect from the interception
    extensions = {} if options.redirect else {RETRY_EXTENSION: False}

    with Timer() as timer:
        try:
            request = client.build_request("GET", url, extensions=extensions)
            raw = client.send(request, follow_redirects=options.redirect, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("request failed", url=url, error=str(e))
            raise SendError(url, str(e)) from e

        try:
            if not options.redirect:
                decision = intercept_redirect(raw, timer)
                if decision.action is RedirectAction.STOP:
                    return decision.response
                if decision.action is RedirectAction.FAIL:
                    logger.error("reading redirect body failed", url=url, error=str(decision.error))
                    raise SendError(url, str(decision.error)) from decision.error

            body = b"".join(raw.iter_raw())
        except httpx.HTTPError as e:
            logger.error("reading response body failed", url=url, error=str(e))
            raise SendError(url, str(e)) from e
        finally:
            raw.close()

    return parse_response(raw, body)
