"""Render requests and responses as raw-HTTP-like text for reading."""

from .models import Request, Response


def beautify_request(req: Request) -> str:
    """Render a request, skipping headers with an empty key or value."""
    # hardcoded HTTP/1.1 for now
    lines = [f"{req.method} {req.url} HTTP/1.1\n"]
    for key, value in req.headers:
        if key and value:
            lines.append(f"{key}: {value}\n")
    if req.body:
        lines.append(f"\n{req.body}\n")
    return "".join(lines)


def beautify_headers(res: Response) -> str:
    """Render the status line and headers, each prefixed with ``< ``."""
    lines = [f"< {res.status}\n"]
    for key, value in res.headers:
        lines.append(f"< {key}: {value}\n")
    return "".join(lines)


def beautify_response(res: Response) -> str:
    """Render a full response; the body section is present even when empty."""
    lines = [f"{res.status}\n"]
    for key, value in res.headers:
        lines.append(f"{key}: {value}\n")
    lines.append(f"\n{res.body}\n")
    return "".join(lines)
