"""CLI interface for http-probe.

Provides a command-line interface for probing a single URL and for
recovering target URLs from saved proxy requests.
"""

import sys

import click
from rich.markup import escape

from http_probe import __version__
from http_probe.core.beautify import beautify_request
from http_probe.core.burp import decode_burp_request
from http_probe.core.client import build_client
from http_probe.core.config import Options
from http_probe.core.dispatcher import just_send
from http_probe.core.exceptions import (
    BurpDecodeError,
    ConfigurationError,
    SendError,
)
from http_probe.utils.logging import setup_logging, console


def _print_raw(text: str) -> None:
    """Print HTTP text verbatim, without rich markup or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True, end="")


@click.group()
@click.version_option(version=__version__, prog_name="http-probe")
def cli():
    """http-probe: send one request and show it like a browser console.

    Probe a URL and print the raw response, or decode a base64 saved
    request exported by an intercepting proxy.
    """
    pass


@cli.command()
@click.argument("target")
@click.option(
    "--timeout", "-t",
    type=float,
    default=10.0,
    help="Timeout in seconds for every phase of the request"
)
@click.option(
    "--retry", "-r",
    type=int,
    default=0,
    help="Retries on transport errors (only while following redirects)"
)
@click.option(
    "--header", "-H",
    multiple=True,
    help="Custom headers (e.g., -H 'Authorization: Bearer token')"
)
@click.option(
    "--redirect/--no-redirect",
    default=False,
    help="Follow redirects instead of showing the first redirect response"
)
@click.option(
    "--headers-only",
    is_flag=True,
    help="Print only the status line and headers"
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Show HTTP client logs"
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write logs to this file"
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Render logs as JSON"
)
def probe(
    target: str,
    timeout: float,
    retry: int,
    header: tuple,
    redirect: bool,
    headers_only: bool,
    debug: bool,
    log_file: str,
    json_logs: bool,
):
    """Send a GET request to TARGET and print the beautified response.

    Examples:

      http-probe probe https://example.com

      http-probe probe example.com --redirect -H 'Cookie: a=b'
    """
    if not target.startswith(("http://", "https://")):
        target = f"https://{target}"

    setup_logging(
        level="DEBUG" if debug else "WARNING",
        json_output=json_logs,
        log_file=log_file,
    )

    options = Options(
        timeout=timeout,
        retry=retry,
        headers=tuple(header),
        debug=debug,
        redirect=redirect,
    )

    try:
        errors = options.validate()
        if errors:
            raise ConfigurationError(errors)

        with build_client(options) as client:
            res = just_send(options, target, client)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(2)
    except SendError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    _print_raw(res.beautify_headers if headers_only else res.beautify)


@cli.command()
@click.argument("blob")
@click.option(
    "--show-request",
    is_flag=True,
    help="Also print the decoded request"
)
def burp(blob: str, show_request: bool):
    """Print the absolute URL of a base64 saved request BLOB."""
    try:
        req = decode_burp_request(blob)
    except BurpDecodeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    _print_raw(f"{req.url}\n")
    if show_request:
        _print_raw(f"\n{beautify_request(req)}")


if __name__ == "__main__":
    cli()
