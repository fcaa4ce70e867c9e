"""Command-line interface for the Nylas SDK.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

import structlog

from nylas_sdk.api.options import RequestDescriptor
from nylas_sdk.client import Nylas
from nylas_sdk.config import get_settings
from nylas_sdk.exceptions import NylasError

logger = structlog.get_logger()


def _add_credential_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--client-id", default=None, help="Application client ID")
    parser.add_argument("--client-secret", default=None, help="Application client secret")
    parser.add_argument(
        "--api-server",
        default=None,
        help="Fully qualified API server URL (default: https://api.nylas.com)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nylas-sdk", description="Nylas API client")
    subparsers = parser.add_subparsers(dest="command", required=True)

    auth_url_parser = subparsers.add_parser(
        "auth-url",
        help="Print the hosted OAuth URL to send a user to",
    )
    _add_credential_arguments(auth_url_parser)
    auth_url_parser.add_argument("--redirect-uri", required=True, help="OAuth redirect URI")
    auth_url_parser.add_argument("--login-hint", default="", help="Email address to prefill")
    auth_url_parser.add_argument("--state", default=None, help="Opaque state value")
    auth_url_parser.add_argument(
        "--scope",
        dest="scopes",
        action="append",
        default=None,
        help="Requested scope (repeatable)",
    )

    exchange_parser = subparsers.add_parser(
        "exchange-code",
        help="Exchange an authorization code for an access token",
    )
    _add_credential_arguments(exchange_parser)
    exchange_parser.add_argument("code", help="Authorization code from the redirect URI")

    request_parser = subparsers.add_parser("request", help="Send one API request and print the result")
    _add_credential_arguments(request_parser)
    request_parser.add_argument("method", help="HTTP method, e.g. GET")
    request_parser.add_argument("path", help="API path, e.g. /threads")
    request_parser.add_argument("--token", default=None, help="Account access token")
    request_parser.add_argument(
        "--query",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    request_parser.add_argument("--body", default=None, help="JSON request body")

    return parser


def _client_from(args: argparse.Namespace) -> Nylas:
    return Nylas().configure(args.client_id, args.client_secret, args.api_server)


def _cmd_auth_url(args: argparse.Namespace) -> int:
    nylas = _client_from(args)
    print(
        nylas.url_for_authentication(
            redirect_uri=args.redirect_uri,
            login_hint=args.login_hint,
            state=args.state,
            scopes=args.scopes,
        )
    )
    return 0


async def _cmd_exchange_code(args: argparse.Namespace) -> int:
    nylas = _client_from(args)
    print(await nylas.exchange_code_for_token(args.code))
    return 0


async def _cmd_request(args: argparse.Namespace) -> int:
    nylas = _client_from(args)
    query = dict(item.split("=", 1) for item in args.query) if args.query else None
    descriptor = RequestDescriptor(
        path=args.path,
        method=args.method.upper(),
        query=query,
        body=json.loads(args.body) if args.body else None,
    )
    if args.token:
        connection = nylas.with_access_token(args.token)
    else:
        connection = nylas.accounts.connection
    result = await connection.request(descriptor)
    print(json.dumps(result, indent=2))
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Nylas SDK CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    # Configure logging
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        if parsed.command == "auth-url":
            return _cmd_auth_url(parsed)
        if parsed.command == "exchange-code":
            return asyncio.run(_cmd_exchange_code(parsed))
        if parsed.command == "request":
            return asyncio.run(_cmd_request(parsed))
    except NylasError as exc:
        logger.error("command_failed", command=parsed.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
