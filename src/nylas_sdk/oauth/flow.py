"""Hosted OAuth flow helpers.

The hosted flow has two steps: send the user's browser to the URL built by
``build_authentication_url``, then trade the ``code`` Nylas hands back to the
redirect URI for an access token with ``exchange_code_for_token``.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from nylas_sdk.api.connection import RequestCallback
from nylas_sdk.api.responses import check_api_version, parse_body
from nylas_sdk.config import NylasConfig
from nylas_sdk.exceptions import (
    ApiError,
    ConfigurationError,
    InvalidArgumentError,
    NylasError,
    TransportError,
)

logger = structlog.get_logger()

NO_ACCESS_TOKEN_MESSAGE = "No access token in response"


def build_authentication_url(
    config: NylasConfig,
    redirect_uri: str | None,
    login_hint: str | None = "",
    state: str | None = None,
    scopes: list[str] | None = None,
) -> str:
    """Build the URL that starts the hosted OAuth flow.

    Components are concatenated as given; callers must URL-encode them first.

    Args:
        config: Client configuration; ``client_id`` is required.
        redirect_uri: Where Nylas sends the user after authorizing.
        login_hint: Email address to prefill on the login page.
        state: Opaque value echoed back to the redirect URI.
        scopes: Requested scopes, joined with commas.

    Raises:
        ConfigurationError: If no client ID is configured.
        InvalidArgumentError: If ``redirect_uri`` is empty.
    """
    if not config.client_id:
        raise ConfigurationError(
            "url_for_authentication() cannot be called until you provide a client_id via configure()"
        )
    if not redirect_uri:
        raise InvalidArgumentError("url_for_authentication() requires a redirect_uri")

    url = (
        f"{config.api_server}/oauth/authorize?client_id={config.client_id}"
        f"&response_type=code&login_hint={login_hint or ''}&redirect_uri={redirect_uri}"
    )
    if state is not None:
        url += f"&state={state}"
    if scopes is not None:
        url += f"&scopes={','.join(scopes)}"
    return url


def _access_token_from(body: Any) -> str | None:
    if isinstance(body, dict) and body.get("access_token"):
        return str(body["access_token"])
    return None


async def exchange_code_for_token(
    config: NylasConfig,
    code: str | None,
    callback: RequestCallback | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Exchange an authorization code for an account access token.

    Args:
        config: Client configuration; ``client_id`` and ``client_secret`` are required.
        code: The code received on the redirect URI.
        callback: Optional legacy completion callback, called with
            ``(error, None)`` or ``(None, access_token)``.
        transport: Optional httpx transport, mainly for tests.

    Returns:
        The access token.

    Raises:
        ConfigurationError: If the client ID or secret is missing.
        InvalidArgumentError: If ``code`` is empty.
        TransportError: If no response was received or it could not be read.
        ApiError: If the response carries no access token.
    """
    if not config.client_id or not config.client_secret:
        raise ConfigurationError(
            "exchange_code_for_token() cannot be called until you provide a client_id "
            "and client_secret via configure()"
        )
    if not code:
        raise InvalidArgumentError("exchange_code_for_token() must be called with a code")

    query = {
        "client_id": config.client_id,
        "client_secret": config.client_secret,
        "grant_type": "authorization_code",
        "code": code,
    }
    logger.info("oauth_code_exchange_started", client_id=config.client_id)

    try:
        try:
            async with httpx.AsyncClient(transport=transport) as client:
                response = await client.get(f"{config.api_server}/oauth/token", params=query)
        except httpx.RequestError as exc:
            raise TransportError(str(exc) or "No response") from exc

        check_api_version(response)
        body = parse_body(response, strict=False)
        access_token = _access_token_from(body)
        if access_token is None:
            message = NO_ACCESS_TOKEN_MESSAGE
            if isinstance(body, dict) and body.get("message"):
                message = str(body["message"])
            raise ApiError(message, status_code=response.status_code)
    except NylasError as exc:
        logger.warning("oauth_code_exchange_failed", client_id=config.client_id, error=str(exc))
        if callback is not None:
            callback(exc, None)
        raise

    logger.info("oauth_code_exchange_completed", client_id=config.client_id)
    if callback is not None:
        callback(None, access_token)
    return access_token
