"""Normalization of HTTP responses into results or errors.

The Nylas API signals failures with a non-2xx status and a JSON body such as
``{"message": ..., "missing_fields": [...], "server_error": ...}``. This module
folds the transport outcome and that body into a single result: the parsed
body (or the raw response for downloads) on success, a raised ``ApiError`` on
failure.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ConfigDict

from nylas_sdk.api.options import ResolvedHttpOptions
from nylas_sdk.api.versioning import get_warning_for_version
from nylas_sdk.config import SUPPORTED_API_VERSION
from nylas_sdk.exceptions import ApiError, ResponseParseError, TransportError

logger = structlog.get_logger()

API_VERSION_HEADER = "nylas-api-version"
DEFAULT_ERROR_MESSAGE = "Request failed"


class ErrorBody(BaseModel):
    """Optional error fields carried by a failed response body."""

    model_config = ConfigDict(extra="ignore")

    message: Any = None
    missing_fields: Any = None
    server_error: Any = None


def _format_field(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def parse_body(response: httpx.Response, strict: bool) -> Any:
    """Decode a response body.

    Args:
        response: The received response.
        strict: When True the body must be valid JSON. When False an empty
            body decodes to ``{}`` and a non-JSON body is returned as text.

    Raises:
        ResponseParseError: If ``strict`` and the body is not valid JSON.
    """
    if strict:
        try:
            return json.loads(response.text)
        except ValueError as exc:
            raise ResponseParseError(f"Response body is not valid JSON: {exc}") from exc

    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def build_error_message(body: Any, base_message: str | None, fallback_message: str) -> str:
    """Compose the error message for a failed response.

    Args:
        body: Decoded response body; only mappings are inspected.
        base_message: Message of a transport-level error, if any.
        fallback_message: Used when neither the error nor the body has a message.
    """
    fields = ErrorBody.model_validate(body) if isinstance(body, dict) else ErrorBody()

    message = base_message or (str(fields.message) if fields.message else fallback_message)
    if fields.missing_fields:
        message = f"{fields.message}: {_format_field(fields.missing_fields)}"
    if fields.server_error:
        message = f"{message} (Server Error: {_format_field(fields.server_error)})"
    return message


def check_api_version(response: httpx.Response) -> str:
    """Log a warning when the server runs a different API version than the SDK."""
    api_version = response.headers.get(API_VERSION_HEADER)
    warning = get_warning_for_version(SUPPORTED_API_VERSION, api_version)
    if warning:
        logger.warning(
            "api_version_mismatch",
            sdk_api_version=SUPPORTED_API_VERSION,
            api_version=api_version,
            warning=warning,
        )
    return warning


def normalize_response(
    options: ResolvedHttpOptions,
    response: httpx.Response | None,
    error: BaseException | None = None,
    fallback_message: str = DEFAULT_ERROR_MESSAGE,
) -> Any:
    """Turn a transport outcome into a result.

    Args:
        options: Options the request was sent with.
        response: The received response, or None if nothing was received.
        error: Transport-level error reported alongside the response, if any.
        fallback_message: Error message used when nothing better is available.

    Returns:
        The ``httpx.Response`` itself for download requests, otherwise the
        decoded body.

    Raises:
        TransportError: If no response was received.
        ResponseParseError: If a non-JSON request's body is not valid JSON.
        ApiError: If the request failed.
    """
    if response is None:
        message = str(error) if error is not None and str(error) else "No response"
        raise TransportError(message) from error

    check_api_version(response)

    # Non-JSON requests (raw MIME) still carry JSON error bodies as plain text.
    body = parse_body(response, strict=not options.use_json)

    if error is None and response.status_code <= 299:
        if options.binary:
            return response
        return body

    base_message = str(error) if error is not None else None
    raise ApiError(
        build_error_message(body, base_message, fallback_message),
        status_code=response.status_code,
    )
