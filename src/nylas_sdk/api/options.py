"""Translation of request descriptors into concrete HTTP options.

A ``RequestDescriptor`` says *what* to request (path, method, query, body).
``build_request_options`` turns it into a ``ResolvedHttpOptions`` carrying the
full URL, credentials and the standard Nylas headers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nylas_sdk import __version__
from nylas_sdk.config import SUPPORTED_API_VERSION, NylasConfig

USER_AGENT = f"Nylas Python SDK v{__version__}"
MANAGEMENT_PATH_PREFIX = "/a/"


class RequestDescriptor(BaseModel):
    """Declarative description of one outbound request."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Path appended to the API server URL")
    method: str | None = Field(default=None, description="HTTP method, GET when omitted")
    headers: dict[str, str] | None = Field(default=None, description="Extra request headers")
    query: dict[str, Any] | None = Field(default=None, description="Query string parameters")
    use_json: bool | None = Field(
        default=None,
        description="Send and parse JSON bodies; True when omitted",
    )
    download_request: bool = Field(
        default=False,
        description="Resolve with the raw response instead of the parsed body",
    )
    form_data: Any = Field(default=None, description="Multipart form fields")
    body: Any = Field(default=None, description="Request payload")


class ResolvedHttpOptions(BaseModel):
    """Transport-ready options produced from a ``RequestDescriptor``."""

    method: str
    url: str
    headers: dict[str, str | None] = Field(default_factory=dict)
    use_json: bool = True
    binary: bool = False
    body: Any = None
    form_data: Any = None
    query: dict[str, Any] | None = None
    auth: tuple[str, str] | None = None


def _normalize_query(query: dict[str, Any]) -> dict[str, Any]:
    normalized = dict(query)
    if "expanded" in normalized:
        # `expanded=True` is shorthand for the API's `view=expanded`.
        if normalized["expanded"] is True:
            normalized["view"] = "expanded"
        del normalized["expanded"]
    return normalized


def build_request_options(
    descriptor: RequestDescriptor,
    config: NylasConfig,
    access_token: str | None = None,
    client_id: str | None = None,
) -> ResolvedHttpOptions:
    """Resolve a request descriptor into HTTP options.

    Args:
        descriptor: The request to resolve. It is not modified.
        config: Credentials and API server of the owning client.
        access_token: Per-account token used for non-management paths.
        client_id: Value of the ``X-Nylas-Client-Id`` header.

    Returns:
        Options ready to be handed to the HTTP transport.
    """
    options = ResolvedHttpOptions(
        method=descriptor.method or "GET",
        url=f"{config.api_server}{descriptor.path}",
        headers=dict(descriptor.headers or {}),
        use_json=descriptor.use_json is not False,
        binary=descriptor.download_request,
    )

    if descriptor.form_data is not None:
        options.form_data = descriptor.form_data
    else:
        options.body = descriptor.body if descriptor.body is not None else {}

    if descriptor.query is not None:
        options.query = _normalize_query(descriptor.query)

    if descriptor.path.startswith(MANAGEMENT_PATH_PREFIX):
        user = config.client_secret
    else:
        user = access_token
    if user:
        options.auth = (user, "")

    if options.headers.get("User-Agent") is None:
        options.headers["User-Agent"] = USER_AGENT
    options.headers["Nylas-API-Version"] = SUPPORTED_API_VERSION
    options.headers["Nylas-SDK-API-Version"] = SUPPORTED_API_VERSION
    options.headers["X-Nylas-Client-Id"] = client_id

    return options
