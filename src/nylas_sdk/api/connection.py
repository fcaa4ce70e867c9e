"""Authenticated connection to the Nylas API.

``NylasConnection`` owns an access token and exposes one collection per
resource type. Every collection call ends up in ``NylasConnection.request``,
which resolves the descriptor, sends exactly one HTTP request and normalizes
the response.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import httpx
import structlog

from nylas_sdk.api.options import RequestDescriptor, ResolvedHttpOptions, build_request_options
from nylas_sdk.api.responses import normalize_response
from nylas_sdk.config import NylasConfig
from nylas_sdk.exceptions import NylasError
from nylas_sdk.models import (
    Account,
    Draft,
    Event,
    Folder,
    JobStatus,
    Label,
    Message,
    Resource,
    Thread,
)
from nylas_sdk.models.collections import (
    CalendarCollection,
    ContactCollection,
    Delta,
    FileCollection,
    RestfulModelCollection,
    RestfulModelInstance,
)

logger = structlog.get_logger()

RequestCallback = Callable[[Exception | None, Any], object]


def _form_value(value: Any) -> Any:
    if isinstance(value, bool):
        return (None, "true" if value else "false")
    if isinstance(value, (str, int, float)):
        return (None, str(value))
    return value


def _multipart_fields(
    form_data: Mapping[str, Any] | Iterable[tuple[str, Any]],
) -> list[tuple[str, Any]]:
    """Flatten form data into multipart parts.

    Plain values become parts without a file name so the body is always
    multipart, even when no file is attached.
    """
    pairs = form_data.items() if isinstance(form_data, Mapping) else form_data
    return [(name, _form_value(value)) for name, value in pairs]


class NylasConnection:
    """Connection to the Nylas API on behalf of one account or application.

    Args:
        access_token: Account access token. Management paths (``/a/...``)
            authenticate with the client secret instead.
        config: Credentials and API server shared with the owning client.
        client_id: Sent as ``X-Nylas-Client-Id``. Defaults to ``config.client_id``.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        access_token: str | None,
        config: NylasConfig,
        client_id: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.access_token = access_token
        self.config = config
        self.client_id = client_id if client_id is not None else config.client_id
        self._transport = transport

        self.threads = RestfulModelCollection(Thread, self)
        self.contacts = ContactCollection(self)
        self.messages = RestfulModelCollection(Message, self)
        self.drafts = RestfulModelCollection(Draft, self)
        self.files = FileCollection(self)
        self.calendars = CalendarCollection(self)
        self.job_statuses = RestfulModelCollection(JobStatus, self)
        self.events = RestfulModelCollection(Event, self)
        self.resources = RestfulModelCollection(Resource, self)
        self.deltas = Delta(self)
        self.labels = RestfulModelCollection(Label, self)
        self.folders = RestfulModelCollection(Folder, self)
        self.account = RestfulModelInstance(Account, self)

    def request_options(self, descriptor: RequestDescriptor) -> ResolvedHttpOptions:
        """Resolve a descriptor with this connection's credentials."""
        return build_request_options(
            descriptor,
            self.config,
            access_token=self.access_token,
            client_id=self.client_id,
        )

    async def request(
        self,
        descriptor: RequestDescriptor,
        callback: RequestCallback | None = None,
    ) -> Any:
        """Send a request and return its normalized result.

        Args:
            descriptor: The request to send.
            callback: Optional legacy completion callback, called with
                ``(error, None)`` before the error is raised or with
                ``(None, result)`` before the result is returned.

        Returns:
            The decoded body, or the ``httpx.Response`` for download requests.

        Raises:
            TransportError: If no response was received or it could not be read.
            ApiError: If the API reported a failure.
            ResponseParseError: If a non-JSON request's body is not valid JSON.
        """
        options = self.request_options(descriptor)
        logger.debug("nylas_request_started", method=options.method, path=descriptor.path)

        response: httpx.Response | None = None
        transport_error: httpx.RequestError | None = None
        try:
            response = await self._send(options)
        except httpx.RequestError as exc:
            transport_error = exc

        try:
            result = normalize_response(options, response, transport_error)
        except NylasError as exc:
            logger.warning(
                "nylas_request_failed",
                method=options.method,
                path=descriptor.path,
                status_code=response.status_code if response is not None else None,
                error=str(exc),
            )
            if callback is not None:
                callback(exc, None)
            raise

        logger.debug(
            "nylas_request_completed",
            method=options.method,
            path=descriptor.path,
            status_code=response.status_code if response is not None else None,
        )
        if callback is not None:
            callback(None, result)
        return result

    async def _send(self, options: ResolvedHttpOptions) -> httpx.Response:
        headers = {name: value for name, value in options.headers.items() if value is not None}
        auth = httpx.BasicAuth(*options.auth) if options.auth else None

        payload: dict[str, Any] = {}
        if options.form_data is not None:
            payload["files"] = _multipart_fields(options.form_data)
        elif options.use_json:
            payload["json"] = options.body
        elif isinstance(options.body, (str, bytes)):
            payload["content"] = options.body
        else:
            payload["content"] = json.dumps(options.body)

        async with httpx.AsyncClient(transport=self._transport) as client:
            return await client.request(
                options.method,
                options.url,
                params=options.query,
                headers=headers,
                auth=auth,
                **payload,
            )
