"""Collection and instance accessors for API resources.

Collections are thin proxies: each method builds a ``RequestDescriptor`` and
hands it to the owning ``NylasConnection``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx

from nylas_sdk.api.options import RequestDescriptor
from nylas_sdk.models import Calendar, Contact, File, RestfulModel

if TYPE_CHECKING:
    from nylas_sdk.api.connection import NylasConnection

ModelT = TypeVar("ModelT", bound=RestfulModel)


def _payload(data: RestfulModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, RestfulModel):
        return data.to_api()
    return dict(data)


class RestfulModelCollection(Generic[ModelT]):
    """CRUD access to one resource collection, e.g. ``/threads``."""

    def __init__(self, model_class: type[ModelT], connection: NylasConnection) -> None:
        self.model_class = model_class
        self.connection = connection

    @property
    def path(self) -> str:
        return f"/{self.model_class.collection_name}"

    async def list(
        self,
        params: dict[str, Any] | None = None,
        offset: int = 0,
        limit: int = 100,
    ) -> list[ModelT]:
        """List resources matching ``params``.

        Args:
            params: Filter parameters, e.g. ``{"in": "inbox", "expanded": True}``.
            offset: Zero-based index of the first item.
            limit: Maximum number of items.
        """
        query = {**(params or {}), "offset": offset, "limit": limit}
        items = await self.connection.request(RequestDescriptor(path=self.path, query=query))
        return [self.model_class.model_validate(item) for item in items]

    async def first(self, params: dict[str, Any] | None = None) -> ModelT | None:
        items = await self.list(params, offset=0, limit=1)
        return items[0] if items else None

    async def count(self, params: dict[str, Any] | None = None) -> int:
        query = {**(params or {}), "view": "count"}
        body = await self.connection.request(RequestDescriptor(path=self.path, query=query))
        return int(body["count"])

    async def find(self, resource_id: str, params: dict[str, Any] | None = None) -> ModelT:
        body = await self.connection.request(
            RequestDescriptor(path=f"{self.path}/{resource_id}", query=params)
        )
        return self.model_class.model_validate(body)

    async def create(self, data: RestfulModel | dict[str, Any]) -> ModelT:
        body = await self.connection.request(
            RequestDescriptor(path=self.path, method="POST", body=_payload(data))
        )
        return self.model_class.model_validate(body)

    async def update(self, resource_id: str, data: RestfulModel | dict[str, Any]) -> ModelT:
        body = await self.connection.request(
            RequestDescriptor(path=f"{self.path}/{resource_id}", method="PUT", body=_payload(data))
        )
        return self.model_class.model_validate(body)

    async def delete(self, resource_id: str, params: dict[str, Any] | None = None) -> Any:
        return await self.connection.request(
            RequestDescriptor(path=f"{self.path}/{resource_id}", method="DELETE", query=params)
        )


class ManagementModelCollection(RestfulModelCollection[ModelT]):
    """Collection under ``/a/<client_id>``, authenticated with the client secret."""

    def __init__(
        self,
        model_class: type[ModelT],
        connection: NylasConnection,
        client_id: str,
    ) -> None:
        super().__init__(model_class, connection)
        self.client_id = client_id

    @property
    def path(self) -> str:
        return f"/a/{self.client_id}/{self.model_class.collection_name}"


class ContactCollection(RestfulModelCollection[Contact]):
    def __init__(self, connection: NylasConnection) -> None:
        super().__init__(Contact, connection)

    async def groups(self) -> list[dict[str, Any]]:
        """List contact groups."""
        return await self.connection.request(RequestDescriptor(path=f"{self.path}/groups"))


class CalendarCollection(RestfulModelCollection[Calendar]):
    def __init__(self, connection: NylasConnection) -> None:
        super().__init__(Calendar, connection)

    async def free_busy(
        self,
        start_time: int,
        end_time: int,
        emails: list[str],
    ) -> list[dict[str, Any]]:
        """Query busy time slots for a set of email addresses.

        Args:
            start_time: Unix timestamp at the start of the window.
            end_time: Unix timestamp at the end of the window.
            emails: Addresses whose calendars are checked.
        """
        return await self.connection.request(
            RequestDescriptor(
                path=f"{self.path}/free-busy",
                method="POST",
                body={"start_time": str(start_time), "end_time": str(end_time), "emails": emails},
            )
        )


class FileCollection(RestfulModelCollection[File]):
    def __init__(self, connection: NylasConnection) -> None:
        super().__init__(File, connection)

    async def download(self, file_id: str) -> httpx.Response:
        """Download a file's content.

        Returns:
            The raw response; ``content`` holds the bytes and the headers carry
            the content type and file name.
        """
        return await self.connection.request(
            RequestDescriptor(path=f"{self.path}/{file_id}/download", download_request=True)
        )


class RestfulModelInstance(Generic[ModelT]):
    """Accessor for a singleton resource such as ``/account``."""

    def __init__(self, model_class: type[ModelT], connection: NylasConnection) -> None:
        self.model_class = model_class
        self.connection = connection

    @property
    def path(self) -> str:
        return f"/{self.model_class.collection_name}"

    async def get(self, params: dict[str, Any] | None = None) -> ModelT:
        body = await self.connection.request(RequestDescriptor(path=self.path, query=params))
        return self.model_class.model_validate(body)


class Delta:
    """Access to the delta (change feed) endpoints."""

    path = "/delta"

    def __init__(self, connection: NylasConnection) -> None:
        self.connection = connection

    async def latest_cursor(self) -> str:
        """Return a cursor pointing at the current end of the change feed."""
        body = await self.connection.request(
            RequestDescriptor(path=f"{self.path}/latest_cursor", method="POST")
        )
        return body["cursor"]

    async def since(self, cursor: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Fetch one page of changes after ``cursor``.

        Returns:
            A mapping with ``cursor_start``, ``cursor_end`` and ``deltas``.
        """
        query = {**(params or {}), "cursor": cursor}
        return await self.connection.request(RequestDescriptor(path=self.path, query=query))


__all__ = [
    "CalendarCollection",
    "ContactCollection",
    "Delta",
    "FileCollection",
    "ManagementModelCollection",
    "RestfulModelCollection",
    "RestfulModelInstance",
]
