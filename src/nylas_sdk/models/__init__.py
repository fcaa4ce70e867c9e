"""Data models for the Nylas SDK.

This module contains Pydantic models for the resources exposed by the Nylas
API. Models accept unknown fields so that newer API attributes survive a
round trip through the SDK.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field


class RestfulModel(BaseModel):
    """Base class for every API resource."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    collection_name: ClassVar[str] = ""

    id: Optional[str] = Field(default=None, description="Resource ID")
    object: Optional[str] = Field(default=None, description="Resource type name")
    account_id: Optional[str] = Field(default=None, description="Owning account ID")

    def to_api(self) -> dict[str, Any]:
        """Serialize for a create/update request body."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"id", "object"})


class EmailParticipant(BaseModel):
    """Name and address of a message participant."""

    name: str = Field(default="", description="Display name")
    email: str = Field(description="Email address")


class Thread(RestfulModel):
    """Email thread."""

    collection_name: ClassVar[str] = "threads"

    subject: str = Field(default="", description="Thread subject")
    snippet: str = Field(default="", description="Short preview of the latest message")
    participants: list[EmailParticipant] = Field(default_factory=list)
    message_ids: list[str] = Field(default_factory=list)
    draft_ids: list[str] = Field(default_factory=list)
    unread: bool = Field(default=False, description="Whether the thread has unread messages")
    starred: bool = Field(default=False, description="Whether the thread is starred")
    last_message_timestamp: Optional[int] = Field(default=None)


class Message(RestfulModel):
    """Email message."""

    collection_name: ClassVar[str] = "messages"

    thread_id: Optional[str] = Field(default=None, description="Thread ID")
    subject: str = Field(default="", description="Message subject")
    from_: list[EmailParticipant] = Field(default_factory=list, alias="from")
    to: list[EmailParticipant] = Field(default_factory=list)
    cc: list[EmailParticipant] = Field(default_factory=list)
    bcc: list[EmailParticipant] = Field(default_factory=list)
    reply_to: list[EmailParticipant] = Field(default_factory=list)
    date: Optional[int] = Field(default=None, description="Unix timestamp")
    body: str = Field(default="", description="HTML body")
    snippet: str = Field(default="", description="Short plain text preview")
    unread: bool = Field(default=False)
    starred: bool = Field(default=False)


class Draft(Message):
    """Unsent message."""

    collection_name: ClassVar[str] = "drafts"

    version: Optional[int] = Field(default=None, description="Draft revision, required for updates")
    reply_to_message_id: Optional[str] = Field(default=None)


class File(RestfulModel):
    """File attachment metadata."""

    collection_name: ClassVar[str] = "files"

    filename: Optional[str] = Field(default=None)
    content_type: Optional[str] = Field(default=None)
    size: Optional[int] = Field(default=None, description="Size in bytes")
    content_id: Optional[str] = Field(default=None)


class Contact(RestfulModel):
    """Address book entry."""

    collection_name: ClassVar[str] = "contacts"

    given_name: Optional[str] = Field(default=None)
    surname: Optional[str] = Field(default=None)
    company_name: Optional[str] = Field(default=None)
    emails: list[dict[str, Any]] = Field(default_factory=list)
    phone_numbers: list[dict[str, Any]] = Field(default_factory=list)


class Calendar(RestfulModel):
    """Calendar."""

    collection_name: ClassVar[str] = "calendars"

    name: str = Field(default="")
    description: Optional[str] = Field(default=None)
    read_only: bool = Field(default=False)
    timezone: Optional[str] = Field(default=None)


class Event(RestfulModel):
    """Calendar event."""

    collection_name: ClassVar[str] = "events"

    calendar_id: Optional[str] = Field(default=None)
    title: str = Field(default="")
    description: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    when: dict[str, Any] = Field(default_factory=dict)
    participants: list[dict[str, Any]] = Field(default_factory=list)
    busy: bool = Field(default=True)
    read_only: bool = Field(default=False)


class JobStatus(RestfulModel):
    """Status of an asynchronous outbound job."""

    collection_name: ClassVar[str] = "job-statuses"

    action: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)
    job_status_id: Optional[str] = Field(default=None)
    created_at: Optional[int] = Field(default=None)


class Resource(RestfulModel):
    """Bookable room resource."""

    collection_name: ClassVar[str] = "resources"

    email: Optional[str] = Field(default=None)
    name: Optional[str] = Field(default=None)
    capacity: Optional[str] = Field(default=None)
    building: Optional[str] = Field(default=None)
    floor_name: Optional[str] = Field(default=None)


class Label(RestfulModel):
    """Gmail-style label."""

    collection_name: ClassVar[str] = "labels"

    name: Optional[str] = Field(default=None, description="Canonical name, e.g. inbox")
    display_name: str = Field(default="")


class Folder(Label):
    """IMAP/Exchange-style folder."""

    collection_name: ClassVar[str] = "folders"


class Account(RestfulModel):
    """The account behind an access token."""

    collection_name: ClassVar[str] = "account"

    name: str = Field(default="")
    email_address: str = Field(default="")
    provider: Optional[str] = Field(default=None)
    organization_unit: Optional[str] = Field(default=None, description="label or folder")
    sync_state: Optional[str] = Field(default=None)
    linked_at: Optional[int] = Field(default=None)


class ManagementAccount(RestfulModel):
    """Account as seen through the application management API."""

    collection_name: ClassVar[str] = "accounts"

    email: str = Field(default="")
    billing_state: Optional[str] = Field(default=None)
    sync_state: Optional[str] = Field(default=None)
    trial: bool = Field(default=False)


class Webhook(RestfulModel):
    """Application webhook subscription."""

    collection_name: ClassVar[str] = "webhooks"

    application_id: Optional[str] = Field(default=None)
    callback_url: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None, description="active or inactive")
    triggers: list[str] = Field(default_factory=list)
    version: Optional[str] = Field(default=None)


__all__ = [
    "Account",
    "Calendar",
    "Contact",
    "Draft",
    "EmailParticipant",
    "Event",
    "File",
    "Folder",
    "JobStatus",
    "Label",
    "ManagementAccount",
    "Message",
    "Resource",
    "RestfulModel",
    "Thread",
    "Webhook",
]
