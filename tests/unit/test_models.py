"""Unit tests for data models."""

import pytest

from nylas_sdk.models import (
    Draft,
    EmailParticipant,
    Folder,
    JobStatus,
    Label,
    Message,
    Thread,
)


class TestThread:
    """Test suite for Thread model."""

    def test_thread_from_api(self, sample_thread_data: dict) -> None:
        """Test building a Thread from an API payload."""
        thread = Thread.model_validate(sample_thread_data)

        assert thread.id == "thread123"
        assert thread.subject == "Quarterly planning"
        assert thread.unread is True
        assert thread.participants == [EmailParticipant(name="Ada", email="ada@example.com")]
        assert len(thread.message_ids) == 2

    def test_unknown_fields_are_kept(self, sample_thread_data: dict) -> None:
        thread = Thread.model_validate(sample_thread_data)

        assert thread.model_extra == {"has_attachments": False}


class TestMessage:
    """Test suite for Message model."""

    def test_from_alias(self) -> None:
        message = Message.model_validate(
            {"id": "msg1", "from": [{"name": "Ada", "email": "ada@example.com"}]}
        )

        assert message.from_[0].email == "ada@example.com"

    def test_to_api_uses_aliases_and_skips_ids(self) -> None:
        message = Message(
            id="msg1",
            subject="Hi",
            from_=[EmailParticipant(email="ada@example.com")],
        )

        payload = message.to_api()

        assert "id" not in payload
        assert payload["from"] == [{"name": "", "email": "ada@example.com"}]
        assert payload["subject"] == "Hi"

    def test_participant_requires_email(self) -> None:
        with pytest.raises(Exception):  # Pydantic ValidationError
            EmailParticipant(name="No address")


class TestCollectionNames:
    """Test suite for collection names used to build paths."""

    def test_collection_names(self) -> None:
        assert Draft.collection_name == "drafts"
        assert JobStatus.collection_name == "job-statuses"
        assert Label.collection_name == "labels"
        assert Folder.collection_name == "folders"
