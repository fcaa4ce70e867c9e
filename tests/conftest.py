"""Pytest configuration and shared fixtures."""

from typing import Any, Callable, Optional

import httpx
import pytest

TEST_API_SERVER = "https://api.test.nylas.com"


@pytest.fixture
def nylas_config():
    """Provide a fully configured NylasConfig for testing."""
    from nylas_sdk.config import NylasConfig

    return NylasConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        api_server=TEST_API_SERVER,
    )


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Collect the requests seen by a mock transport."""
    return []


@pytest.fixture
def mock_transport(sent_requests: list[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    """Build an httpx.MockTransport that answers every request the same way."""

    def factory(
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
        exception: Optional[Exception] = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if exception is not None:
                raise exception
            if content is not None:
                return httpx.Response(status_code, content=content, headers=headers)
            return httpx.Response(
                status_code,
                json=json if json is not None else {},
                headers=headers,
            )

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def sample_thread_data() -> dict:
    """Provide a thread as returned by the API."""
    return {
        "id": "thread123",
        "object": "thread",
        "account_id": "acct456",
        "subject": "Quarterly planning",
        "snippet": "Let's meet on Thursday",
        "participants": [{"name": "Ada", "email": "ada@example.com"}],
        "message_ids": ["msg1", "msg2"],
        "unread": True,
        "starred": False,
        "last_message_timestamp": 1700000000,
        "has_attachments": False,
    }
