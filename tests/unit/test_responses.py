"""Unit tests for response normalization."""

import httpx
import pytest
from structlog.testing import capture_logs

from nylas_sdk.api.options import ResolvedHttpOptions
from nylas_sdk.api.responses import build_error_message, normalize_response, parse_body
from nylas_sdk.exceptions import ApiError, ResponseParseError, TransportError


def _options(**overrides) -> ResolvedHttpOptions:
    values = {"method": "GET", "url": "https://api.test.nylas.com/threads"}
    values.update(overrides)
    return ResolvedHttpOptions(**values)


class TestNormalizeResponse:
    """Test suite for normalize_response."""

    def test_success_returns_body(self) -> None:
        response = httpx.Response(200, json={"foo": 1})

        assert normalize_response(_options(), response) == {"foo": 1}

    def test_empty_success_body_is_empty_mapping(self) -> None:
        assert normalize_response(_options(), httpx.Response(200)) == {}

    def test_download_returns_response(self) -> None:
        response = httpx.Response(
            200,
            content=b"\x89PNG\r\n",
            headers={"Content-Type": "image/png"},
        )

        result = normalize_response(_options(binary=True), response)

        assert result is response
        assert result.content == b"\x89PNG\r\n"
        assert result.headers["content-type"] == "image/png"

    def test_missing_response_raises_transport_error(self) -> None:
        cause = httpx.ConnectError("connection refused")

        with pytest.raises(TransportError, match="connection refused") as exc_info:
            normalize_response(_options(), None, cause)

        assert exc_info.value.__cause__ is cause

    def test_missing_response_without_error(self) -> None:
        with pytest.raises(TransportError, match="No response"):
            normalize_response(_options(), None)

    def test_missing_fields_are_appended(self) -> None:
        response = httpx.Response(404, json={"message": "not found", "missing_fields": ["x"]})

        with pytest.raises(ApiError) as exc_info:
            normalize_response(_options(), response)

        assert str(exc_info.value) == "not found: x"
        assert exc_info.value.message == "not found: x"
        assert exc_info.value.status_code == 404

    def test_multiple_missing_fields_are_comma_joined(self) -> None:
        response = httpx.Response(
            400,
            json={"message": "Missing fields", "missing_fields": ["to", "subject"]},
        )

        with pytest.raises(ApiError, match="^Missing fields: to,subject$"):
            normalize_response(_options(), response)

    def test_server_error_is_appended(self) -> None:
        response = httpx.Response(
            502,
            json={"message": "Upstream failure", "server_error": "IMAP timeout"},
        )

        with pytest.raises(ApiError) as exc_info:
            normalize_response(_options(), response)

        assert str(exc_info.value) == "Upstream failure (Server Error: IMAP timeout)"
        assert exc_info.value.status_code == 502

    def test_failure_without_message_uses_fallback(self) -> None:
        with pytest.raises(ApiError, match="^Request failed$"):
            normalize_response(_options(), httpx.Response(500, text="<html>oops</html>"))

    def test_custom_fallback_message(self) -> None:
        with pytest.raises(ApiError, match="^No access token in response$"):
            normalize_response(
                _options(),
                httpx.Response(401),
                fallback_message="No access token in response",
            )

    def test_transport_error_with_response_uses_its_message(self) -> None:
        response = httpx.Response(200, json={"message": "ignored"})

        with pytest.raises(ApiError) as exc_info:
            normalize_response(_options(), response, RuntimeError("socket hang up"))

        assert str(exc_info.value) == "socket hang up"
        assert exc_info.value.status_code == 200

    def test_status_299_is_success(self) -> None:
        assert normalize_response(_options(), httpx.Response(299, json={"ok": True})) == {"ok": True}

    def test_status_300_is_failure(self) -> None:
        with pytest.raises(ApiError):
            normalize_response(_options(), httpx.Response(300, json={"message": "moved"}))

    def test_non_json_request_parses_text_body(self) -> None:
        response = httpx.Response(400, text='{"message": "bad raw request"}')

        with pytest.raises(ApiError, match="bad raw request"):
            normalize_response(_options(use_json=False), response)

    def test_non_json_request_with_invalid_body(self) -> None:
        response = httpx.Response(200, text="From: ada@example.com\r\n\r\nhello")

        with pytest.raises(ResponseParseError):
            normalize_response(_options(use_json=False), response)

    def test_version_mismatch_is_logged(self) -> None:
        response = httpx.Response(200, json={}, headers={"Nylas-API-Version": "3.0"})

        with capture_logs() as logs:
            assert normalize_response(_options(), response) == {}

        assert len(logs) == 1
        assert logs[0]["event"] == "api_version_mismatch"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["api_version"] == "3.0"
        assert "update the sdk" in logs[0]["warning"]

    def test_matching_version_is_not_logged(self) -> None:
        response = httpx.Response(200, json={}, headers={"nylas-api-version": "2.1"})

        with capture_logs() as logs:
            normalize_response(_options(), response)

        assert logs == []


class TestParseBody:
    """Test suite for parse_body."""

    def test_lenient_returns_text_for_non_json(self) -> None:
        assert parse_body(httpx.Response(200, text="plain"), strict=False) == "plain"

    def test_strict_rejects_empty_body(self) -> None:
        with pytest.raises(ResponseParseError):
            parse_body(httpx.Response(200), strict=True)


class TestBuildErrorMessage:
    """Test suite for build_error_message."""

    def test_non_mapping_body(self) -> None:
        assert build_error_message(["unexpected"], None, "Request failed") == "Request failed"

    def test_missing_fields_and_server_error(self) -> None:
        body = {"message": "Invalid", "missing_fields": "email", "server_error": "db"}

        assert build_error_message(body, None, "Request failed") == "Invalid: email (Server Error: db)"
