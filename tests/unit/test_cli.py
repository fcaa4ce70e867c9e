"""Unit tests for the command-line interface."""

import pytest
import structlog

from nylas_sdk.cli import main


@pytest.fixture(autouse=True)
def reset_structlog():
    """main() configures structlog globally; restore the defaults afterwards."""
    yield
    structlog.reset_defaults()


class TestAuthUrlCommand:
    """Test suite for the auth-url command."""

    def test_prints_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(
            [
                "auth-url",
                "--client-id",
                "abc",
                "--api-server",
                "https://api.test.nylas.com",
                "--redirect-uri",
                "https://x/cb",
                "--scope",
                "email",
                "--scope",
                "calendar",
            ]
        )

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == (
            "https://api.test.nylas.com/oauth/authorize?client_id=abc"
            "&response_type=code&login_hint=&redirect_uri=https://x/cb&scopes=email,calendar"
        )

    def test_missing_client_id_fails(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["auth-url", "--redirect-uri", "https://x/cb"])

        assert exit_code == 1
        assert "client_id" in capsys.readouterr().err

    def test_invalid_api_server_fails(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(
            ["auth-url", "--client-id", "abc", "--api-server", "localhost", "--redirect-uri", "x"]
        )

        assert exit_code == 1
        assert "fully qualified URL" in capsys.readouterr().err


class TestExchangeCodeCommand:
    """Test suite for the exchange-code command."""

    def test_requires_client_secret(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["exchange-code", "--client-id", "abc", "some-code"])

        assert exit_code == 1
        assert "client_secret" in capsys.readouterr().err
