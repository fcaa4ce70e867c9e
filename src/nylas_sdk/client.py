"""Top-level Nylas client.

``Nylas`` holds the application configuration, hands out per-account
connections and exposes the application-level endpoints (accounts, webhooks,
application details) and the hosted OAuth helpers.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from nylas_sdk.api.connection import NylasConnection, RequestCallback
from nylas_sdk.api.options import RequestDescriptor
from nylas_sdk.config import DEFAULT_API_SERVER, NylasConfig
from nylas_sdk.exceptions import ConfigurationError, InvalidArgumentError
from nylas_sdk.models import Account, ManagementAccount, Webhook
from nylas_sdk.models.collections import ManagementModelCollection, RestfulModelCollection
from nylas_sdk.oauth.flow import build_authentication_url, exchange_code_for_token

logger = structlog.get_logger()


class Nylas:
    """Entry point for a Nylas application.

    Example:
        >>> nylas = Nylas(client_id="id", client_secret="secret")
        >>> url = nylas.url_for_authentication(redirect_uri="https://example.com/cb")
        >>> token = await nylas.exchange_code_for_token(code)
        >>> threads = await nylas.with_access_token(token).threads.list()
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        api_server: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            client_id: Application client ID.
            client_secret: Application client secret.
            api_server: Fully qualified API server URL.
            transport: Optional httpx transport shared by every connection.
        """
        self.config = NylasConfig()
        self.transport = transport
        self.accounts: RestfulModelCollection[Any] | None = None
        self.webhooks: ManagementModelCollection[Webhook] | None = None

        if client_id or client_secret or api_server:
            self.configure(client_id, client_secret, api_server)

    def configure(
        self,
        client_id: str | None,
        client_secret: str | None,
        api_server: str | None = None,
    ) -> Nylas:
        """Store the application credentials and rebuild application-level collections.

        Args:
            client_id: Application client ID. Ignored when empty.
            client_secret: Application client secret. Ignored when empty.
            api_server: Fully qualified API server URL. Defaults to the
                production server.

        Returns:
            This client, for chaining.

        Raises:
            InvalidArgumentError: If ``api_server`` is not a fully qualified URL.
        """
        if api_server and "://" not in api_server:
            raise InvalidArgumentError("Please specify a fully qualified URL for the API Server.")

        if client_id:
            self.config.client_id = client_id
        if client_secret:
            self.config.client_secret = client_secret
        self.config.api_server = api_server or DEFAULT_API_SERVER

        conn = NylasConnection(
            self.config.client_secret,
            self.config,
            client_id=self.config.client_id,
            transport=self.transport,
        )
        self.webhooks = ManagementModelCollection(Webhook, conn, self.config.client_id or "")
        if self.client_credentials():
            self.accounts = ManagementModelCollection(
                ManagementAccount, conn, self.config.client_id or ""
            )
        else:
            self.accounts = RestfulModelCollection(Account, conn)

        logger.info(
            "nylas_configured",
            api_server=self.config.api_server,
            client_credentials=self.client_credentials(),
        )
        return self

    def client_credentials(self) -> bool:
        """Whether both a client ID and a client secret are configured."""
        return bool(self.config.client_id) and bool(self.config.client_secret)

    def with_access_token(self, access_token: str) -> NylasConnection:
        """Open a connection on behalf of one account.

        Raises:
            InvalidArgumentError: If ``access_token`` is empty.
        """
        if not access_token:
            raise InvalidArgumentError("This function requires an access token")
        return NylasConnection(
            access_token,
            self.config,
            client_id=self.config.client_id,
            transport=self.transport,
        )

    async def application(
        self,
        application_name: str | None = None,
        redirect_uris: list[str] | None = None,
    ) -> dict[str, Any]:
        """Fetch the application details, or update them when values are given.

        Args:
            application_name: New application name.
            redirect_uris: New list of allowed OAuth redirect URIs.

        Raises:
            ConfigurationError: If the client ID or secret is missing.
        """
        if not self.config.client_id:
            raise ConfigurationError("This function requires a client_id")
        if not self.config.client_secret:
            raise ConfigurationError("This function requires a client_secret")

        connection = NylasConnection(
            None,
            self.config,
            client_id=self.config.client_id,
            transport=self.transport,
        )
        path = f"/a/{self.config.client_id}"
        if application_name is None and redirect_uris is None:
            descriptor = RequestDescriptor(path=path)
        else:
            descriptor = RequestDescriptor(
                path=path,
                method="PUT",
                body={"application_name": application_name, "redirect_uris": redirect_uris},
            )
        return await connection.request(descriptor)

    def url_for_authentication(
        self,
        redirect_uri: str | None = None,
        login_hint: str | None = "",
        state: str | None = None,
        scopes: list[str] | None = None,
    ) -> str:
        """Build the hosted OAuth URL. See ``build_authentication_url``."""
        return build_authentication_url(
            self.config,
            redirect_uri,
            login_hint=login_hint,
            state=state,
            scopes=scopes,
        )

    async def exchange_code_for_token(
        self,
        code: str | None,
        callback: RequestCallback | None = None,
    ) -> str:
        """Exchange an authorization code for an access token. See ``exchange_code_for_token``."""
        return await exchange_code_for_token(
            self.config,
            code,
            callback=callback,
            transport=self.transport,
        )
