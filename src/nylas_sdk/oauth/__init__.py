"""OAuth helpers for obtaining account access tokens."""

from nylas_sdk.oauth.flow import build_authentication_url, exchange_code_for_token

__all__ = ["build_authentication_url", "exchange_code_for_token"]
