"""Nylas SDK - Python client for the Nylas email, calendar and contacts API.

This package provides an authenticated connection object, typed resource
models and the OAuth helpers needed to obtain per-account access tokens.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from nylas_sdk.api.connection import NylasConnection
from nylas_sdk.api.options import RequestDescriptor
from nylas_sdk.client import Nylas
from nylas_sdk.config import NylasConfig, Settings, get_settings

__all__ = [
    "Nylas",
    "NylasConfig",
    "NylasConnection",
    "RequestDescriptor",
    "Settings",
    "get_settings",
    "__version__",
    "__author__",
]
