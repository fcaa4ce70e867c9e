"""HTTP request pipeline: descriptor translation, version checks, response normalization."""

from nylas_sdk.api.connection import NylasConnection
from nylas_sdk.api.options import RequestDescriptor, ResolvedHttpOptions, build_request_options
from nylas_sdk.api.responses import normalize_response
from nylas_sdk.api.versioning import get_warning_for_version

__all__ = [
    "NylasConnection",
    "RequestDescriptor",
    "ResolvedHttpOptions",
    "build_request_options",
    "get_warning_for_version",
    "normalize_response",
]
