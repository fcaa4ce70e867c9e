"""API version compatibility checks."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _major_version(version: str) -> int | None:
    """Parse the leading integer of the part before the first ``-``.

    Returns None when there are no leading digits.
    """
    match = _LEADING_INT.match(version.split("-")[0])
    if match is None:
        return None
    return int(match.group(1))


def get_warning_for_version(sdk_api_version: str | None, api_version: str | None) -> str:
    """Describe a mismatch between the SDK's API version and the server's.

    Args:
        sdk_api_version: API version the SDK was built against.
        api_version: Version reported by the ``nylas-api-version`` response header.

    Returns:
        An empty string when the versions match or either one is unknown,
        otherwise a warning naming both versions and, when their major
        numbers differ, which side should be updated.
    """
    if sdk_api_version == api_version or not sdk_api_version or not api_version:
        return ""

    warning = (
        "WARNING: SDK version may not support your Nylas API version."
        f" SDK supports version {sdk_api_version} of the API and your application"
        f" is currently running on version {api_version} of the API."
    )

    api_num = _major_version(api_version)
    sdk_num = _major_version(sdk_api_version)
    if api_num is None or sdk_num is None:
        return warning

    if sdk_num > api_num:
        warning += (
            " Please update the version of the API that your application is using"
            " through the developer dashboard."
        )
    elif api_num > sdk_num:
        warning += " Please update the sdk to ensure it works properly."
    return warning
