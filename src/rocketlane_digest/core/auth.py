"""
HTTP Basic authentication for inbound webhooks.
"""

import base64
import binascii

BASIC_SCHEME_PREFIX = "Basic "


def decode_basic_credentials(auth_header: str | None) -> tuple[str, str] | None:
    """
    Decode an ``Authorization: Basic`` header into ``(username, password)``.

    Returns None for a missing header, another scheme, bad base64, non UTF-8
    bytes or a payload without a ``:`` separator. The password may contain
    colons; only the first one separates it from the username.
    """
    if not auth_header or not auth_header.startswith(BASIC_SCHEME_PREFIX):
        return None

    encoded = auth_header[len(BASIC_SCHEME_PREFIX):].strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None

    username, separator, password = decoded.partition(":")
    if not separator:
        return None

    return username, password


def validate_basic_auth(
    auth_header: str | None,
    expected_username: str | None,
    expected_password: str | None,
) -> bool:
    """
    Check an Authorization header against the expected credentials.

    Never raises. Unset expected credentials reject every request.
    """
    if not expected_username or not expected_password:
        return False

    credentials = decode_basic_credentials(auth_header)
    if credentials is None:
        return False

    username, password = credentials
    return username == expected_username and password == expected_password


def encode_basic_credentials(username: str, password: str) -> str:
    """Build an ``Authorization`` header value for the given credentials."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"{BASIC_SCHEME_PREFIX}{token}"
