import base64
from typing import Mapping

from httpx import Headers

from .constants import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_EXPERIMENTAL_API,
    MEDIA_TYPE_JSON,
)


def basic_auth_header(email: str, api_token: str) -> dict[str, str]:
    encoded = base64.b64encode(f"{email}:{api_token}".encode()).decode("ascii")
    return {HEADER_AUTHORIZATION: f"Basic {encoded}"}


def bearer_auth_header(access_token: str) -> dict[str, str]:
    return {HEADER_AUTHORIZATION: f"Bearer {access_token}"}


def build_headers(
    defaults: Mapping[str, str],
    *,
    content_type: str | None = None,
    is_experimental: bool = False,
    overrides: tuple[Mapping[str, str] | None, ...] = (),
) -> Headers:
    """Layer request headers, later layers winning case-insensitively.

    Order: transport defaults, ``Content-Type`` (only when a body is sent), the
    experimental opt-in header, then each mapping in ``overrides``.
    """
    headers = Headers({HEADER_ACCEPT: MEDIA_TYPE_JSON})
    headers.update(defaults)

    if content_type is not None:
        headers[HEADER_CONTENT_TYPE] = content_type

    if is_experimental:
        headers[HEADER_EXPERIMENTAL_API] = "opt-in"

    for layer in overrides:
        if layer:
            headers.update(layer)

    return headers


def redact_headers(headers: Headers | Mapping[str, str]) -> dict[str, str]:
    return {
        key: ("***" if key.lower() == HEADER_AUTHORIZATION.lower() else value)
        for key, value in headers.items()
    }
