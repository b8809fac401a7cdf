"""Response decoding strategies keyed by media type."""

import json
from typing import Any, Callable

from .constants import MEDIA_TYPE_JSON

Decoder = Callable[[bytes], Any]


def decode_json(content: bytes) -> Any:
    return json.loads(content)


def decode_text(content: bytes) -> str:
    return content.decode("utf-8")


def decode_binary(content: bytes) -> bytes:
    return content


DECODERS: dict[str, Decoder] = {
    MEDIA_TYPE_JSON: decode_json,
    "text/plain": decode_text,
    "text/html": decode_text,
    "text/csv": decode_text,
    "application/xml": decode_text,
    "application/octet-stream": decode_binary,
}


def media_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def get_decoder(content_type: str | None) -> Decoder:
    """Look up the decoder for a ``Content-Type`` header value.

    A missing content type is treated as JSON, the API's wire format.
    Structured-syntax suffixes (``application/problem+json``) decode as JSON,
    other ``text/*`` types as text, and anything else is passed through as bytes.
    """
    kind = media_type(content_type)
    if not kind:
        return decode_json
    if kind in DECODERS:
        return DECODERS[kind]
    if kind.endswith("+json"):
        return decode_json
    if kind.startswith("text/"):
        return decode_text
    return decode_binary
