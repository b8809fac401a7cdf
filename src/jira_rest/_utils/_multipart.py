from typing import Any

from httpx import Request

from .constants import HEADER_CONTENT_TYPE


def encode_multipart(files: Any, data: Any = None) -> tuple[bytes, str]:
    """Encode multipart/form-data with httpx and return ``(body, content_type)``.

    ``files`` takes any shape httpx accepts, for example
    ``[("file", ("report.txt", b"...", "text/plain"))]``.
    """
    request = Request("POST", "http://localhost", files=files, data=data)
    return request.read(), request.headers[HEADER_CONTENT_TYPE]
