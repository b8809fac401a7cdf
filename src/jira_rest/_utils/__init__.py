from ._endpoint import Endpoint
from ._headers import basic_auth_header, bearer_auth_header, build_headers
from ._logs import setup_logging
from ._multipart import encode_multipart
from ._query import build_query, build_url
from ._request_options import RequestOptions
from ._request_spec import HttpMethod, RequestSpec

__all__ = [
    "Endpoint",
    "HttpMethod",
    "RequestOptions",
    "RequestSpec",
    "basic_auth_header",
    "bearer_auth_header",
    "build_headers",
    "build_query",
    "build_url",
    "encode_multipart",
    "setup_logging",
]
