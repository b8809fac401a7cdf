from ._hosted_transport import HostedTransport
from ._httpx_transport import HttpxTransport
from ._protocol import (
    HostApi,
    HostRequester,
    Transport,
    TransportRequest,
    TransportResponse,
)

__all__ = [
    "HostApi",
    "HostRequester",
    "HostedTransport",
    "HttpxTransport",
    "Transport",
    "TransportRequest",
    "TransportResponse",
]
