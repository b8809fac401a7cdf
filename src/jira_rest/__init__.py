"""Async client for the Jira REST APIs."""

from ._client import JiraClient
from ._config import DefaultConfig, HostedConfig, JiraConfig, validate_config
from ._dispatcher import Dispatcher, RequestDispatcher, normalize_response
from ._retry import RetryingDispatcher
from ._transports import (
    HostApi,
    HostedTransport,
    HostRequester,
    HttpxTransport,
    Transport,
    TransportRequest,
    TransportResponse,
)
from ._transports._factory import create_transport
from ._utils import Endpoint, HttpMethod, RequestOptions, RequestSpec
from .models import (
    ConfigurationError,
    ErrorDetail,
    ErrorKind,
    JiraError,
    JiraFailure,
    JiraResult,
    JiraResultError,
    JiraSuccess,
    MalformedRequestError,
    TransportError,
)

__all__ = [
    "ConfigurationError",
    "DefaultConfig",
    "Dispatcher",
    "Endpoint",
    "ErrorDetail",
    "ErrorKind",
    "HostApi",
    "HostRequester",
    "HostedConfig",
    "HostedTransport",
    "HttpMethod",
    "HttpxTransport",
    "JiraClient",
    "JiraConfig",
    "JiraError",
    "JiraFailure",
    "JiraResult",
    "JiraResultError",
    "JiraSuccess",
    "MalformedRequestError",
    "RequestDispatcher",
    "RequestOptions",
    "RequestSpec",
    "RetryingDispatcher",
    "Transport",
    "TransportError",
    "TransportRequest",
    "TransportResponse",
    "create_transport",
    "normalize_response",
    "validate_config",
]
