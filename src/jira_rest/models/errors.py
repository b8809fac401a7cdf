from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    MALFORMED_REQUEST = "MalformedRequest"
    TRANSPORT_FAILURE = "TransportFailure"
    REMOTE_REJECTED = "RemoteRejected"
    DECODE_FAILURE = "DecodeFailure"


class JiraError(Exception):
    """Base class for errors raised by the client."""


class MalformedRequestError(JiraError, ValueError):
    """Raised before any network activity when a request spec is invalid."""

    kind = ErrorKind.MALFORMED_REQUEST


class TransportError(JiraError):
    """Raised by a transport when no HTTP status could be obtained."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(JiraError, ValueError):
    pass


class BaseUrlMissingError(ConfigurationError):
    def __init__(
        self,
        message="Jira base URL is required. Pass base_url or set the JIRA_BASE_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class CredentialsMissingError(ConfigurationError):
    def __init__(
        self,
        message="Jira credentials are required. Set JIRA_EMAIL and JIRA_API_TOKEN, or JIRA_ACCESS_TOKEN.",
    ):
        self.message = message
        super().__init__(self.message)


class JiraResultError(JiraError):
    """Raised by ``JiraFailure.unwrap()``.

    Attributes:
        kind: The failure category.
        status_code: HTTP status of the failed call, 0 when none was obtained.
        payload: Structured error body returned by Jira, if any.
    """

    def __init__(self, message: str, kind: ErrorKind, status_code: int, payload: Any):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"{kind.value} ({status_code}): {message}")
