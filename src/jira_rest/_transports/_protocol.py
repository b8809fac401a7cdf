"""Transport protocols shared by the direct and hosted modes."""

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional, Protocol, Union, runtime_checkable

from httpx import Headers


@dataclass(frozen=True)
class TransportRequest:
    """A fully formed request handed to a transport."""

    method: str
    url: str
    headers: Headers
    content: Union[str, bytes, None] = None
    timeout: Optional[float] = None
    act_as: Optional[Literal["user", "app"]] = None


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""
    reason_phrase: str = ""


@runtime_checkable
class Transport(Protocol):
    """Executes a request and returns status, headers and the raw body.

    Implementations raise :class:`~jira_rest.models.errors.TransportError` when
    no HTTP status could be obtained (DNS failure, refused connection, timeout).
    """

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers every request starts from, authentication included."""
        ...

    async def send(self, request: TransportRequest) -> TransportResponse:
        ...

    async def aclose(self) -> None:
        ...


@runtime_checkable
class HostRequester(Protocol):
    async def request_jira(
        self,
        path: str,
        *,
        method: str,
        headers: dict[str, str],
        content: Union[str, bytes, None] = None,
    ) -> Any:
        """Execute a request against the host's Jira site.

        The returned object must expose ``status_code``, ``headers`` and
        ``content`` (bytes or str).
        """
        ...


@runtime_checkable
class HostApi(Protocol):
    """Request capability provided by an embedding host runtime."""

    def as_user(self) -> HostRequester:
        ...

    def as_app(self) -> HostRequester:
        ...
