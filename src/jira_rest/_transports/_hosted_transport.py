import asyncio
from logging import getLogger
from typing import Any, Literal, Optional

from httpx import Headers

from .._utils.constants import LOGGER_NAME
from ..models.errors import TransportError
from ._protocol import HostApi, TransportRequest, TransportResponse


class HostedTransport:
    """Delegates requests to a trusted host runtime that owns authentication.

    The host's requester is selected per request: ``request.act_as`` when set,
    otherwise the transport's default principal.
    """

    def __init__(
        self,
        api: HostApi,
        *,
        act_as: Literal["user", "app"] = "user",
        timeout: Optional[float] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._api = api
        self._act_as = act_as
        self._timeout = timeout

    @property
    def default_headers(self) -> dict[str, str]:
        return {}

    async def send(self, request: TransportRequest) -> TransportResponse:
        act_as = request.act_as or self._act_as
        requester = self._api.as_app() if act_as == "app" else self._api.as_user()

        timeout = request.timeout if request.timeout is not None else self._timeout
        try:
            response = await asyncio.wait_for(
                requester.request_jira(
                    request.url,
                    method=request.method,
                    headers=dict(request.headers.items()),
                    content=request.content,
                ),
                timeout,
            )
        except asyncio.TimeoutError as e:
            raise TransportError(f"Host request timed out after {timeout}s") from e
        except Exception as e:
            self._logger.debug(f"Host request failed: {request.method} {request.url}: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

        return _to_transport_response(response)

    async def aclose(self) -> None:
        return None


def _to_transport_response(response: Any) -> TransportResponse:
    content = getattr(response, "content", b"") or b""
    if isinstance(content, str):
        content = content.encode("utf-8")

    return TransportResponse(
        status_code=int(response.status_code),
        headers=Headers(getattr(response, "headers", None) or {}),
        content=content,
        reason_phrase=getattr(response, "reason_phrase", "") or "",
    )
