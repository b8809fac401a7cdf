from logging import getLogger

from httpx import USE_CLIENT_DEFAULT, AsyncClient, Headers, HTTPError

from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import LOGGER_NAME
from ..models.errors import TransportError
from ._protocol import TransportRequest, TransportResponse


class HttpxTransport:
    """Direct transport: sends requests to Jira with ``httpx``."""

    def __init__(
        self,
        base_url: str,
        auth_headers: dict[str, str],
        *,
        timeout: float,
        client: AsyncClient | None = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._auth_headers = auth_headers

        if client is None:
            client_kwargs = {
                **get_httpx_client_kwargs(timeout),  # SSL, timeout, redirects
                "base_url": base_url,
            }
            client = AsyncClient(**client_kwargs)
        self._client = client

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._auth_headers)

    async def send(self, request: TransportRequest) -> TransportResponse:
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
                timeout=(
                    request.timeout
                    if request.timeout is not None
                    else USE_CLIENT_DEFAULT
                ),
            )
        except HTTPError as e:
            self._logger.debug(
                f"Transport failure: {request.method} {request.url}: {e!r}"
            )
            raise TransportError(str(e) or type(e).__name__) from e

        return TransportResponse(
            status_code=response.status_code,
            headers=Headers(response.headers),
            content=response.content,
            reason_phrase=response.reason_phrase,
        )

    async def aclose(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()
