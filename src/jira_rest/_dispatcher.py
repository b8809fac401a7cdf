import json
from logging import getLogger
from typing import Any, Optional, Protocol

from httpx import Headers

from ._transports._protocol import Transport, TransportRequest, TransportResponse
from ._utils._decoders import get_decoder, media_type
from ._utils._headers import build_headers, redact_headers
from ._utils._query import build_url
from ._utils._request_options import RequestOptions
from ._utils._request_spec import RequestSpec
from ._utils.constants import HEADER_CONTENT_TYPE, LOGGER_NAME
from .models.errors import ErrorKind, TransportError
from .models.result import ErrorDetail, JiraFailure, JiraResult, JiraSuccess


class RequestDispatcher:
    """Executes request specs through a transport and normalizes the outcome.

    The dispatcher holds no state between calls and never retries. Expected
    failures (transport errors, non-2xx responses, undecodable bodies) are
    returned as :class:`JiraFailure`; only an invalid spec raises, and it does
    so before any network activity.
    """

    def __init__(self, transport: Transport) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def build_request(
        self, spec: RequestSpec, options: Optional[RequestOptions] = None
    ) -> TransportRequest:
        """Resolve a spec into the request the transport will send.

        Raises:
            MalformedRequestError: If a path parameter is missing.
        """
        options = options or {}

        path = spec.endpoint.resolve(spec.path_params)
        url = build_url(
            path,
            spec.params,
            comma_separated=spec.comma_separated,
            exploded=spec.exploded,
        )

        headers = build_headers(
            self._transport.default_headers,
            content_type=spec.content_type if spec.content is not None else None,
            is_experimental=spec.is_experimental,
            overrides=(spec.headers, options.get("headers")),
        )

        timeout = options.get("timeout")
        if timeout is None:
            timeout = spec.timeout

        return TransportRequest(
            method=spec.method.value,
            url=url,
            headers=headers,
            content=spec.content,
            timeout=float(timeout) if timeout is not None else None,
            act_as=options.get("act_as"),
        )

    async def dispatch(
        self, spec: RequestSpec, options: Optional[RequestOptions] = None
    ) -> JiraResult[Any]:
        request = self.build_request(spec, options)

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {redact_headers(request.headers)}")

        try:
            response = await self._transport.send(request)
        except TransportError as e:
            self._logger.debug(f"Request failed: {request.method} {request.url}")
            return JiraFailure(
                error=ErrorDetail(
                    kind=ErrorKind.TRANSPORT_FAILURE, status=0, message=e.message
                ),
                status=0,
            )

        self._logger.debug(
            f"Response: {response.status_code} {request.method} {request.url}"
        )
        return normalize_response(
            response, is_response_available=spec.is_response_available
        )


def normalize_response(
    response: TransportResponse, *, is_response_available: bool
) -> JiraResult[Any]:
    """Map a raw transport response onto a :data:`JiraResult`."""
    headers = Headers(response.headers)
    header_dict = dict(headers.items())
    status = response.status_code

    if not 200 <= status < 300:
        payload = _parse_error_payload(response.content)
        return JiraFailure(
            error=ErrorDetail(
                kind=ErrorKind.REMOTE_REJECTED,
                status=status,
                message=_error_message(payload, status, response.reason_phrase),
                payload=payload,
            ),
            status=status,
            headers=header_dict,
        )

    if not is_response_available or not response.content.strip():
        return JiraSuccess(value=None, status=status, headers=header_dict)

    content_type = headers.get(HEADER_CONTENT_TYPE)
    decoder = get_decoder(content_type)
    try:
        value = decoder(response.content)
    except (ValueError, RecursionError) as e:
        return JiraFailure(
            error=ErrorDetail(
                kind=ErrorKind.DECODE_FAILURE,
                status=status,
                message=(
                    f"Could not decode response body as "
                    f"'{media_type(content_type) or 'application/json'}': {e}"
                ),
                payload=response.content.decode("utf-8", errors="replace"),
            ),
            status=status,
            headers=header_dict,
        )

    return JiraSuccess(value=value, status=status, headers=header_dict)


def _parse_error_payload(content: bytes) -> Any:
    if not content.strip():
        return None
    try:
        return json.loads(content)
    except (ValueError, RecursionError):
        return content.decode("utf-8", errors="replace")


def _error_message(payload: Any, status: int, reason_phrase: str) -> str:
    if isinstance(payload, dict):
        messages = [str(m) for m in payload.get("errorMessages") or []]
        errors = payload.get("errors")
        if isinstance(errors, dict):
            messages.extend(f"{field}: {error}" for field, error in errors.items())
        if not messages:
            detail = (
                payload.get("message")
                or payload.get("error")
                or payload.get("detail")
            )
            if detail:
                messages.append(str(detail))
        if messages:
            return "; ".join(messages)

    if isinstance(payload, str) and payload.strip():
        return payload.strip()

    return f"HTTP {status} {reason_phrase}".strip()


class Dispatcher(Protocol):
    async def dispatch(
        self, spec: RequestSpec, options: Optional[RequestOptions] = None
    ) -> JiraResult[Any]:
        ...
