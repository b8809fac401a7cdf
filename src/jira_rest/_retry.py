from datetime import datetime
from email.utils import parsedate_to_datetime
from logging import getLogger
from typing import Any, Callable, Mapping, Optional

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from ._dispatcher import RequestDispatcher
from ._utils._request_options import RequestOptions
from ._utils._request_spec import HttpMethod, RequestSpec
from ._utils.constants import HEADER_RETRY_AFTER, LOGGER_NAME
from .models.errors import ErrorKind
from .models.result import JiraResult

IDEMPOTENT_METHODS = frozenset({HttpMethod.GET, HttpMethod.PUT, HttpMethod.DELETE})


def is_retryable_result(result: JiraResult[Any]) -> bool:
    if result.ok:
        return False
    if result.error.kind == ErrorKind.TRANSPORT_FAILURE:
        return True
    if result.error.kind == ErrorKind.REMOTE_REJECTED:
        return result.status == 429 or 500 <= result.status < 600
    return False


def parse_retry_after(headers: Mapping[str, str], default: float = 1.0) -> float:
    """Parse a Retry-After header (RFC 7231), in seconds or as an HTTP date.

    Returns:
        float: Seconds to wait, never negative; ``default`` if missing or invalid.
    """
    retry_after = None
    for key, value in headers.items():
        if key.lower() == HEADER_RETRY_AFTER.lower():
            retry_after = value
            break
    if not retry_after:
        return default

    try:
        return max(float(retry_after), 0.0)
    except ValueError:
        pass

    try:
        retry_date = parsedate_to_datetime(retry_after)
        delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
        return max(delta, 0.0)
    except (ValueError, TypeError):
        return default


class RetryingDispatcher:
    """Retries transient failures of idempotent calls on top of a dispatcher.

    Transport failures, 429 and 5xx responses of GET, PUT and DELETE calls are
    retried. Rate-limited responses wait for ``Retry-After``; everything else
    backs off exponentially. Once attempts are exhausted the last result is
    returned as is.
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        *,
        max_attempts: int = 3,
        wait: Optional[Callable[[RetryCallState], float]] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._dispatcher = dispatcher
        self._max_attempts = max_attempts
        self._wait = wait or self._default_wait
        self._backoff = wait_exponential(multiplier=1, min=1, max=10)

    def _default_wait(self, retry_state: RetryCallState) -> float:
        result = retry_state.outcome.result() if retry_state.outcome else None
        if result is not None and not result.ok and result.status == 429:
            return parse_retry_after(result.headers)
        return self._backoff(retry_state)

    def _before_sleep(self, retry_state: RetryCallState) -> None:
        result = retry_state.outcome.result() if retry_state.outcome else None
        reason = result.error.kind.value if result is not None else "error"
        self._logger.warning(
            f"Retrying after {reason} (status {getattr(result, 'status', 0)}), "
            f"attempt {retry_state.attempt_number}/{self._max_attempts}"
        )

    async def dispatch(
        self, spec: RequestSpec, options: Optional[RequestOptions] = None
    ) -> JiraResult[Any]:
        if spec.method not in IDEMPOTENT_METHODS or self._max_attempts <= 1:
            return await self._dispatcher.dispatch(spec, options)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=retry_if_result(is_retryable_result),
            before_sleep=self._before_sleep,
            retry_error_callback=lambda retry_state: retry_state.outcome.result(),
        )
        return await retrying(self._dispatcher.dispatch, spec, options)
